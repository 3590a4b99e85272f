def is_owner(*, actor_id: int | None, owner_id: int) -> bool:
    """Return ``True`` when the authenticated kindergarten owns the resource.

    Identities may arrive as ``int`` (JWT claim) or ``str`` (URL, cache key).
    """
    if actor_id is None:
        return False
    return int(actor_id) == int(owner_id)
