from __future__ import annotations

from http import HTTPStatus

from kindiary.core import errors as api_errors
from kindiary.services._shared.errors import (
    AuthorizationError,
    ConflictError,
    InvalidCredentialsError,
    InvalidPasswordConfirmationError,
    NotFoundError,
    RefreshTokenMismatchError,
    ServiceError,
    TokenError,
)
from kindiary.services._shared.policies.common import is_owner
from kindiary.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


def to_api_error(exc: ServiceError) -> api_errors.APIError:
    """
    Map a service-level error to its API-level (HTTP) counterpart.

    :param exc: Exception raised within the service layer.
    :type exc: ServiceError
    :returns: API error ready to be rendered as problem+json.
    :rtype: kindiary.core.errors.APIError
    """
    if isinstance(exc, NotFoundError):
        return api_errors.NotFound(str(exc))

    if isinstance(exc, ConflictError):
        return api_errors.Conflict(str(exc))

    if isinstance(exc, AuthorizationError):
        return api_errors.Forbidden(str(exc))

    # --- 401 family: each cause keeps its own code --------------------------
    if isinstance(exc, TokenError):
        return api_errors.Unauthorized(str(exc), code=exc.kind.code)

    if isinstance(exc, RefreshTokenMismatchError):
        return api_errors.Unauthorized(str(exc), code="invalid_refresh_token")

    if isinstance(exc, InvalidCredentialsError):
        return api_errors.Unauthorized(str(exc), code="invalid_credentials")

    if isinstance(exc, InvalidPasswordConfirmationError):
        return api_errors.APIError(
            message=str(exc),
            status_code=HTTPStatus.BAD_REQUEST,
            code="invalid_password_confirmation",
        )

    # Any other ServiceError subclass → 400 Bad Request
    return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Keep services thin, orchestration-only, no web/ORM leakage.

    Notes
    -----
    Services never touch the global session directly; they always go through
    a Unit of Work.
    """

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """Create a read-write Unit of Work (commits on clean exit)."""
        return SQLAlchemyUnitOfWork()

    def ro_uow(self, *, enforce_db_readonly: bool = True) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :param enforce_db_readonly: Apply ``SET TRANSACTION READ ONLY`` when supported.
        :type enforce_db_readonly: bool
        :returns: Read-only UoW instance.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(enforce_db_readonly=enforce_db_readonly)

    # --------------------------- AuthZ --------------------------------
    def ensure_owner(self, actor_id: int | None, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the current actor is the resource owner.

        :param actor_id: Authenticated kindergarten id.
        :param owner_id: Kindergarten that owns the resource.
        :param msg: Optional custom error message.
        :raises AuthorizationError: If actor is not the owner.
        """
        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise AuthorizationError(msg) if msg else AuthorizationError()
