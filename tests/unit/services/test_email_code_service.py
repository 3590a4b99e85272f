from __future__ import annotations

import fakeredis
import pytest
import redis

from kindiary.infra.redis.redis_email_code_store import RedisEmailCodeStore
from kindiary.services._shared.ports.email_code_store import email_code_key
from kindiary.services.kindergartens.email_codes import CODE_DIGITS, EmailCodeService

TTL_MS = 180_000


@pytest.fixture
def r():
    return fakeredis.FakeRedis()


@pytest.fixture
def service(r) -> EmailCodeService:
    return EmailCodeService(RedisEmailCodeStore(r), ttl_ms=TTL_MS)


class TestRedisEmailCodeStore:
    def test_save_get_delete(self, r):
        store = RedisEmailCodeStore(r)
        store.save("Hello@HappyPaws.test", "123456", TTL_MS)

        assert store.get("hello@happypaws.test ") == "123456"
        assert 0 < r.pttl("email_code:hello@happypaws.test") <= TTL_MS
        assert store.delete("hello@happypaws.test") is True
        assert store.delete("hello@happypaws.test") is False
        assert store.get("hello@happypaws.test") is None

    def test_non_positive_ttl_never_writes(self, r):
        with pytest.raises(ValueError):
            RedisEmailCodeStore(r).save("a@b.test", "000000", 0)
        assert r.exists(email_code_key("a@b.test")) == 0

    def test_connection_errors_propagate(self, unreachable_redis):
        with pytest.raises(redis.ConnectionError):
            RedisEmailCodeStore(unreachable_redis).get("a@b.test")


def test_issued_code_is_numeric_and_stored(service, r):
    code = service.issue("owner@happypaws.test")

    assert len(code) == CODE_DIGITS and code.isdigit()
    assert r.get("email_code:owner@happypaws.test") == code.encode()


def test_verify_consumes_matching_code(service):
    code = service.issue("owner@happypaws.test")

    assert service.verify("OWNER@happypaws.test", code) is True
    assert service.verify("owner@happypaws.test", code) is False


def test_wrong_code_keeps_pending_one(service):
    code = service.issue("owner@happypaws.test")
    wrong = "999999" if code != "999999" else "000000"

    assert service.verify("owner@happypaws.test", wrong) is False
    assert service.verify("owner@happypaws.test", code) is True


def test_reissue_replaces_previous_code(service, monkeypatch):
    codes = iter(["111111", "222222"])
    monkeypatch.setattr(EmailCodeService, "new_code", staticmethod(lambda: next(codes)))

    service.issue("owner@happypaws.test")
    service.issue("owner@happypaws.test")

    assert service.verify("owner@happypaws.test", "111111") is False
    assert service.verify("owner@happypaws.test", "222222") is True


def test_unknown_address_never_verifies(service):
    assert service.verify("nobody@example.com", "123456") is False
