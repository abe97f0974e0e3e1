"""Tests for the process-wide login helpers."""

import pytest

from passwordhasher import InvalidFormat, login
from passwordhasher.login import (default_hasher, login_hash_needs_rehash,
                                  make_login_hash, verify_login_hash)


@pytest.fixture(autouse=True)
def fast_env(monkeypatch):
    monkeypatch.setenv("PASSWORD_HASHER_MEMORY_COST", "1024")
    monkeypatch.setenv("PASSWORD_HASHER_ITERATIONS", "1")
    monkeypatch.setenv("PASSWORD_HASHER_PARALLELISM", "1")
    default_hasher.cache_clear()
    yield
    default_hasher.cache_clear()


class TestLogin:
    def test_make_and_verify(self):
        h = make_login_hash("MySecretPassword123")
        assert h.startswith("$argon2id$v=19$m=1024,t=1,p=1$")
        assert verify_login_hash("MySecretPassword123", h)
        assert not verify_login_hash("wrong", h)

    def test_malformed_stored_hash_raises(self):
        with pytest.raises(InvalidFormat):
            verify_login_hash("pw", "not-a-hash")

    def test_hasher_is_cached(self):
        assert default_hasher() is login.default_hasher()

    def test_needs_rehash_after_settings_change(self, monkeypatch):
        h = make_login_hash("pw")
        assert not login_hash_needs_rehash(h)
        monkeypatch.setenv("PASSWORD_HASHER_ITERATIONS", "2")
        default_hasher.cache_clear()
        assert login_hash_needs_rehash(h)
        assert verify_login_hash("pw", h)
