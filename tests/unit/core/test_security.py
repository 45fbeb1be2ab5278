"""Tests for password hashing and tokens."""

from datetime import timedelta

import pytest

from app.core.errors import ConfigurationError
from app.core.security import create_access_token, decode_access_token, get_password_hash, verify_password


class TestPasswords:

    def test_hash_verifies(self):
        hashed = get_password_hash("secret1")
        assert hashed != "secret1"
        assert verify_password("secret1", hashed)
        assert not verify_password("wrong", hashed)

    def test_garbage_hash_does_not_verify(self):
        assert not verify_password("secret1", "not-a-hash")


class TestTokens:

    def test_round_trip_claims(self):
        token = create_access_token("coach1", {"role": "coach", "academyId": "a1"})
        claims = decode_access_token(token)
        assert claims["sub"] == "coach1"
        assert claims["academyId"] == "a1"

    def test_expired_token_is_rejected(self):
        token = create_access_token("coach1", expires_delta=timedelta(seconds=-1))
        assert decode_access_token(token) is None

    def test_missing_secret(self, test_settings, monkeypatch):
        monkeypatch.setattr(test_settings, "SECRET_KEY", "")
        with pytest.raises(ConfigurationError):
            create_access_token("coach1")
