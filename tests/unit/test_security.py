"""
Unit tests for user_backend.core.security
"""
from datetime import timedelta

import bcrypt
import jwt
import pytest
from user_backend.core.exceptions import InvalidTokenError
from user_backend.core.security import (
    TokenCodec,
    hash_password,
)

SECRET = "unit_test_secret_key_that_is_long_enough_0123456789"


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_hash_checks_against_plain(self):
        hashed = hash_password("correct")
        assert bcrypt.checkpw(b"correct", hashed.encode("utf-8"))
        assert not bcrypt.checkpw(b"wrong", hashed.encode("utf-8"))


class TestTokenCodec:
    """Tests for TokenCodec.issue and TokenCodec.verify"""

    def test_issue_and_verify_keeps_claims(self):
        codec = TokenCodec()
        token = codec.issue({"email": "a@b.com", "name": "Ann"}, SECRET, timedelta(minutes=10))
        decoded = codec.verify(token, SECRET)
        assert decoded["email"] == "a@b.com"
        assert decoded["name"] == "Ann"
        assert decoded["exp"] - decoded["iat"] == 600

    def test_expired_token_raises(self):
        codec = TokenCodec()
        token = codec.issue({"email": "a@b.com"}, SECRET, timedelta(seconds=-1))
        with pytest.raises(InvalidTokenError):
            codec.verify(token, SECRET)

    def test_wrong_secret_raises(self):
        codec = TokenCodec()
        token = codec.issue({"email": "a@b.com"}, SECRET, timedelta(minutes=10))
        with pytest.raises(InvalidTokenError):
            codec.verify(token, SECRET + "x")

    def test_tampered_token_raises(self):
        codec = TokenCodec()
        token = codec.issue({"email": "a@b.com"}, SECRET, timedelta(minutes=10))
        header, payload, signature = token.split(".")
        forged_payload = jwt.encode({"email": "evil@b.com"}, "other", algorithm="HS256").split(".")[1]
        with pytest.raises(InvalidTokenError):
            codec.verify(f"{header}.{forged_payload}.{signature}", SECRET)

    def test_malformed_token_raises(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            TokenCodec().verify("invalid.jwt.token", SECRET)
        assert "Invalid token" in str(exc_info.value)
        assert exc_info.value.status_code == 401
