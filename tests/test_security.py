"""
Tests for identity token issuance and verification.
"""

import jwt
from pydantic import ValidationError
import pytest

from washlava.core.security import decode_token, extract_bearer_token, issue_token
from washlava.core.setting import Settings


class TestIssueToken:
    """Test token signing."""

    def test_claims_round_trip(self, settings):
        token = issue_token({"email": "a@x.com", "name": "Ann"}, settings)
        claims = decode_token(token, settings)
        assert claims["email"] == "a@x.com"
        assert claims["name"] == "Ann"

    def test_validity_window_is_one_hour(self, settings):
        claims = decode_token(issue_token({"email": "a@x.com"}, settings), settings)
        assert claims["exp"] - claims["iat"] == 3600

    def test_client_cannot_extend_expiry(self, settings):
        token = issue_token({"email": "a@x.com", "exp": 9999999999}, settings)
        claims = decode_token(token, settings)
        assert claims["exp"] - claims["iat"] == 3600

    def test_payload_not_mutated(self, settings):
        payload = {"email": "a@x.com"}
        issue_token(payload, settings)
        assert payload == {"email": "a@x.com"}


class TestDecodeToken:
    """Test token verification failures."""

    def test_wrong_secret_rejected(self, settings):
        other = Settings(_env_file=None, ACCESS_TOKEN_SECRET="another-secret")
        token = issue_token({"email": "a@x.com"}, other)
        with pytest.raises(jwt.InvalidSignatureError):
            decode_token(token, settings)

    def test_expired_token_rejected(self, settings):
        expired = Settings(_env_file=None, ACCESS_TOKEN_SECRET="test-secret", ACCESS_TOKEN_EXPIRE_SECONDS=-60)
        token = issue_token({"email": "a@x.com"}, expired)
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_token(token, settings)

    def test_garbage_rejected(self, settings):
        with pytest.raises(jwt.InvalidTokenError):
            decode_token("not-a-token", settings)

    def test_client_registered_claims_accepted(self, settings):
        token = issue_token({"email": "a@x.com", "aud": "washlava-web", "sub": 42, "jti": 7}, settings)
        claims = decode_token(token, settings)
        assert claims["aud"] == "washlava-web"
        assert claims["sub"] == 42
        assert claims["jti"] == 7

    def test_token_without_exp_rejected(self, settings):
        token = jwt.encode({"email": "a@x.com"}, "test-secret", algorithm="HS256")
        with pytest.raises(jwt.MissingRequiredClaimError):
            decode_token(token, settings)


class TestExtractBearerToken:
    def test_takes_second_part(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_not_checked(self):
        assert extract_bearer_token("Token abc") == "abc"

    def test_extra_whitespace(self):
        assert extract_bearer_token("  Bearer   abc  ") == "abc"

    def test_missing_token(self):
        assert extract_bearer_token("Bearer") == ""
        assert extract_bearer_token("") == ""


def test_missing_secret_is_a_configuration_error(monkeypatch):
    monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
