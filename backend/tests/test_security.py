"""
Tests for password hashing and identity tokens.
"""

import base64
import json

import jwt
import pytest

from app.core.errors import InvalidToken, TokenExpired, AuthenticationFailure
from app.core.passwords import hash_password, verify_password
from app.core.tokens import TokenService

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"
ISSUED_AT = 1_700_000_000
CLAIMS = {"username": "root", "id": "1"}


class FakeClock:
    """Settable clock for expiry tests."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


class TestPasswords:
    """Test bcrypt password hashing."""

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("sekret", rounds=4)
        assert hashed != "sekret"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("sekret", rounds=4) != hash_password("sekret", rounds=4)

    def test_verify_correct_password(self):
        assert verify_password("sekret", hash_password("sekret", rounds=4))

    def test_verify_wrong_password(self):
        assert not verify_password("wrong", hash_password("sekret", rounds=4))

    def test_verify_malformed_hash_is_false(self):
        assert not verify_password("sekret", "not-a-bcrypt-hash")

    def test_verify_empty_inputs_are_false(self):
        assert not verify_password("", hash_password("sekret", rounds=4))
        assert not verify_password("sekret", "")

    def test_cost_factor_is_encoded(self):
        assert hash_password("sekret", rounds=5).split("$")[2] == "05"


class TestTokenService:
    """Test token issue and verification."""

    def test_roundtrip_returns_claims(self):
        service = TokenService(SECRET)
        assert service.verify(service.issue(CLAIMS)) == CLAIMS

    def test_expiry_is_one_hour_after_issue(self):
        service = TokenService(SECRET, clock=FakeClock(ISSUED_AT))
        payload = jwt.decode(service.issue(CLAIMS), SECRET, algorithms=["HS256"], options={"verify_exp": False})
        assert payload["iat"] == ISSUED_AT
        assert payload["exp"] == ISSUED_AT + 3600

    def test_valid_until_expiry(self):
        clock = FakeClock(ISSUED_AT)
        service = TokenService(SECRET, clock=clock)
        token = service.issue(CLAIMS)

        clock.now = ISSUED_AT + 3600
        assert service.verify(token) == CLAIMS

    def test_expired_after_ttl(self):
        clock = FakeClock(ISSUED_AT)
        service = TokenService(SECRET, clock=clock)
        token = service.issue(CLAIMS)

        clock.now = ISSUED_AT + 3601
        with pytest.raises(TokenExpired):
            service.verify(token)

    def test_altered_payload_is_invalid(self):
        service = TokenService(SECRET)
        header, payload, signature = service.issue(CLAIMS).split(".")

        forged = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
        forged["username"] = "admin"
        tampered = ".".join([header, _b64(forged), signature])

        with pytest.raises(InvalidToken):
            service.verify(tampered)

    def test_other_secret_is_invalid(self):
        token = TokenService("another-secret-that-is-long-enough-too").issue(CLAIMS)
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_garbage_is_invalid(self):
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify("not.a.token")

    def test_missing_identity_claims_is_invalid(self):
        token = jwt.encode({"username": "root", "exp": 4_000_000_000}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_missing_expiry_is_invalid(self):
        token = jwt.encode(CLAIMS, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_token_errors_are_authentication_failures(self):
        assert issubclass(InvalidToken, AuthenticationFailure)
        assert issubclass(TokenExpired, AuthenticationFailure)
        assert InvalidToken().to_dict() == {"error": "invalid token"}
        assert TokenExpired().to_dict() == {"error": "token expired"}

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenService("")
