from datetime import datetime, timedelta, timezone

import jwt
import pytest

from webporto.auth import AuthService, TokenError


@pytest.fixture
def service():
    return AuthService("secret")


def test_hash_and_check_password(service):
    password = "password"
    hashed = service.hash_password(password)
    assert hashed.startswith("$2")
    assert hashed != password
    assert service.check_password(password, hashed) is True


def test_check_password_rejects_wrong_password(service):
    password = "password"
    hashed = service.hash_password(password)
    assert service.check_password("placeholder", hashed) is False


def test_check_password_with_malformed_hash(service):
    assert service.check_password("password", "not-a-hash") is False


def test_hash_password_too_long(service):
    with pytest.raises(ValueError):
        service.hash_password("password" * 10)


def test_token_round_trip(service):
    token_string = service.generate_token(7, "alice", "admin")
    claims = service.validate_token(token_string)
    assert claims.user_id == 7
    assert claims.username == "alice"
    assert claims.role == "admin"
    assert claims.subject == "alice"
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)
    assert claims.not_before == claims.issued_at
    assert claims.jwt_id == f"7-{int(claims.issued_at.timestamp())}"


def test_token_header(service):
    header = jwt.get_unverified_header(service.generate_token(1, "bob", "user"))
    assert header["typ"] == "JWT"
    assert header["alg"] == "HS256"


def test_empty_token(service):
    with pytest.raises(TokenError, match="empty token"):
        service.validate_token("")


def test_wrong_secret(service):
    token_string = AuthService("placeholder").generate_token(1, "bob", "user")
    with pytest.raises(TokenError, match="invalid token signature"):
        service.validate_token(token_string)


def test_malformed_token(service):
    with pytest.raises(TokenError, match="malformed token"):
        service.validate_token("abc.def")


def test_expired_token(service):
    past = int((datetime.now(timezone.utc) - timedelta(hours=2)).timestamp())
    token_string = jwt.encode({"user_id": 1, "exp": past}, "secret", algorithm="HS256")
    with pytest.raises(TokenError, match="token expired"):
        service.validate_token(token_string)


def test_not_yet_valid_token(service):
    future = int((datetime.now(timezone.utc) + timedelta(hours=2)).timestamp())
    token_string = jwt.encode({"user_id": 1, "nbf": future}, "secret", algorithm="HS256")
    with pytest.raises(TokenError, match="token not valid yet"):
        service.validate_token(token_string)


def test_wrong_claim_type_is_malformed(service):
    token_string = jwt.encode({"user_id": "seven"}, "secret", algorithm="HS256")
    with pytest.raises(TokenError, match="malformed token"):
        service.validate_token(token_string)


def test_other_hmac_algorithm_accepted(service):
    token_string = jwt.encode({"user_id": 3, "role": "editor"}, "secret", algorithm="HS512")
    claims = service.validate_token(token_string)
    assert claims.user_id == 3
    assert claims.role == "editor"
    assert claims.expires_at is None