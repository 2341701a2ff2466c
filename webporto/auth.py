"""Password hashing and signed session tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

DEFAULT_COST = 10
TOKEN_LIFETIME = timedelta(hours=24)
_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
_MAX_PASSWORD_BYTES = 72


class TokenError(ValueError):
    """Raised when a token cannot be accepted."""


@dataclass(frozen=True)
class Claims:
    """The claims carried by a session token."""

    user_id: int = 0
    username: str = ""
    role: str = ""
    subject: str = ""
    jwt_id: str = ""
    expires_at: datetime | None = None
    issued_at: datetime | None = None
    not_before: datetime | None = None


def _string_claim(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key, "")
    if not isinstance(value, str):
        raise TokenError("malformed token")
    return value


def _date_claim(payload: dict[str, Any], key: str) -> datetime | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TokenError("malformed token")
    return datetime.fromtimestamp(value, tz=timezone.utc)


def _claims_from_payload(payload: dict[str, Any]) -> Claims:
    user_id = payload.get("user_id", 0)
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise TokenError("malformed token")
    return Claims(
        user_id=user_id,
        username=_string_claim(payload, "username"),
        role=_string_claim(payload, "role"),
        subject=_string_claim(payload, "sub"),
        jwt_id=_string_claim(payload, "jti"),
        expires_at=_date_claim(payload, "exp"),
        issued_at=_date_claim(payload, "iat"),
        not_before=_date_claim(payload, "nbf"),
    )


class AuthService:
    """Hashes passwords and issues and checks HMAC-signed tokens."""

    def __init__(self, jwt_secret: str):
        self._secret = jwt_secret.encode()

    def hash_password(self, password: str) -> str:
        """Return a bcrypt hash of the password."""
        raw = password.encode()
        if len(raw) > _MAX_PASSWORD_BYTES:
            raise ValueError("bcrypt: password length exceeds 72 bytes")
        return bcrypt.hashpw(raw, bcrypt.gensalt(DEFAULT_COST)).decode()

    def check_password(self, password: str, hashed_password: str) -> bool:
        """Tell whether the password matches the bcrypt hash."""
        raw = password.encode()
        if len(raw) > _MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(raw, hashed_password.encode())
        except ValueError:
            return False

    def generate_token(self, user_id: int, username: str, role: str) -> str:
        """Issue a token valid for 24 hours."""
        now = int(datetime.now(timezone.utc).timestamp())
        payload = {
            "user_id": user_id,
            "username": username,
            "role": role,
            "sub": username,
            "exp": now + int(TOKEN_LIFETIME.total_seconds()),
            "nbf": now,
            "iat": now,
            "jti": f"{user_id}-{now}",
        }
        return jwt.encode(payload, self._secret, algorithm="HS256", headers={"typ": "JWT"})

    def validate_token(self, token_string: str) -> Claims:
        """Check signature and time limits and return the claims, or raise TokenError."""
        if not token_string:
            raise TokenError("empty token")
        try:
            payload = jwt.decode(
                token_string,
                self._secret,
                algorithms=_HMAC_ALGORITHMS,
                options={"verify_iat": False},
            )
        except jwt.ExpiredSignatureError:
            raise TokenError("token expired") from None
        except jwt.ImmatureSignatureError:
            raise TokenError("token not valid yet") from None
        except jwt.InvalidSignatureError:
            raise TokenError("invalid token signature") from None
        except jwt.DecodeError:
            raise TokenError("malformed token") from None
        except jwt.InvalidTokenError as exc:
            raise TokenError(f"token validation error: {exc}") from None
        if not isinstance(payload, dict):
            raise TokenError("invalid token")
        return _claims_from_payload(payload)