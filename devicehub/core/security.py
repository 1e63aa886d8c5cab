"""
JWT handling for device tokens.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError, ExpiredSignatureError

from devicehub.core.config import settings
from devicehub.core.exceptions import InvalidTokenError, TokenExpiredError


@dataclass(frozen=True)
class TokenData:
    id: int
    enroll_id: str


def create_access_token(device_id: int, enroll_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed token for a device. Expires after ACCESS_TOKEN_EXPIRE_MINUTES by default."""
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    payload = {
        "sub": str(device_id),
        "enroll_id": enroll_id,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """Verify signature and expiry and return the device identity.

    Raises:
        TokenExpiredError: the token was valid but its exp is in the past.
        InvalidTokenError: bad signature, malformed token or missing claims.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidTokenError()

    sub = payload.get("sub")
    enroll_id = payload.get("enroll_id")
    if not sub or not enroll_id:
        raise InvalidTokenError()
    try:
        device_id = int(sub)
    except (TypeError, ValueError):
        raise InvalidTokenError()

    return TokenData(id=device_id, enroll_id=enroll_id)
