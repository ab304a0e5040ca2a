import logging
import os
import uuid
from datetime import datetime, timedelta, UTC
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.crypto.digest import pbkdf2_hmac
from passlib.utils import consteq
from sqlalchemy.orm import Session

from app import config
from app.database import get_db
from app.models.user import User

logger = logging.getLogger(__name__)

SALT_SIZE = 16
KEY_SIZE = 32
ITERATIONS = 120_000

# auto_error=False so a missing header gets the same 401 as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


class TokenError(Exception):
    """Raised when a bearer token fails signature, claim or lifetime checks."""

    def __init__(self, message: str, expired: bool = False):
        super().__init__(message)
        self.expired = expired


def _derive(password: str, salt: bytes) -> bytes:
    return pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS, KEY_SIZE)


def hash_password(password: str) -> tuple[bytes, bytes]:
    """Hash a password with a fresh random salt.

    Returns ``(hash, salt)``; both must be stored to verify the password later.
    """
    salt = os.urandom(SALT_SIZE)
    return _derive(password, salt), salt


def verify_password(password: str, stored_hash: bytes, stored_salt: bytes) -> bool:
    """Recompute the hash for ``password`` and compare it in constant time."""
    return consteq(_derive(password, stored_salt), stored_hash)


def create_token(user: User, expires_delta: Optional[timedelta] = None) -> tuple[str, datetime]:
    # read expiry at call-time so tests (and runtime overrides) that modify
    # app.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = datetime.now(UTC)
    expires_at = now + expires_delta
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "iss": config.JWT_ISSUER,
        "aud": config.JWT_AUDIENCE,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),  # NumericDate: seconds since the epoch
    }
    token = jwt.encode(claims, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)
    return token, expires_at


def decode_token(token: str) -> dict:
    """Validate signature, issuer, audience and lifetime and return the claims."""
    try:
        # jwt.decode validates exp, iss and aud when issuer/audience are given
        return jwt.decode(
            token,
            config.JWT_SECRET_KEY,
            algorithms=[config.JWT_ALGORITHM],
            audience=config.JWT_AUDIENCE,
            issuer=config.JWT_ISSUER,
        )
    except ExpiredSignatureError as exc:
        raise TokenError("Token has expired", expired=True) from exc
    except JWTError as exc:
        raise TokenError("Invalid token") from exc


def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Resolve the bearer token on the request to the owning user or answer 401."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
    except TokenError as exc:
        if exc.expired:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"},
            )
        raise credentials_exception

    try:
        user_id = uuid.UUID(payload.get("sub") or "")
    except ValueError:
        raise credentials_exception

    user = db.get(User, user_id)
    if user is None:
        logger.info("Token subject %s no longer exists", user_id)
        raise credentials_exception
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
