# security.py
# Password hashing, bearer tokens, and the FastAPI dependencies guarding admin routes.

from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext

from football_backend.core.config import (
    JWT_ALGORITHM,
    JWT_EXPIRATION_HOURS,
    JWT_ISSUER,
    JWT_SECRET,
)
from football_backend.core.errors import AdminRequired, AuthError, ExpiredToken, InvalidToken
from football_backend.models import User
from football_backend.repositories.record_store import SqlRecordStore, get_record_store

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False so a missing header surfaces as our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, email: str, role: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "iss": JWT_ISSUER,
        "iat": now,
        "exp": now + timedelta(hours=JWT_EXPIRATION_HOURS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Return the claims of a valid token. Raises ExpiredToken / InvalidToken."""
    try:
        return jwt.decode(
            token,
            JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            issuer=JWT_ISSUER,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredToken()
    except jwt.InvalidTokenError:
        raise InvalidToken()


# =========================================
# FastAPI dependencies
# =========================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    store: SqlRecordStore = Depends(get_record_store),
) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Authorization header required")

    claims = decode_access_token(credentials.credentials)
    try:
        user_id = int(claims["sub"])
    except (KeyError, ValueError):
        raise InvalidToken()

    user = store.users.find_by_id(user_id)
    if user is None:
        raise InvalidToken("User for this token no longer exists")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise AdminRequired()
    return user
