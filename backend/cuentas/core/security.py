"""
Password hashing and JWT helpers, plus the FastAPI auth dependencies.

New hashes are salted (passlib CryptContext). Digests written by the
previous system (unsalted SHA-256, base64) still verify and are flagged for
rehash so they get upgraded on the next successful login.
"""
import base64
import hashlib
import hmac
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from .config import settings
from ..models.base import get_db
from ..models.cuenta import Account
from .permissions import is_admin

logger = logging.getLogger(__name__)

# Length of base64(SHA-256): 32 bytes -> 44 chars with padding
_LEGACY_DIGEST_LENGTH = 44


class PasswordHasher:
    """One-way transform of a plaintext password into its stored form."""

    def __init__(self, schemes=None):
        self._context = CryptContext(schemes=schemes or settings.PASSWORD_SCHEMES, deprecated="auto")

    def hash(self, plaintext: str) -> str:
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, stored: Optional[str]) -> bool:
        if not stored:
            return False
        if self._context.identify(stored, required=False) is None:
            return self._verify_legacy(plaintext, stored)
        try:
            return self._context.verify(plaintext, stored)
        except ValueError:
            # Recognised scheme prefix but a corrupt body
            logger.warning("Stored password hash is malformed")
            return False

    def needs_rehash(self, stored: str) -> bool:
        if self._context.identify(stored, required=False) is None:
            return True
        return self._context.needs_update(stored)

    @staticmethod
    def legacy_digest(plaintext: str) -> str:
        return base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest()).decode("ascii")

    def _verify_legacy(self, plaintext: str, stored: str) -> bool:
        if len(stored) != _LEGACY_DIGEST_LENGTH:
            return False
        return hmac.compare_digest(self.legacy_digest(plaintext), stored)


password_hasher = PasswordHasher()


def get_password_hash(password: str) -> str:
    return password_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return password_hasher.verify(plain_password, hashed_password)


# ── JWT ──────────────────────────────────────────────────────────────────────

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token payload, or None if the token is invalid or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.debug("Rejected access token: %s", exc)
        return None


_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: Session = Depends(get_db),
):
    """Resolve the bearer token to the caller's Account row."""
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized
    payload = decode_access_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise unauthorized
    try:
        account_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise unauthorized
    account = db.get(Account, account_id)
    if account is None:
        raise unauthorized
    return account


def require_admin(current_user=Depends(get_current_user)):
    if not is_admin(current_user.role):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator role required")
    return current_user
