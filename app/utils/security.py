# app/utils/security.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from app.config.settings import Settings
from app.utils.exceptions import TokenConfigurationError

logger = logging.getLogger(__name__)

# Number of bcrypt rounds used for every stored password
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (salted, fixed work factor)"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash. Never raises on mismatch."""
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # stored value is not a bcrypt hash
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(data: Dict[str, Any], settings: Settings) -> str:
    """Sign a time-limited bearer token carrying the given claims"""
    if not settings.jwt_secret:
        raise TokenConfigurationError("Token signing secret is not configured")

    to_encode = dict(data)
    if "id" in to_encode and "sub" not in to_encode:
        to_encode["sub"] = str(to_encode["id"])
    to_encode["exp"] = datetime.now(timezone.utc) + settings.jwt_expiration

    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Verify signature and expiry; raises JWTError when either fails"""
    if not settings.jwt_secret:
        raise TokenConfigurationError("Token signing secret is not configured")
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
