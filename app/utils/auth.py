# app/utils/auth.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import BaseModel, ValidationError

from app.config.settings import Settings
from app.database import get_settings
from app.utils.security import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Caller identity decoded from a verified bearer token"""
    id: int
    name: str
    email: str
    phone: str


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized()

    try:
        payload = decode_access_token(credentials.credentials, settings)
        return CurrentUser(
            id=payload.get("id"),
            name=payload.get("name"),
            email=payload.get("email"),
            phone=payload.get("phone"),
        )
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise _unauthorized()
    except ValidationError:
        logger.info("Rejected bearer token: incomplete identity claims")
        raise _unauthorized()
