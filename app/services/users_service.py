import logging
from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config.settings import Settings
from app.models.user import User
from app.repositories import user_repository
from app.schemas import user as user_schema
from app.utils.auth import CurrentUser
from app.utils.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    PermissionDeniedError,
    TokenConfigurationError,
)
from app.utils.security import create_access_token, verify_password

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "User with this email already exists!"
INVALID_CREDENTIALS = "Invalid email or password!"
USER_NOT_FOUND = "User does not exist!"
NOT_AUTHORIZED = "You are not authorized to perform this action!"
LOGGED_OUT = "Logged out successfully"

PUBLIC_FIELDS = ["id", "name", "email", "phone"]


def _token_for(user: User, settings: Settings) -> str:
    return create_access_token(
        {"id": user.id, "name": user.name, "email": user.email, "phone": user.phone},
        settings,
    )


class UsersService:
    @staticmethod
    def register(db: Session, payload: user_schema.UserCreate, settings: Settings) -> Tuple[User, str]:
        """Create an account and return it with a fresh token.

        The lookup only short-circuits the common case; the unique index on
        users.email decides when two registrations race.
        """
        # fail before writing anything if no token could be issued
        if not settings.jwt_secret:
            raise TokenConfigurationError("Token signing secret is not configured")

        existing = user_repository.find_one(db, where={"email": payload.email}, select=PUBLIC_FIELDS)
        if existing:
            raise DuplicateEmailError(DUPLICATE_EMAIL)

        try:
            # the password is hashed by the entity's before_insert hook
            user = user_repository.save(db, payload.model_dump())
        except IntegrityError:
            logger.warning("Duplicate email rejected by the database")
            raise DuplicateEmailError(DUPLICATE_EMAIL)

        logger.info(f"Registered user {user.id}")
        return user, _token_for(user, settings)

    @staticmethod
    def login(db: Session, payload: user_schema.UserLogin, settings: Settings) -> Tuple[User, str]:
        user = user_repository.find_one(db, where={"email": payload.email})

        # same answer whether the email or the password was wrong
        if not user or not verify_password(payload.password, user.password):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError(INVALID_CREDENTIALS)

        return user, _token_for(user, settings)

    @staticmethod
    def logout() -> dict:
        # tokens are stateless; the client drops its copy
        return {"message": LOGGED_OUT}

    @staticmethod
    def update_profile(db: Session, caller: CurrentUser, payload: user_schema.UserUpdate) -> User:
        existing = user_repository.find_one(db, where={"id": caller.id}, select=PUBLIC_FIELDS)
        if not existing:
            raise NotFoundError(USER_NOT_FOUND)

        # the email cannot be changed through this endpoint
        if existing.email != payload.email:
            raise PermissionDeniedError(NOT_AUTHORIZED)

        user = user_repository.update(db, caller.id, payload.model_dump())
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        logger.info(f"Updated profile of user {user.id}")
        return user

    @staticmethod
    def profile(db: Session, caller: CurrentUser) -> User:
        user = user_repository.find_one(db, where={"id": caller.id}, select=PUBLIC_FIELDS)
        if not user:
            raise NotFoundError(USER_NOT_FOUND)
        return user
