# app/config/settings.py
# Process-wide configuration, read once at startup

import os
import re
from datetime import timedelta
from typing import List, Optional

from dotenv import load_dotenv

_EXPIRATION_UNITS = {
    's': 'seconds',
    'm': 'minutes',
    'h': 'hours',
    'd': 'days',
}
_EXPIRATION_PATTERN = re.compile(r'^\s*(\d+)\s*([smhd]?)\s*$')


def parse_expiration(value) -> timedelta:
    """Parse a token lifetime such as "3600", "15m", "1h" or "7d"."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, int):
        return timedelta(seconds=value)

    match = _EXPIRATION_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Invalid token expiration time: {value!r}")

    amount, unit = match.groups()
    return timedelta(**{_EXPIRATION_UNITS.get(unit or 's'): int(amount)})


class Settings:
    """Application settings

    Built once when the process starts and handed to the app factory.
    Nothing else in the application reads the environment.
    """

    def __init__(
        self,
        database_url: str = "sqlite:///./todo.db",
        jwt_secret: Optional[str] = None,
        jwt_algorithm: str = "HS256",
        jwt_expiration="1h",
        cors_origins: Optional[List[str]] = None,
        log_level: str = "INFO",
        db_echo: bool = False,
    ):
        self.database_url = database_url
        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm
        self.jwt_expiration = parse_expiration(jwt_expiration)
        self.cors_origins = cors_origins if cors_origins is not None else ["*"]
        self.log_level = log_level.upper()
        self.db_echo = db_echo

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Load settings from the environment (and a .env file if present)"""
        load_dotenv(env_file)

        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./todo.db"),
            jwt_secret=os.getenv("JWT_SECRET"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expiration=os.getenv("JWT_EXPIRATION_TIME", "1h"),
            cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            db_echo=os.getenv("DB_ECHO", "false").lower() == "true",
        )

    def __repr__(self):
        # never print the secret
        return (
            f"Settings(database_url={self.database_url!r}, jwt_algorithm={self.jwt_algorithm!r}, "
            f"jwt_expiration={self.jwt_expiration!r}, log_level={self.log_level!r})"
        )
