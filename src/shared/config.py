"""
Application Settings

Central configuration for the Task Management API, loaded from environment
variables (optionally from a .env file via python-dotenv).

Responsibility:
    - Read configuration once per process
    - Provide typed defaults for local development
    - Expose a cached accessor (get_settings) for all layers

Architecture Notes:
    - Part of Shared module (cross-cutting concern)
    - No framework imports, safe to use from every layer
    - Tests override values by setting environment variables and calling
      get_settings.cache_clear()

Environment Variables:
    APP_NAME, APP_VERSION, APP_ENV, LOG_LEVEL
    DATABASE_URL, DATABASE_ECHO, DATABASE_POOL_SIZE
    JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_MINUTES
    CORS_ORIGINS (comma separated)
    SEED_USER_NAME, SEED_USER_EMAIL, SEED_USER_PASSWORD
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Development-only signing secret; refused when APP_ENV=production
DEFAULT_JWT_SECRET = "change-me-in-production-please-use-a-long-secret"


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Attributes:
        app_name: Title shown in OpenAPI docs and logs
        app_version: API version reported by /health
        app_env: "development", "production" or "testing"
        log_level: Root logging level name
        database_url: SQLAlchemy database URL
        database_echo: Log every SQL statement (debug only)
        database_pool_size: Pool size for server databases (ignored by SQLite)
        jwt_secret: HMAC secret used to sign bearer tokens
        jwt_algorithm: JWT signing algorithm (HS256)
        jwt_expire_minutes: Token lifetime in minutes
        cors_origins: Allowed browser origins for the SPA
        seed_user_name: Name of the optional default user created at startup
        seed_user_email: Email of the optional default user (seeding disabled if None)
        seed_user_password: Password of the optional default user

    Raises:
        ValueError: If APP_ENV=production and JWT_SECRET is left at the default

    Examples:
        >>> settings = get_settings()
        >>> settings.database_url
        'sqlite:///./tasks.db'
    """

    app_name: str = "Task Management API"
    app_version: str = "1.0.0"
    app_env: str = "development"
    log_level: str = "INFO"

    database_url: str = "sqlite:///./tasks.db"
    database_echo: bool = False
    database_pool_size: int = 5

    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:4200"])

    seed_user_name: str = "Administrator"
    seed_user_email: str | None = None
    seed_user_password: str | None = None

    def __post_init__(self) -> None:
        if self.is_production and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set when APP_ENV=production")

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Missing variables fall back to the dataclass defaults.

        Returns:
            Settings instance
        """
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            app_version=os.getenv("APP_VERSION", cls.app_version),
            app_env=os.getenv("APP_ENV", cls.app_env),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            database_echo=_get_bool("DATABASE_ECHO", cls.database_echo),
            database_pool_size=int(
                os.getenv("DATABASE_POOL_SIZE", str(cls.database_pool_size))
            ),
            jwt_secret=os.getenv("JWT_SECRET", cls.jwt_secret),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", cls.jwt_algorithm),
            jwt_expire_minutes=int(
                os.getenv("JWT_EXPIRE_MINUTES", str(cls.jwt_expire_minutes))
            ),
            cors_origins=_get_list("CORS_ORIGINS", "http://localhost:4200"),
            seed_user_name=os.getenv("SEED_USER_NAME", cls.seed_user_name),
            seed_user_email=os.getenv("SEED_USER_EMAIL") or None,
            seed_user_password=os.getenv("SEED_USER_PASSWORD") or None,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get process-wide settings (cached).

    Call get_settings.cache_clear() after changing environment variables
    (tests do this through the settings fixtures).
    """
    return Settings.from_env()
