"""
Bloglist Server Configuration

This file contains all server-side configurable settings.
Values are read once from the environment at process start by
Settings.from_env() and handed to create_app(); nothing reads them
from module globals afterwards.
"""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class ServerConfig:
    """Server networking configuration."""
    HOST: str = "0.0.0.0"
    PORT: int = 3003
    CORS_ORIGINS: tuple = (
        "http://localhost:5173",  # Vite default port
        "http://localhost:3000",  # Alternative React port
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    )


@dataclass
class AuthConfig:
    """Password hashing and token signing settings."""
    SECRET: Optional[str] = None
    TOKEN_ALGORITHM: str = "HS256"
    TOKEN_TTL_SECONDS: int = 60 * 60  # one hour
    BCRYPT_ROUNDS: int = 10
    MIN_PASSWORD_LENGTH: int = 3


@dataclass
class DatabaseConfig:
    """Database configuration."""
    DATABASE_URL: str = "sqlite:///./bloglist.db"
    ECHO_SQL: bool = False  # Log SQL queries


@dataclass
class Settings:
    """Main settings container."""
    server: ServerConfig = None
    auth: AuthConfig = None
    database: DatabaseConfig = None

    # Application info
    APP_NAME: str = "Bloglist"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        self.server = self.server or ServerConfig()
        self.auth = self.auth or AuthConfig()
        self.database = self.database or DatabaseConfig()

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from environment variables.

        When APP_ENV is "test", TEST_DATABASE_URL takes precedence over
        DATABASE_URL so test runs never touch the development database.
        """
        env = os.environ if environ is None else environ

        database_url = env.get("DATABASE_URL", DatabaseConfig.DATABASE_URL)
        if env.get("APP_ENV") == "test" and env.get("TEST_DATABASE_URL"):
            database_url = env["TEST_DATABASE_URL"]

        return cls(
            server=ServerConfig(
                HOST=env.get("HOST", ServerConfig.HOST),
                PORT=int(env.get("PORT", ServerConfig.PORT)),
            ),
            auth=AuthConfig(
                SECRET=env.get("SECRET") or None,
                TOKEN_TTL_SECONDS=int(env.get("TOKEN_TTL_SECONDS", AuthConfig.TOKEN_TTL_SECONDS)),
                BCRYPT_ROUNDS=int(env.get("BCRYPT_ROUNDS", AuthConfig.BCRYPT_ROUNDS)),
            ),
            database=DatabaseConfig(
                DATABASE_URL=database_url,
                ECHO_SQL=env.get("ECHO_SQL", "").lower() in ("1", "true", "yes"),
            ),
            DEBUG=env.get("DEBUG", "").lower() in ("1", "true", "yes"),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO").upper(),
        )
