"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the API can start
against a local MongoDB without any setup.  In a production deployment
you should override at least ``SECRET`` and ``MONGO_URI``.

Settings are loaded once by ``create_app`` and passed explicitly to the
components that need them.  The instance is frozen so nothing can modify
it after startup.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "Customer Manager API"
    api_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Symmetric secret used to sign access tokens (HMAC-SHA256).
    secret: str = "change_me"
    token_algorithm: str = "HS256"
    token_expire_hours: int = 12

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "customer_manager"
    customers_collection: str = "customers"
    users_collection: str = "users"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Unset variables fall back to the dataclass defaults.  Raises
        ``ValueError`` if ``TOKEN_EXPIRE_HOURS`` is not an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            project_name=env.get("PROJECT_NAME", defaults.project_name),
            api_version=env.get("API_VERSION", defaults.api_version),
            debug=_as_bool(env.get("DEBUG", "false")),
            log_level=env.get("LOG_LEVEL", defaults.log_level),
            log_file=env.get("LOG_FILE") or None,
            secret=env.get("SECRET", defaults.secret),
            token_algorithm=env.get("TOKEN_ALGORITHM", defaults.token_algorithm),
            token_expire_hours=int(env.get("TOKEN_EXPIRE_HOURS", str(defaults.token_expire_hours))),
            mongo_uri=env.get("MONGO_URI", defaults.mongo_uri),
            mongo_db_name=env.get("MONGO_DB_NAME", defaults.mongo_db_name),
            customers_collection=env.get("CUSTOMERS_COLLECTION", defaults.customers_collection),
            users_collection=env.get("USERS_COLLECTION", defaults.users_collection),
        )
