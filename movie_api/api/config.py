"""
API configuration loaded from environment or defaults.
"""

import os

from movie_api.database.connection import DEFAULT_DB_PATH


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "").replace("sqlite:///", "") or DEFAULT_DB_PATH


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str:
    """Get log file name from env; empty means console only."""
    return os.getenv("LOG_FILE", "")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_user_credentials() -> tuple[str, str]:
    """Get name and password of the read-only account."""
    return os.getenv("API_USER_NAME", "user"), os.getenv("API_USER_PASSWORD", "password")


def get_admin_credentials() -> tuple[str, str]:
    """Get name and password of the administrator account."""
    return os.getenv("API_ADMIN_NAME", "admin"), os.getenv("API_ADMIN_PASSWORD", "admin")
