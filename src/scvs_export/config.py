"""Configuration loading.

Settings come from environment variables, optionally seeded from a .env file.
Variables already present in the environment win over the file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_DATABASE_URL = "SCVS_DATABASE_URL"
ENV_DB_PATH = "SCVS_DB_PATH"
ENV_RESEND_API_KEY = "RESEND_API_KEY"
ENV_FROM_EMAIL = "FROM_EMAIL"
ENV_LOG_LEVEL = "SCVS_LOG_LEVEL"
ENV_LOG_FILE = "SCVS_LOG_FILE"

DEFAULT_FROM_EMAIL = "no-reply@example.com"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings."""

    database_url: Optional[str]
    db_path: Optional[str]
    resend_api_key: Optional[str]
    from_email: str
    log_level: str
    log_file: Optional[str]


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from the environment.

    Args:
        env_file: Optional path to a .env file. If None, a .env file in the
            current directory is used when present.

    Returns:
        Settings instance
    """
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        database_url=os.environ.get(ENV_DATABASE_URL) or None,
        db_path=os.environ.get(ENV_DB_PATH) or None,
        resend_api_key=os.environ.get(ENV_RESEND_API_KEY) or None,
        from_email=os.environ.get(ENV_FROM_EMAIL) or DEFAULT_FROM_EMAIL,
        log_level=(os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
        log_file=os.environ.get(ENV_LOG_FILE) or None,
    )
