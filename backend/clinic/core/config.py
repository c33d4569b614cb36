"""
Centralized configuration module for application-wide settings.

Settings come from environment variables (optionally loaded from a .env
file). The store itself is rebuilt on every run, so configuration only
shapes behaviour: removal cascades, slot blocking and logging.
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes")


def get_env_flag(name: str, default: str = "false") -> bool:
    """
    Read a boolean flag from the environment.

    Truthy values: "true", "1", "yes" (case-insensitive)
    Anything else is treated as false.

    Examples:
        >>> # In .env file:
        >>> # CLINIC_CASCADE_ON_DELETE=true
        >>> get_env_flag("CLINIC_CASCADE_ON_DELETE")
        True
    """
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True)
class Settings:
    """Effective runtime configuration."""

    # Remove appointments, prescriptions and bills along with their owner
    cascade_on_delete: bool = False
    # Cancelled appointments keep their (doctor, date, slot) occupied
    cancelled_slots_block: bool = False
    log_level: str = "INFO"
    log_json_format: bool = False
    log_to_file: bool = False
    log_dir: str = "logs"

    def as_dict(self) -> dict:
        return asdict(self)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional path to a .env file. Variables already present
            in the environment take precedence over the file.

    Environment Variables:
        CLINIC_CASCADE_ON_DELETE: cascade removals (default: false)
        CLINIC_CANCELLED_SLOTS_BLOCK: cancelled slots stay blocked (default: false)
        LOG_LEVEL: logging level name (default: INFO)
        LOG_JSON_FORMAT: JSON console output (default: false)
        LOG_TO_FILE: enable the rotating file handler (default: false)
        LOG_DIR: directory for log files (default: logs)
    """
    load_dotenv(env_file)

    settings = Settings(
        cascade_on_delete=get_env_flag("CLINIC_CASCADE_ON_DELETE"),
        cancelled_slots_block=get_env_flag("CLINIC_CANCELLED_SLOTS_BLOCK"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_json_format=get_env_flag("LOG_JSON_FORMAT"),
        log_to_file=get_env_flag("LOG_TO_FILE"),
        log_dir=os.getenv("LOG_DIR", "logs"),
    )

    if settings.cascade_on_delete:
        logger.warning(
            "Cascading removals are ENABLED - removing a patient, doctor or "
            "medication also removes the records that reference it",
            extra={"context": {"CLINIC_CASCADE_ON_DELETE": True}},
        )

    return settings


def log_settings(settings: Settings) -> None:
    """Log the active configuration; call once at startup."""
    logger.info(
        "Clinic configuration initialized",
        extra={"context": settings.as_dict()},
    )
