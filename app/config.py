# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_NOTIFICATION_DURATION_MS = int(os.getenv("ONBOARDING_NOTIFICATION_MS", "4000"))
_MAX_UPLOAD_BYTES = int(os.getenv("ONBOARDING_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
_WELCOME_BACK_TARGET = os.getenv("ONBOARDING_WELCOME_BACK_TARGET", "basic-info").strip().lower()
_LOG_DIR = os.getenv("ONBOARDING_LOG_DIR", None)
_LOG_TO_FILE = os.getenv("ONBOARDING_LOG_TO_FILE", "true").lower() in ("true", "1", "yes")
_CONSOLE_LOG_LEVEL = os.getenv("ONBOARDING_CONSOLE_LOG_LEVEL", "INFO")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Founder Onboarding"
    VERSION: str = "1.0.0"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOG_DIR) if _LOG_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_TO_FILE: bool = _LOG_TO_FILE
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL

    # Wizard flow
    # "basic-info" continues onboarding, "dashboard" hands off to the dashboard
    WELCOME_BACK_TARGET: str = _WELCOME_BACK_TARGET

    # Notifications
    NOTIFICATION_DURATION_MS: int = _NOTIFICATION_DURATION_MS

    # Document upload
    MAX_UPLOAD_BYTES: int = _MAX_UPLOAD_BYTES
    ACCEPTED_MEDIA_TYPES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
        ("application/pdf", (".pdf",)),
        ("image/jpeg", (".jpg", ".jpeg")),
        ("image/png", (".png",)),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", (".docx",)),
    )

    @classmethod
    def accepted_media_types(cls) -> Dict[str, Tuple[str, ...]]:
        """Accepted media types mapped to their canonical extensions."""
        return dict(cls.ACCEPTED_MEDIA_TYPES)
