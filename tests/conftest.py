# -*- coding: utf-8 -*-
"""
Shared fixtures for the onboarding tests.

Qt runs headless and logging stays on the console; both must be set
before the application modules are imported.
"""
import os
import sys
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("ONBOARDING_LOG_TO_FILE", "false")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

MB = 1024 * 1024

PDF = "application/pdf"
PNG = "image/png"
JPEG = "image/jpeg"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture(autouse=True)
def qapp_available(qapp):
    """Every test gets a QApplication (signals and timers need one)."""
    return qapp


@pytest.fixture
def make_file():
    """Factory for candidate files: make_file("deck.pdf", size=2 * MB)."""
    from models.uploaded_file import IntakeFile

    def _make(name: str, media_type: str = PDF, size: int = 2 * MB) -> IntakeFile:
        return IntakeFile(name=name, media_type=media_type, size=size)

    return _make


@pytest.fixture
def notifications():
    from services.notification_service import NotificationService

    return NotificationService(duration_ms=50)
