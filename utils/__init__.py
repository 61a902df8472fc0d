# -*- coding: utf-8 -*-
"""
Founder Onboarding Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_file_size, generate_file_id

__all__ = [
    "get_logger",
    "setup_logger",
    "format_file_size",
    "generate_file_id",
]
