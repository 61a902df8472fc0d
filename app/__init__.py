# -*- coding: utf-8 -*-
"""
Founder Onboarding Application Core Module
"""

from .config import Config

__all__ = ["Config"]
