# -*- coding: utf-8 -*-
"""
Founder Onboarding Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "NotificationService",
    "ValidationException",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "NotificationService":
        from .notification_service import NotificationService
        return NotificationService
    elif name == "ValidationException":
        from .exceptions import ValidationException
        return ValidationException
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
