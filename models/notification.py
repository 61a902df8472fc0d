# -*- coding: utf-8 -*-
"""
Transient notification model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A user-facing message describing the latest validation outcome."""

    SUCCESS = "success"
    ERROR = "error"

    message: str
    category: str = SUCCESS

    def __post_init__(self):
        if self.category not in (self.SUCCESS, self.ERROR):
            raise ValueError(f"Unknown notification category: {self.category}")

    @property
    def is_error(self) -> bool:
        return self.category == self.ERROR
