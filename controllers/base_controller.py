# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for the onboarding controllers.

Controllers never raise business failures to their callers; they return
an OperationResult and emit Qt signals for anything observing them.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [])


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - Last-error tracking
    - Operation logging
    """

    # Common signals
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    data_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._last_error = ""

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    def _set_error(self, error: str):
        self._last_error = error
        if error:
            logger.warning(f"{self.__class__.__name__}: {error}")

    def _log_operation(self, operation: str, **kwargs):
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_completed(self, operation: str, success: bool):
        self.operation_completed.emit(operation, success)
        if success:
            self.data_changed.emit()

    def _emit_error(self, operation: str, error: str):
        self._set_error(error)
        self.operation_error.emit(operation, error)
