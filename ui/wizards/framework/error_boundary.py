# -*- coding: utf-8 -*-
"""
Error Boundary for Wizard Steps.

Step components are collaborators of the wizard: an exception raised in
one of their lifecycle hooks is logged with context and reported through
a signal, and never escapes into the wizard's state machine.
"""

from typing import Any, Callable, Optional

from PyQt5.QtCore import pyqtSignal, QObject

from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """
    Error boundary for wizard steps.

    Wraps step methods with error handling to prevent crashes.
    """

    error_occurred = pyqtSignal(str, str, str)  # step_name, error_type, error_message

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.last_error: Optional[Exception] = None

    def run(self, step_name: str, operation: str, func: Callable, *args, **kwargs) -> Any:
        """
        Call a step hook inside the boundary.

        Returns:
            The hook's return value, or None if it raised
        """
        try:
            return func(*args, **kwargs)
        except Exception as e:
            self._handle_error(step_name, operation, e)
            return None

    def _handle_error(self, step_name: str, operation: str, error: Exception):
        # Never swallow interpreter-level failures
        if isinstance(error, MemoryError):
            raise error

        self.last_error = error

        logger.error(
            f"Error in {step_name} during {operation}: {str(error)}",
            exc_info=True
        )
        self.error_occurred.emit(step_name, type(error).__name__, str(error))
