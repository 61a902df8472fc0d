# -*- coding: utf-8 -*-
"""
Notification Service - the single transient notification channel.

Holds at most one visible notification. Every show() restarts the one
auto-clear timer, so a clear scheduled for an earlier message can never
blank out a newer one.
"""

from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from app.config import Config
from models.notification import Notification
from utils.logger import get_logger

logger = get_logger(__name__)


class NotificationService(QObject):
    """Owns the visible notification and its cancellable auto-clear."""

    notification_shown = pyqtSignal(str, str)  # message, category
    notification_cleared = pyqtSignal()

    def __init__(self, duration_ms: Optional[int] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._duration_ms = Config.NOTIFICATION_DURATION_MS if duration_ms is None else duration_ms
        self._current: Optional[Notification] = None

        self._clear_timer = QTimer(self)
        self._clear_timer.setSingleShot(True)
        self._clear_timer.timeout.connect(self._on_timeout)

    @property
    def current(self) -> Optional[Notification]:
        """The visible notification, or None."""
        return self._current

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    def is_clear_pending(self) -> bool:
        return self._clear_timer.isActive()

    def show(self, message: str, category: str = Notification.SUCCESS) -> Notification:
        """
        Show a notification, superseding any visible one.

        Args:
            message: Message text
            category: Notification.SUCCESS or Notification.ERROR

        Returns:
            The notification now visible
        """
        notification = Notification(message=message, category=category)
        if self._current is not None:
            logger.debug(f"Superseding notification: {self._current.message!r}")

        self._current = notification
        # start() on an active single-shot timer restarts it
        self._clear_timer.start(self._duration_ms)

        logger.debug(f"Notification [{category}]: {message}")
        self.notification_shown.emit(message, category)
        return notification

    def show_success(self, message: str) -> Notification:
        return self.show(message, Notification.SUCCESS)

    def show_error(self, message: str) -> Notification:
        return self.show(message, Notification.ERROR)

    def dismiss(self):
        """Clear now (user closed it) and cancel the pending auto-clear."""
        self._clear_timer.stop()
        self._clear()

    def _on_timeout(self):
        logger.debug("Notification expired")
        self._clear()

    def _clear(self):
        if self._current is None:
            return
        self._current = None
        self.notification_cleared.emit()
