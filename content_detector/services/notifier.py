"""User-facing notifications raised after a detection is recorded."""
from typing import Protocol

from content_detector.core.logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    async def notify(self, title: str, message: str, level: str = "info") -> None:
        ...


class LogNotifier:
    """Emits notifications as structured log events for a downstream relay."""

    async def notify(self, title: str, message: str, level: str = "info") -> None:
        logger.warning(
            "user_notification",
            title=title,
            message=message,
            severity=level,
            priority=2 if level == "warning" else 1,
        )
