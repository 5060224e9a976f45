from datetime import datetime, timezone

import pytest

from content_detector.core.clock import Clock
from content_detector.services.detection_service import DetectionService
from content_detector.services.message_dispatcher import MessageDispatcher
from content_detector.services.verification_service import VerificationService
from content_detector.storage.repository import DetectionRepository
from content_detector.storage.store import InMemoryStore

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class FixedClock(Clock):
    def now(self) -> datetime:
        return FIXED_NOW


class RecordingNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    async def notify(self, title: str, message: str, level: str = "info") -> None:
        self.sent.append((title, message, level))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def repository(store: InMemoryStore) -> DetectionRepository:
    return DetectionRepository(store)


@pytest.fixture
def detection_service(repository, notifier, clock) -> DetectionService:
    return DetectionService(repository, notifier, clock)


@pytest.fixture
def verification_service(repository, clock) -> VerificationService:
    return VerificationService(repository, clock)


@pytest.fixture
def dispatcher(detection_service, verification_service, repository) -> MessageDispatcher:
    return MessageDispatcher(detection_service, verification_service, repository)
