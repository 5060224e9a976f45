"""
Service provider for dependency injection.

This module provides all service dependencies.
"""

from dishka import Provider, Scope, provide

from content_detector.core.clock import Clock
from content_detector.services.detection_service import DetectionService
from content_detector.services.message_dispatcher import MessageDispatcher
from content_detector.services.notifier import LogNotifier, Notifier
from content_detector.services.verification_service import VerificationService
from content_detector.storage.repository import DetectionRepository


class ServiceProvider(Provider):
    """
    Provider for service dependencies.

    All services are provided at APP scope (one instance per container).
    """

    @provide(scope=Scope.APP)
    def provide_clock(self) -> Clock:
        return Clock()

    @provide(scope=Scope.APP)
    def provide_notifier(self) -> Notifier:
        return LogNotifier()

    @provide(scope=Scope.APP)
    def provide_detection_service(
        self,
        repository: DetectionRepository,
        notifier: Notifier,
        clock: Clock,
    ) -> DetectionService:
        return DetectionService(repository, notifier, clock)

    @provide(scope=Scope.APP)
    def provide_verification_service(
        self,
        repository: DetectionRepository,
        clock: Clock,
    ) -> VerificationService:
        return VerificationService(repository, clock)

    @provide(scope=Scope.APP)
    def provide_message_dispatcher(
        self,
        detection: DetectionService,
        verification: VerificationService,
        repository: DetectionRepository,
    ) -> MessageDispatcher:
        return MessageDispatcher(detection, verification, repository)
