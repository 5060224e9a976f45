"""
Repository provider for dependency injection.

This module provides the key-value store and the repository on top of it.
"""

from collections.abc import AsyncIterator

from dishka import Provider, Scope, from_context, provide

from content_detector.core.config import Config
from content_detector.storage.repository import DetectionRepository
from content_detector.storage.store import KeyValueStore, build_store


class RepositoryProvider(Provider):
    """
    Provider for persistence dependencies.

    The store is created once per container and closed with it.
    """

    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def provide_store(self, config: Config) -> AsyncIterator[KeyValueStore]:
        store = build_store(config)
        yield store
        await store.close()

    @provide(scope=Scope.APP)
    def provide_repository(self, store: KeyValueStore) -> DetectionRepository:
        return DetectionRepository(store)
