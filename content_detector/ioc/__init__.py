"""
Dependency injection container configuration using Dishka.
"""

from dishka import Provider

from content_detector.ioc.repository_provider import RepositoryProvider
from content_detector.ioc.service_provider import ServiceProvider


def get_providers() -> list[Provider]:
    """All providers the application container is built from."""
    return [RepositoryProvider(), ServiceProvider()]


__all__ = ["RepositoryProvider", "ServiceProvider", "get_providers"]
