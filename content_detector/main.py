"""
Main FastAPI application with logging, dependency injection and middleware setup.
"""
from contextlib import asynccontextmanager

from dishka import make_async_container
from dishka.integrations.fastapi import DishkaRoute
from dishka.integrations import fastapi as fastapi_integration
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_detector.api.middlewares.response_middleware import StandardResponseMiddleware
from content_detector.api.exceptions.exception_handlers import register_exception_handlers
from content_detector.api.v1.controllers.detection import router as detection_router
from content_detector.api.v1.controllers.messages import router as messages_router
from content_detector.api.v1.controllers.settings import router as settings_router
from content_detector.core.config import config, Config
from content_detector.core.logging import get_logger, set_service_context, setup_logging
from content_detector.ioc import get_providers
from content_detector.storage.repository import DetectionRepository

__version__ = "0.1.0"

setup_logging(
    level="DEBUG" if config.debug else "INFO",
    json_logs=config.json_logs,
)
set_service_context(config.app_name, __version__)

logger = get_logger(__name__)


def create_app(app_config: Config = config) -> FastAPI:
    """
    Create and configure FastAPI application with Dishka DI container.
    """
    container = make_async_container(*get_providers(), context={Config: app_config})

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "application_startup",
            app_name=app_config.app_name,
            storage_backend=app_config.storage_backend,
        )
        repository = await container.get(DetectionRepository)
        await repository.initialize()
        yield
        logger.info("application_shutdown", app_name=app_config.app_name)
        await container.close()

    app = FastAPI(
        title=app_config.app_name,
        description="Heuristic AI-generated content detection with risk alerts",
        version=__version__,
        lifespan=lifespan,
    )

    fastapi_integration.setup_dishka(container, app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(StandardResponseMiddleware)

    register_exception_handlers(app)

    health_router = APIRouter(route_class=DishkaRoute, tags=["Health"])

    @health_router.get("/health")
    async def health_check():
        """
        Basic liveness check endpoint.
        """
        return {"status": "healthy", "service": app_config.app_name}

    @health_router.get("/health/ready")
    async def readiness_check():
        """
        Readiness check endpoint.
        """
        return {"status": "ready", "service": app_config.app_name}

    app.include_router(health_router)
    app.include_router(detection_router)
    app.include_router(settings_router)
    app.include_router(messages_router)

    return app


app = create_app()
