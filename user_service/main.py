# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import register_exception_handlers, user_router
from .core.config import Settings, get_settings
from .core.logging_config import configure_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .domain.exceptions import StorageError
from .domain.repositories.user_repository import UserRepository
from .infrastructure.storage.local_image_storage import LocalImageStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the image upload directory, ensures the unique email index and
    closes the MongoDB client on shutdown.
    """
    container: BaseContainer = app.state.container

    upload_dir = container.get(LocalImageStorage).ensure_directory()
    logger.info("Image upload directory ready at %s", upload_dir)

    try:
        await container.get(UserRepository).ensure_indexes()
        logger.info("User indexes ensured")
    except StorageError as e:
        # Don't fail app startup if MongoDB is unreachable; requests will report 500
        logger.error("Failed to ensure user indexes: %s", e.message)

    yield

    if container.has("mongo_client"):
        container.get("mongo_client").close()
        logger.info("MongoDB client closed")

    logger.info("Application shutdown complete")


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging configuration
    - Dependency container (built from settings unless one is passed in)
    - CORS middleware configuration
    - Exception handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="User Accounts API",
        version="1.0.0",
        description="User account management with profile image upload",
        lifespan=lifespan
    )
    application.state.container = container or DIContainer(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application, settings)
    application.include_router(user_router, prefix="/user")

    return application
