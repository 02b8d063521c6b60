# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import user_router
from .api.v1.errors import register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .infrastructure.db.mongo_connection import ensure_user_indexes, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the unique email index on startup and closes the MongoDB client
    on shutdown. Startup fails if the index cannot be created.
    """
    try:
        await ensure_user_indexes()
    except Exception as e:
        logger.critical(f"Failed to ensure user indexes, aborting startup: {e}", exc_info=True)
        close_database()
        raise

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error translation and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="User Accounts API",
        version="1.0.0",
        description="Registration, sign-in and profile management",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(user_router, prefix="/api")

    return application


# Create application instance
app = create_application()
