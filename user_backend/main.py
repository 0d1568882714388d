# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import asyncio
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

# Local application imports
from .api.v1 import users_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container, reset_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)

INDEX_SETUP_TIMEOUT_SECONDS = 10


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the unique email index exists on startup and closes the
    MongoDB client on shutdown.
    """
    user_repository = get_container().get(UserRepository)
    ensure_indexes = getattr(user_repository, "ensure_indexes", None)
    if ensure_indexes is not None:
        try:
            await asyncio.wait_for(ensure_indexes(), timeout=INDEX_SETUP_TIMEOUT_SECONDS)
            logger.info("User indexes ensured")
        except (PyMongoError, asyncio.TimeoutError) as e:
            # Don't fail app startup if MongoDB is briefly unavailable
            logger.error(f"Failed to ensure user indexes: {e}")

    yield

    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Centralized error handlers

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title="User Accounts API",
        version="1.0.0",
        description="User listing, profile management and email-verified registration",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(users_router, prefix="/api/users")

    register_exception_handlers(application)

    @application.get("/health", tags=["health"])
    async def health_check():
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
