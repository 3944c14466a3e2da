"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from cadenza import __version__
from cadenza.core.config import settings
from cadenza.core.dependencies import get_habit_service
from cadenza.routes import categories, habits, health, navigation
from cadenza.services.scheduler import start_scheduler, stop_scheduler

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    # Startup
    if settings.ROLLOVER_ENABLED:
        try:
            start_scheduler(get_habit_service())
            logger.info("✓ Day rollover scheduler started")
        except Exception as e:
            logger.warning(f"Could not start scheduler: {e}")

    yield

    # Shutdown
    if settings.ROLLOVER_ENABLED:
        try:
            stop_scheduler()
            logger.info("✓ Day rollover scheduler stopped")
        except Exception as e:
            logger.warning(f"Error stopping scheduler: {e}")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Cadenza API",
    version=__version__,
    lifespan=lifespan
)

# Register routes
app.include_router(health.router)
app.include_router(categories.router)
app.include_router(habits.router)
app.include_router(navigation.router)
