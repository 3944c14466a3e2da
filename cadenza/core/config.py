"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables"""

    # Time
    TIMEZONE: str = os.getenv("CADENZA_TIMEZONE", "UTC")

    # Bootstrap
    LOAD_SAMPLE_DATA: bool = _get_bool("CADENZA_LOAD_SAMPLE_DATA", True)

    # Scheduler
    ROLLOVER_ENABLED: bool = _get_bool("CADENZA_ROLLOVER_ENABLED", True)

    # Logging
    LOG_LEVEL: str = os.getenv("CADENZA_LOG_LEVEL", "INFO").upper()

    # Detail view
    RECENT_ENTRIES_LIMIT: int = int(os.getenv("CADENZA_RECENT_ENTRIES_LIMIT", "7"))


# Create a global settings instance
settings = Settings()
