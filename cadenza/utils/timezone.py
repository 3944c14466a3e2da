"""
Timezone Utilities - Centralized timezone handling
"""
from datetime import date, datetime
import pytz

from cadenza.core.config import settings


def get_app_tz():
    """
    Get the configured application timezone

    Returns:
        pytz timezone for settings.TIMEZONE
    """
    return pytz.timezone(settings.TIMEZONE)


def get_app_now() -> datetime:
    """
    Get current datetime in the application timezone

    Returns:
        Timezone-aware datetime object
    """
    return datetime.now(get_app_tz())


def get_today_date() -> date:
    """
    Get today's date in the application timezone

    Returns:
        date object for today
    """
    return get_app_now().date()


def as_date(value) -> date:
    """Reduce a date or datetime to its calendar day"""
    if isinstance(value, datetime):
        return value.date()
    return value
