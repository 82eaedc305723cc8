import os
from datetime import datetime
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

APP_TIMEZONE = os.getenv("APP_TIMEZONE", "Asia/Kolkata")


def get_local_time():
    """Return current time in the configured APP_TIMEZONE as a timezone-aware datetime object."""
    return datetime.now(ZoneInfo(APP_TIMEZONE))


def format_datetime_ampm(dt: datetime) -> str:
    """
    Format a datetime in 12-hour am/pm format in the configured timezone.
    Naive datetimes are assumed to be UTC.
    Example: '12-Jan-2026 03:45 PM IST'
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))

    local = dt.astimezone(ZoneInfo(APP_TIMEZONE))
    return local.strftime("%d-%b-%Y %I:%M %p %Z")
