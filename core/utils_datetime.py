"""
DateTime utilities for reservation slots.

Reservation dates and times are stored as naive wall-clock values in the
configured timezone, so "now" is compared the same way.
"""
from datetime import date, datetime, time

import pytz

from core.config import settings


TIMEZONE = pytz.timezone(settings.timezone)


def get_current_datetime() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(TIMEZONE)


def now_local() -> datetime:
    """Current wall-clock time in the configured timezone, without tzinfo."""
    return get_current_datetime().replace(tzinfo=None)


def combine_slot(slot_date: date, start_at: time) -> datetime:
    """Naive datetime at which a (date, start time) slot begins."""
    return datetime.combine(slot_date, start_at)
