"""Turn a dashboard date selector into a concrete time window."""

import logging
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from carthi.analytics.schemas import DateRange, DateWindow
from carthi.config import local_now

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59)

DateInput = Union[str, date, None]


def _midnight(day: date, now: datetime) -> datetime:
    return datetime.combine(day, time.min, tzinfo=now.tzinfo)


def _end_of_day(day: date, now: datetime) -> datetime:
    return datetime.combine(day, END_OF_DAY, tzinfo=now.tzinfo)


def _parse_day(value: DateInput) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None


def resolve_date_range(
    selector: Union[DateRange, str],
    start: DateInput = None,
    end: DateInput = None,
    now: Optional[datetime] = None,
) -> Optional[DateWindow]:
    """
    Resolve ``selector`` against ``now``.

    Returns None when no date restriction applies: for ``all-time`` and for a
    custom range whose bounds are missing, unparsable or inverted.
    """
    selector = DateRange(selector)
    now = now or local_now()
    today = now.date()

    if selector == DateRange.ALL_TIME:
        return None

    if selector == DateRange.TODAY:
        return DateWindow(start=_midnight(today, now), end=now)

    if selector == DateRange.LAST_7_DAYS:
        return DateWindow(start=_midnight(today - timedelta(days=7), now), end=now)

    if selector == DateRange.LAST_30_DAYS:
        return DateWindow(start=_midnight(today - timedelta(days=30), now), end=now)

    if selector == DateRange.THIS_MONTH:
        return DateWindow(start=_midnight(today.replace(day=1), now), end=now)

    if selector == DateRange.LAST_MONTH:
        last_day = today.replace(day=1) - timedelta(days=1)
        return DateWindow(
            start=_midnight(last_day.replace(day=1), now),
            end=_end_of_day(last_day, now),
        )

    start_day = _parse_day(start)
    end_day = _parse_day(end)
    if start_day is None or end_day is None or start_day > end_day:
        logger.debug("Ignoring custom date range start=%r end=%r", start, end)
        return None
    return DateWindow(start=_midnight(start_day, now), end=_end_of_day(end_day, now))
