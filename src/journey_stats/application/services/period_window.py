"""Creation-time lower bounds for report periods."""

import calendar
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from journey_stats.domain.models.period import Period

DAYS_PER_WEEK = 7


def start_of_today(now: datetime, tz: ZoneInfo) -> datetime:
    """Midnight of the current day in the given timezone."""
    local_now = now.astimezone(tz)
    return datetime.combine(local_now.date(), datetime.min.time(), tzinfo=tz)


def subtract_months(day: date, months: int) -> date:
    """Move back whole calendar months, clamping to the last day of the target month."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def period_start(
    period: Period | str, now: datetime | None = None, tz: str | ZoneInfo = "UTC"
) -> datetime | None:
    """Return the inclusive lower bound on creation time for a period, in UTC.

    ``all`` has no bound. The other periods count back from the start of the
    current day in ``tz``.
    """
    period = Period.parse(period)
    if period is Period.ALL:
        return None

    zone = tz if isinstance(tz, ZoneInfo) else ZoneInfo(tz)
    today = start_of_today(now or datetime.now(UTC), zone)

    if period is Period.WEEK:
        start_day = today.date() - timedelta(days=DAYS_PER_WEEK)
    elif period is Period.MONTH:
        start_day = subtract_months(today.date(), 1)
    else:
        start_day = subtract_months(today.date(), 12)

    start = datetime.combine(start_day, datetime.min.time(), tzinfo=zone)
    return start.astimezone(UTC)
