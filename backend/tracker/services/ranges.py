"""Range presets -> current and previous calendar windows in the caller's time zone."""
import datetime as dt
import logging
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tracker.core.config import get_settings
from tracker.services.validation import parse_day

logger = logging.getLogger(__name__)

PRESET_DAYS = {"24h": 1, "7d": 7, "30d": 30}
RANGE_CHOICES = ("24h", "7d", "30d", "custom")


@dataclass(frozen=True)
class RangeWindow:
    range_key: str
    time_zone: str
    start_date: dt.date
    end_date: dt.date
    previous_start_date: dt.date
    previous_end_date: dt.date
    days: int
    previous_days: int

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)

    @property
    def start(self) -> dt.datetime:
        return dt.datetime.combine(self.start_date, dt.time.min, tzinfo=self.zone)

    @property
    def end(self) -> dt.datetime:
        return dt.datetime.combine(self.end_date, dt.time.max, tzinfo=self.zone)

    @property
    def previous_start(self) -> dt.datetime:
        return dt.datetime.combine(self.previous_start_date, dt.time.min, tzinfo=self.zone)

    @property
    def previous_end(self) -> dt.datetime:
        return dt.datetime.combine(self.previous_end_date, dt.time.max, tzinfo=self.zone)


def resolve_zone(tz_name: str | None) -> tuple[ZoneInfo, str]:
    default = get_settings().DEFAULT_TIMEZONE
    name = (tz_name or "").strip() or default
    try:
        return ZoneInfo(name), name
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown time zone %r, using %s", name, default)
        return ZoneInfo(default), default


def _window(range_key: str, tz_name: str, start: dt.date, end: dt.date) -> RangeWindow:
    days = (end - start).days + 1
    shift = dt.timedelta(days=days)
    return RangeWindow(
        range_key=range_key,
        time_zone=tz_name,
        start_date=start,
        end_date=end,
        previous_start_date=start - shift,
        previous_end_date=end - shift,
        days=days,
        previous_days=days,
    )


def resolve_range(
    range_key: str | None,
    start: str | dt.date | None = None,
    end: str | dt.date | None = None,
    tz_name: str | None = None,
    now: dt.datetime | None = None,
) -> RangeWindow:
    """Resolve ``24h | 7d | 30d | custom`` into a window ending today (or at ``end`` for custom).

    A custom range that is missing, unparsable, reversed or too close to the
    minimum date for a previous period falls back to the 30 day preset instead
    of failing.
    """
    zone, zone_name = resolve_zone(tz_name)
    if now is None:
        now = dt.datetime.now(zone)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=dt.timezone.utc).astimezone(zone)
    else:
        now = now.astimezone(zone)
    today = now.date()

    key = (range_key or get_settings().DEFAULT_RANGE).strip().lower()

    if key == "custom":
        start_day = parse_day(start)
        end_day = parse_day(end)
        if start_day and end_day and start_day <= end_day:
            try:
                return _window("custom", zone_name, start_day, end_day)
            except OverflowError:
                # Previous period would start before 0001-01-01.
                pass
        logger.info("Custom range start=%r end=%r not usable, falling back to 30d", start, end)
        key = "30d"

    days = PRESET_DAYS.get(key)
    if days is None:
        key, days = "30d", PRESET_DAYS["30d"]
    return _window(key, zone_name, today - dt.timedelta(days=days - 1), today)
