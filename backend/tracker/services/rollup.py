"""Reduce EOD records into the numbers the analytics view displays.

Everything here is recomputed per request from the rows in the current and
previous windows; nothing is cached or stored.
"""
import datetime as dt
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from tracker.services.ranges import RangeWindow
from tracker.services.roles import RateMetric, RoleConfig


def round_half_up(value: float, digits: int = 0):
    scale = 10**digits
    rounded = math.floor(value * scale + 0.5) / scale
    return int(rounded) if digits == 0 else rounded


def sum_fields(config: RoleConfig, records: Iterable, names: Sequence[str] | None = None) -> dict[str, float]:
    names = list(names or config.field_names)
    totals: dict[str, float] = {name: 0 for name in names}
    for record in records:
        for name in names:
            totals[name] += getattr(record, name) or 0
    for name in names:
        if config.get_field(name).is_currency:
            totals[name] = round(float(totals[name]), 2)
        else:
            totals[name] = int(totals[name])
    return totals


def per_day_average(total: float, days: int, currency: bool = False):
    if days <= 0:
        return 0
    return round_half_up(total / days, 2) if currency else round_half_up(total / days)


def pct_delta(current: float, previous: float) -> int:
    if previous == 0:
        return 100 if current > 0 else 0
    return round_half_up((current - previous) / previous * 100)


def format_rate(numerator: float, denominator: float) -> str:
    if denominator <= 0:
        return "0.0"
    return f"{numerator / denominator * 100:.1f}"


def _rate_for(rate: RateMetric, totals: dict[str, float]) -> str:
    numerator = sum(totals[name] for name in rate.numerator)
    denominator = sum(totals[name] for name in rate.denominator)
    return format_rate(numerator, denominator)


@dataclass
class RateSummary:
    name: str
    label: str
    value: str
    previous: str
    delta: int


@dataclass
class SeriesPoint:
    date: dt.date
    label: str
    values: dict[str, float]


@dataclass
class PersonOption:
    id: int
    name: str


@dataclass
class AggregateWindow:
    window: RangeWindow
    records: list
    totals: dict[str, float]
    previous_totals: dict[str, float]
    averages: dict[str, float]
    previous_averages: dict[str, float]
    deltas: dict[str, int]
    rates: list[RateSummary] = field(default_factory=list)
    series: list[SeriesPoint] = field(default_factory=list)
    people: list[PersonOption] = field(default_factory=list)


def rate_summaries(config: RoleConfig, totals: dict[str, float], previous_totals: dict[str, float]) -> list[RateSummary]:
    summaries = []
    for rate in config.rates:
        current = _rate_for(rate, totals)
        previous = _rate_for(rate, previous_totals)
        summaries.append(
            RateSummary(
                name=rate.name,
                label=rate.label,
                value=current,
                previous=previous,
                delta=pct_delta(float(current), float(previous)),
            )
        )
    return summaries


def daily_series(config: RoleConfig, records: Iterable, names: Sequence[str] | None = None) -> list[SeriesPoint]:
    """Sum ``names`` per calendar day. Days without records are left out, not zero-filled."""
    names = list(names or config.series_fields)
    buckets: dict[dt.date, dict[str, float]] = {}
    for record in records:
        bucket = buckets.setdefault(record.date, {name: 0.0 for name in names})
        for name in names:
            bucket[name] += float(getattr(record, name) or 0)

    points = []
    for day in sorted(buckets):
        values = {name: round(total, 2) for name, total in buckets[day].items()}
        points.append(SeriesPoint(date=day, label=day.strftime("%b %d"), values=values))
    return points


def people_in(records: Iterable) -> list[PersonOption]:
    seen: dict[int, PersonOption] = {}
    for record in records:
        if record.person_id not in seen and record.person is not None:
            seen[record.person_id] = PersonOption(id=record.person_id, name=record.person.full_name)
    return sorted(seen.values(), key=lambda p: p.name.lower())


def fetch_records(
    db: Session, config: RoleConfig, start: dt.date, end: dt.date, person_id: int | None = None
) -> list:
    model = config.model
    query = db.query(model).filter(model.date >= start, model.date <= end)
    if person_id is not None:
        query = query.filter(model.person_id == person_id)
    return query.order_by(model.person_id.asc(), model.date.desc()).all()


def summarize(config: RoleConfig, window: RangeWindow, records: list, previous_records: list) -> AggregateWindow:
    totals = sum_fields(config, records)
    previous_totals = sum_fields(config, previous_records)

    averages: dict[str, float] = {}
    previous_averages: dict[str, float] = {}
    deltas: dict[str, int] = {}
    for f in config.fields:
        averages[f.name] = per_day_average(totals[f.name], window.days, f.is_currency)
        raw_previous = previous_totals[f.name] / window.previous_days if window.previous_days > 0 else 0
        previous_averages[f.name] = per_day_average(previous_totals[f.name], window.previous_days, f.is_currency)
        # Current average is the rounded figure on screen; the previous one stays exact.
        deltas[f.name] = pct_delta(averages[f.name], raw_previous)

    return AggregateWindow(
        window=window,
        records=records,
        totals=totals,
        previous_totals=previous_totals,
        averages=averages,
        previous_averages=previous_averages,
        deltas=deltas,
        rates=rate_summaries(config, totals, previous_totals),
        series=daily_series(config, records),
        people=people_in(records),
    )


def build_rollup(db: Session, config: RoleConfig, window: RangeWindow, person_id: int | None = None) -> AggregateWindow:
    records = fetch_records(db, config, window.start_date, window.end_date, person_id)
    previous_records = fetch_records(db, config, window.previous_start_date, window.previous_end_date, person_id)
    return summarize(config, window, records, previous_records)
