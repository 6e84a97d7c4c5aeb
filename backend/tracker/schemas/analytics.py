import datetime as dt
from typing import Any

from pydantic import BaseModel

from tracker.models.person import Role
from tracker.services.roles import RoleConfig
from tracker.services.rollup import AggregateWindow


class RangeResponse(BaseModel):
    range: str
    time_zone: str
    start: dt.datetime
    end: dt.datetime
    previous_start: dt.datetime
    previous_end: dt.datetime
    days: int
    previous_days: int


class RateResponse(BaseModel):
    name: str
    label: str
    value: str
    previous: str
    delta: int


class SeriesPointResponse(BaseModel):
    date: dt.date
    label: str
    values: dict[str, float]


class PersonOptionResponse(BaseModel):
    id: int
    name: str


class RollupResponse(BaseModel):
    role: Role
    time_zone: str
    days_in_range: int
    days_in_previous_range: int
    range: RangeResponse
    records: list[dict[str, Any]]
    totals: dict[str, int | float]
    previous_totals: dict[str, int | float]
    averages: dict[str, int | float]
    previous_averages: dict[str, int | float]
    deltas: dict[str, int]
    rates: list[RateResponse]
    series: list[SeriesPointResponse]
    people: list[PersonOptionResponse]

    @classmethod
    def from_rollup(cls, config: RoleConfig, rollup: AggregateWindow) -> "RollupResponse":
        window = rollup.window

        def keyed(values: dict) -> dict:
            return {config.key_for(name): value for name, value in values.items()}

        return cls(
            role=config.role,
            time_zone=window.time_zone,
            days_in_range=window.days,
            days_in_previous_range=window.previous_days,
            range=RangeResponse(
                range=window.range_key,
                time_zone=window.time_zone,
                start=window.start,
                end=window.end,
                previous_start=window.previous_start,
                previous_end=window.previous_end,
                days=window.days,
                previous_days=window.previous_days,
            ),
            records=[record_payload(config, r) for r in rollup.records],
            totals=keyed(rollup.totals),
            previous_totals=keyed(rollup.previous_totals),
            averages=keyed(rollup.averages),
            previous_averages=keyed(rollup.previous_averages),
            deltas=keyed(rollup.deltas),
            rates=[RateResponse(**rate.__dict__) for rate in rollup.rates],
            series=[
                SeriesPointResponse(date=p.date, label=p.label, values=keyed(p.values)) for p in rollup.series
            ],
            people=[PersonOptionResponse(id=p.id, name=p.name) for p in rollup.people],
        )


def record_payload(config: RoleConfig, record) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": record.id,
        "person_id": record.person_id,
        "person_name": record.person.full_name if record.person else None,
        "date": record.date.isoformat(),
    }
    for f in config.fields:
        payload[f.key] = getattr(record, f.name)
    payload["created_at"] = record.created_at.isoformat()
    payload["updated_at"] = record.updated_at.isoformat()
    return payload
