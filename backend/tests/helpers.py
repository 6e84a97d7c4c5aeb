import datetime as dt
from types import SimpleNamespace

from tracker.services.roles import RoleConfig


def metric_values(config: RoleConfig, **overrides) -> dict[str, float]:
    values = {name: 0.0 for name in config.field_names}
    values.update({k: float(v) for k, v in overrides.items()})
    return values


def fake_record(config: RoleConfig, day: dt.date, person_id: int = 1, person_name: str = "Ann Lee", **metrics):
    values = {name: 0 for name in config.field_names}
    values.update(metrics)
    return SimpleNamespace(
        date=day,
        person_id=person_id,
        person=SimpleNamespace(full_name=person_name),
        **values,
    )


# A dialer day that satisfies every cross-field rule.
VALID_DIALER = dict(
    dials=100,
    connects=50,
    conversations=30,
    qualified_conversations=10,
    meetings_scheduled=10,
    meetings_set=10,
    meetings_showed=7,
    no_shows=3,
    closed_deals=2,
    revenue_generated=1000,
    cash_collected=500,
)

VALID_DIALER_FORM = {
    "dials": "100",
    "connects": "50",
    "conversations": "30",
    "qualifiedConversations": "10",
    "meetingsScheduled": "10",
    "meetingsSet": "10",
    "meetingsShowed": "7",
    "noShows": "3",
    "closedDeals": "2",
    "revenueGenerated": "1000",
    "cashCollected": "500.25",
}

VALID_CLOSER = dict(
    daily_calls_booked=10,
    calls_taken=4,
    shows=4,
    no_shows=3,
    cancelled=1,
    disqualified=1,
    rescheduled=1,
    offers_made=3,
    closes=1,
    cash_collected=500,
    revenue_generated=1000,
)
