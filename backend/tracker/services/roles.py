"""Per-role configuration for the EOD engine.

Each role (dialer, setter, closer) is described by one ``RoleConfig``: the ORM
model holding its records, the ordered metric fields, the cross-field rules
checked on submission and the rate metrics shown on the analytics view.
Validation, upsert and rollup code is written once against this record.

Rule order matters: the validator reports only the first violated rule, so
moving a rule changes which error a given bad submission gets.
"""
from collections.abc import Callable
from dataclasses import dataclass, field
import enum

from tracker.models.metrics import CloserMetrics, DialerMetrics, SetterMetrics
from tracker.models.person import Role


class FieldKind(str, enum.Enum):
    counter = "counter"
    currency = "currency"


@dataclass(frozen=True)
class MetricField:
    name: str
    key: str
    label: str
    kind: FieldKind = FieldKind.counter

    @property
    def is_currency(self) -> bool:
        return self.kind == FieldKind.currency


@dataclass(frozen=True)
class Rule:
    field: str
    message: str
    violated: Callable[[dict[str, float]], bool]


@dataclass(frozen=True)
class RateMetric:
    name: str
    label: str
    numerator: tuple[str, ...]
    denominator: tuple[str, ...]


@dataclass(frozen=True)
class RoleConfig:
    role: Role
    model: type
    fields: tuple[MetricField, ...]
    rules: tuple[Rule, ...]
    rates: tuple[RateMetric, ...]
    series_fields: tuple[str, ...]
    _by_name: dict[str, MetricField] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_name", {f.name: f for f in self.fields})

    @property
    def label(self) -> str:
        return self.role.value.capitalize()

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> MetricField:
        return self._by_name[name]

    def key_for(self, name: str) -> str:
        return self._by_name[name].key


def _counter(name: str, key: str, label: str) -> MetricField:
    return MetricField(name=name, key=key, label=label, kind=FieldKind.counter)


def _currency(name: str, key: str, label: str) -> MetricField:
    return MetricField(name=name, key=key, label=label, kind=FieldKind.currency)


DIALER = RoleConfig(
    role=Role.dialer,
    model=DialerMetrics,
    fields=(
        _counter("dials", "dials", "Dials"),
        _counter("connects", "connects", "Connects"),
        _counter("conversations", "conversations", "Conversations"),
        _counter("qualified_conversations", "qualifiedConversations", "Qualified Conversations"),
        _counter("meetings_scheduled", "meetingsScheduled", "Meetings Scheduled"),
        _counter("meetings_set", "meetingsSet", "Meetings Set"),
        _counter("meetings_showed", "meetingsShowed", "Meetings Showed"),
        _counter("no_shows", "noShows", "No Shows"),
        _counter("closed_deals", "closedDeals", "Closed Deals"),
        _currency("revenue_generated", "revenueGenerated", "Revenue Generated ($)"),
        _currency("cash_collected", "cashCollected", "Cash Collected ($)"),
    ),
    rules=(
        Rule("connects", "Connects cannot exceed Dials", lambda m: m["connects"] > m["dials"]),
        Rule("conversations", "Conversations cannot exceed Connects", lambda m: m["conversations"] > m["connects"]),
        Rule(
            "qualified_conversations",
            "Qualified Conversations cannot exceed Conversations",
            lambda m: m["qualified_conversations"] > m["conversations"],
        ),
        Rule("meetings_scheduled", "Meetings Scheduled cannot be negative", lambda m: m["meetings_scheduled"] < 0),
        Rule(
            "meetings_showed",
            "Meetings Showed cannot exceed Meetings Set",
            lambda m: m["meetings_showed"] > m["meetings_set"],
        ),
        Rule("no_shows", "No Shows cannot exceed Meetings Set", lambda m: m["no_shows"] > m["meetings_set"]),
        Rule(
            "meetings_set",
            "Meetings Set must equal Meetings Showed + No Shows",
            lambda m: m["meetings_set"] != m["meetings_showed"] + m["no_shows"],
        ),
        Rule(
            "closed_deals",
            "Closed Deals cannot exceed Meetings Showed",
            lambda m: m["closed_deals"] > m["meetings_showed"],
        ),
        Rule(
            "revenue_generated",
            "Revenue Generated must be greater than 0 if Closed Deals > 0",
            lambda m: m["closed_deals"] > 0 and m["revenue_generated"] <= 0,
        ),
        Rule(
            "closed_deals",
            "Closed Deals must be greater than 0 if cash was collected",
            lambda m: m["cash_collected"] > 0 and m["closed_deals"] <= 0,
        ),
    ),
    rates=(
        RateMetric("connect_rate", "Connect Rate", ("connects",), ("dials",)),
        RateMetric("conversation_rate", "Conversation Rate", ("conversations",), ("connects",)),
        RateMetric("qualification_rate", "Qualification Rate", ("qualified_conversations",), ("conversations",)),
        RateMetric("show_rate", "Show Rate", ("meetings_showed",), ("meetings_set",)),
        RateMetric("close_rate", "Close Rate", ("closed_deals",), ("meetings_showed",)),
    ),
    series_fields=("revenue_generated", "cash_collected"),
)


SETTER = RoleConfig(
    role=Role.setter,
    model=SetterMetrics,
    fields=(
        _counter("daily_outbound_conversations", "dailyOutboundConversations", "New Outbound Convos"),
        _counter("inbound_conversations", "inboundConversations", "New Inbound Convos"),
        _counter("follow_ups", "followUps", "Follow-Ups"),
        _counter("calls_proposed", "callsProposed", "Calls Proposed"),
        _counter(
            "total_high_ticket_sales_calls_booked",
            "totalHighTicketSalesCallsBooked",
            "High-Ticket Sales Calls Booked",
        ),
        _counter("sets_scheduled", "setsScheduled", "Sets Scheduled Today"),
        _counter("sets_taken", "setsTaken", "Sets Taken Today"),
        _counter("closed_sets", "closedSets", "Closed Sets"),
        _currency("revenue_generated", "revenueGenerated", "Revenue Generated ($)"),
        _currency("new_cash_collected", "newCashCollected", "New Cash Collected ($)"),
        _currency("recurring_cash_collected", "recurringCashCollected", "Recurring Cash Collected ($)"),
        _currency("downsell_revenue", "downsellRevenue", "Downsell Revenue ($)"),
    ),
    rules=(
        Rule(
            "calls_proposed",
            "Cannot exceed New Outbound Convos + New Inbound Convos + Follow-Ups",
            lambda m: m["calls_proposed"]
            > m["daily_outbound_conversations"] + m["inbound_conversations"] + m["follow_ups"],
        ),
        Rule(
            "total_high_ticket_sales_calls_booked",
            "Cannot exceed Calls Proposed",
            lambda m: m["calls_proposed"] < m["total_high_ticket_sales_calls_booked"],
        ),
        Rule("sets_taken", "Cannot exceed Sets Scheduled Today", lambda m: m["sets_taken"] > m["sets_scheduled"]),
        Rule("closed_sets", "Cannot exceed Sets Taken Today", lambda m: m["closed_sets"] > m["sets_taken"]),
        Rule(
            "revenue_generated",
            "Must be greater than or equal to New Cash Collected + Recurring Cash Collected + Downsell Revenue",
            lambda m: m["revenue_generated"]
            < m["new_cash_collected"] + m["recurring_cash_collected"] + m["downsell_revenue"],
        ),
        Rule(
            "new_cash_collected",
            "Cannot exceed Revenue Generated",
            lambda m: m["new_cash_collected"] > m["revenue_generated"],
        ),
        Rule(
            "recurring_cash_collected",
            "Cannot exceed Revenue Generated",
            lambda m: m["recurring_cash_collected"] > m["revenue_generated"],
        ),
        Rule(
            "downsell_revenue",
            "Cannot exceed Revenue Generated",
            lambda m: m["downsell_revenue"] > m["revenue_generated"],
        ),
    ),
    rates=(
        RateMetric(
            "call_proposal_rate",
            "Call Proposal Rate",
            ("calls_proposed",),
            ("daily_outbound_conversations", "inbound_conversations", "follow_ups"),
        ),
        RateMetric(
            "high_ticket_booking_rate",
            "High-Ticket Booking Rate",
            ("total_high_ticket_sales_calls_booked",),
            ("calls_proposed",),
        ),
        RateMetric("show_rate", "Show Rate", ("sets_taken",), ("sets_scheduled",)),
        RateMetric("close_rate", "Close Rate", ("closed_sets",), ("sets_taken",)),
    ),
    series_fields=("revenue_generated", "new_cash_collected", "recurring_cash_collected", "downsell_revenue"),
)


def _booked_outcomes(m: dict[str, float]) -> float:
    return m["shows"] + m["no_shows"] + m["cancelled"] + m["disqualified"] + m["rescheduled"]


CLOSER = RoleConfig(
    role=Role.closer,
    model=CloserMetrics,
    fields=(
        _counter("daily_calls_booked", "dailyCallsBooked", "Calls Booked"),
        _counter("calls_taken", "callsTaken", "Calls Taken"),
        _counter("shows", "shows", "Shows"),
        _counter("no_shows", "noShows", "No Shows"),
        _counter("cancelled", "cancelled", "Cancellations"),
        _counter("disqualified", "disqualified", "Disqualifications"),
        _counter("rescheduled", "rescheduled", "Reschedules"),
        _counter("offers_made", "offersMade", "Offers Made"),
        _counter("closes", "closes", "Closes"),
        _currency("cash_collected", "cashCollected", "Cash Collected ($)"),
        _currency("revenue_generated", "revenueGenerated", "Revenue Generated ($)"),
    ),
    rules=(
        Rule(
            "daily_calls_booked",
            "Daily Calls Booked must equal the sum of Shows, No Shows, Cancelled, Disqualified, and Rescheduled",
            lambda m: m["daily_calls_booked"] != _booked_outcomes(m),
        ),
        Rule(
            "shows",
            "Shows cannot exceed Daily Calls Booked minus Cancelled, Disqualified, and Rescheduled",
            lambda m: m["shows"] > m["daily_calls_booked"] - m["cancelled"] - m["disqualified"] - m["rescheduled"],
        ),
        Rule(
            "no_shows",
            "No Shows cannot exceed Daily Calls Booked minus Shows, Cancelled, Disqualified, and Rescheduled",
            lambda m: m["no_shows"]
            > m["daily_calls_booked"] - m["shows"] - m["cancelled"] - m["disqualified"] - m["rescheduled"],
        ),
        Rule(
            "shows",
            "Shows cannot be greater than 0 if Daily Calls Booked is 0",
            lambda m: m["daily_calls_booked"] == 0 and m["shows"] > 0,
        ),
        Rule(
            "no_shows",
            "No Shows cannot be greater than 0 if Daily Calls Booked is 0",
            lambda m: m["daily_calls_booked"] == 0 and m["no_shows"] > 0,
        ),
        Rule(
            "cancelled",
            "Cancelled cannot exceed Daily Calls Booked",
            lambda m: m["cancelled"] > m["daily_calls_booked"],
        ),
        Rule(
            "rescheduled",
            "Rescheduled cannot exceed Daily Calls Booked",
            lambda m: m["rescheduled"] > m["daily_calls_booked"],
        ),
        Rule(
            "calls_taken",
            "Calls Taken cannot exceed Daily Calls Booked",
            lambda m: m["calls_taken"] > m["daily_calls_booked"],
        ),
        Rule("offers_made", "Offers Made cannot exceed Calls Taken", lambda m: m["offers_made"] > m["calls_taken"]),
        Rule("closes", "Closes cannot exceed Calls Taken", lambda m: m["closes"] > m["calls_taken"]),
        Rule("closes", "Closes cannot exceed Offers Made", lambda m: m["closes"] > m["offers_made"]),
        Rule(
            "closes",
            "Closes must be greater than 0 if Cash Collected > 0",
            lambda m: m["cash_collected"] > 0 and m["closes"] <= 0,
        ),
        Rule(
            "closes",
            "Closes must be greater than 0 if Revenue Generated > 0",
            lambda m: m["revenue_generated"] > 0 and m["closes"] <= 0,
        ),
    ),
    rates=(
        RateMetric("show_rate", "Show Rate", ("shows",), ("daily_calls_booked",)),
        RateMetric("offer_rate", "Offer Rate", ("offers_made",), ("calls_taken",)),
        RateMetric("close_rate", "Close Rate", ("closes",), ("calls_taken",)),
    ),
    series_fields=("revenue_generated", "cash_collected"),
)


ROLE_CONFIGS: dict[Role, RoleConfig] = {
    Role.dialer: DIALER,
    Role.setter: SETTER,
    Role.closer: CLOSER,
}


def get_role_config(role: Role) -> RoleConfig:
    return ROLE_CONFIGS[Role(role)]
