import datetime as dt
import math

import pytest

from helpers import VALID_CLOSER, VALID_DIALER, metric_values
from tracker.services.roles import CLOSER, DIALER, SETTER
from tracker.services.validation import (
    DATE_REQUIRED,
    INVALID_NUMBER,
    MAX_COUNTER,
    coerce_number,
    parse_day,
    read_form_values,
    validate_submission,
)

DAY = dt.date(2024, 3, 14)


def test_dialer_meetings_set_must_equal_showed_plus_no_shows():
    values = metric_values(DIALER, **{**VALID_DIALER, "meetings_showed": 6})
    errors = validate_submission(DIALER, DAY, values)
    assert errors == {"meetingsSet": "Meetings Set must equal Meetings Showed + No Shows"}


def test_valid_dialer_day_has_no_errors():
    assert validate_submission(DIALER, DAY, metric_values(DIALER, **VALID_DIALER)) == {}


def test_closer_booked_calls_must_match_outcome_sum():
    assert validate_submission(CLOSER, DAY, metric_values(CLOSER, **VALID_CLOSER)) == {}

    values = metric_values(CLOSER, **{**VALID_CLOSER, "rescheduled": 2})
    errors = validate_submission(CLOSER, DAY, values)
    assert list(errors) == ["dailyCallsBooked"]
    assert errors["dailyCallsBooked"].startswith("Daily Calls Booked must equal")


def test_only_first_cross_field_rule_is_reported():
    # connects > dials and conversations > connects both break, only the first is reported
    values = metric_values(DIALER, dials=1, connects=5, conversations=9)
    errors = validate_submission(DIALER, DAY, values)
    assert errors == {"connects": "Connects cannot exceed Dials"}


def test_field_errors_are_all_reported():
    values = read_form_values(DIALER, {"dials": "-1", "connects": "abc", "meetingsScheduled": "2.5"})
    errors = validate_submission(DIALER, DAY, values)
    assert errors["dials"] == INVALID_NUMBER
    assert errors["connects"] == INVALID_NUMBER
    assert errors["meetingsScheduled"] == INVALID_NUMBER


def test_missing_date_is_reported_with_field_errors():
    errors = validate_submission(DIALER, None, metric_values(DIALER, dials=-3))
    assert errors["date"] == DATE_REQUIRED
    assert errors["dials"] == INVALID_NUMBER


def test_dialer_revenue_required_when_deals_closed():
    values = metric_values(DIALER, **{**VALID_DIALER, "revenue_generated": 0, "cash_collected": 0})
    errors = validate_submission(DIALER, DAY, values)
    assert errors == {"revenueGenerated": "Revenue Generated must be greater than 0 if Closed Deals > 0"}


def test_setter_calls_proposed_capped_by_conversations():
    values = metric_values(SETTER, daily_outbound_conversations=2, inbound_conversations=1, follow_ups=1, calls_proposed=5)
    errors = validate_submission(SETTER, DAY, values)
    assert errors == {"callsProposed": "Cannot exceed New Outbound Convos + New Inbound Convos + Follow-Ups"}


def test_setter_revenue_covers_cash_breakdown():
    values = metric_values(SETTER, revenue_generated=100, new_cash_collected=60, recurring_cash_collected=50)
    errors = validate_submission(SETTER, DAY, values)
    assert list(errors) == ["revenueGenerated"]


def test_currency_accepts_cents():
    values = read_form_values(DIALER, {"revenueGenerated": "10.55"})
    assert values["revenue_generated"] == 10.55
    assert "revenueGenerated" not in validate_submission(DIALER, DAY, values)


def test_form_reader_accepts_wire_keys_and_column_names():
    values = read_form_values(CLOSER, {"dailyCallsBooked": "3", "calls_taken": "2"})
    assert values["daily_calls_booked"] == 3
    assert values["calls_taken"] == 2
    assert values["closes"] == 0


def test_coerce_number():
    assert coerce_number("") == 0.0
    assert coerce_number(None) == 0.0
    assert coerce_number(" 7 ") == 7.0
    assert math.isnan(coerce_number("seven"))
    assert math.isnan(coerce_number("inf"))


def test_parse_day():
    assert parse_day("2024-03-14") == DAY
    assert parse_day("2024-03-14T08:30:00") == DAY
    assert parse_day("14/03/2024") is None
    assert parse_day("") is None


@pytest.mark.parametrize(
    "config,key",
    [(DIALER, "dials"), (SETTER, "followUps"), (CLOSER, "disqualified")],
    ids=["dialer", "setter", "closer"],
)
@pytest.mark.parametrize("raw", ["-1", "abc", "1.5"])
def test_bad_counter_input_rejected_for_every_role(config, key, raw):
    errors = validate_submission(config, DAY, read_form_values(config, {key: raw}))
    assert errors[key] == INVALID_NUMBER


@pytest.mark.parametrize(
    "config,key",
    [(DIALER, "cashCollected"), (SETTER, "downsellRevenue"), (CLOSER, "revenueGenerated")],
    ids=["dialer", "setter", "closer"],
)
def test_negative_currency_rejected_for_every_role(config, key):
    errors = validate_submission(config, DAY, read_form_values(config, {key: "-0.01"}))
    assert errors[key] == INVALID_NUMBER


def test_counter_above_column_maximum_is_rejected():
    errors = validate_submission(DIALER, DAY, read_form_values(DIALER, {"dials": "1e19"}))
    assert errors == {"dials": INVALID_NUMBER}

    at_limit = metric_values(DIALER, **{**VALID_DIALER, "dials": MAX_COUNTER})
    assert validate_submission(DIALER, DAY, at_limit) == {}


@pytest.mark.parametrize(
    "overrides,key,message",
    [
        ({"offers_made": 2, "closes": 3}, "closes", "Closes cannot exceed Offers Made"),
        ({"closes": 0, "cash_collected": 0}, "closes", "Closes must be greater than 0 if Revenue Generated > 0"),
        ({"closes": 0, "revenue_generated": 0}, "closes", "Closes must be greater than 0 if Cash Collected > 0"),
        ({"calls_taken": 11}, "callsTaken", "Calls Taken cannot exceed Daily Calls Booked"),
    ],
)
def test_closer_late_rules(overrides, key, message):
    errors = validate_submission(CLOSER, DAY, metric_values(CLOSER, **{**VALID_CLOSER, **overrides}))
    assert errors == {key: message}


VALID_SETTER_CASH = dict(revenue_generated=100, new_cash_collected=50, recurring_cash_collected=30, downsell_revenue=20)


def test_setter_cash_breakdown_within_revenue_is_valid():
    assert validate_submission(SETTER, DAY, metric_values(SETTER, **VALID_SETTER_CASH)) == {}


@pytest.mark.parametrize("field,key,offset", [
    ("new_cash_collected", "newCashCollected", "recurring_cash_collected"),
    ("recurring_cash_collected", "recurringCashCollected", "new_cash_collected"),
    ("downsell_revenue", "downsellRevenue", "new_cash_collected"),
])
def test_setter_single_cash_field_cannot_exceed_revenue(field, key, offset):
    # A negative sibling keeps the breakdown sum under revenue so only the per-field cap trips.
    values = metric_values(SETTER, revenue_generated=100, **{field: 150, offset: -60})
    errors = validate_submission(SETTER, DAY, values)
    assert errors[key] == "Cannot exceed Revenue Generated"
    assert errors[SETTER.key_for(offset)] == INVALID_NUMBER
    assert "revenueGenerated" not in errors
