import datetime as dt
import math
from collections.abc import Mapping
from typing import Any

from tracker.services.roles import MetricField, RoleConfig

DATE_REQUIRED = "Please select a date"
INVALID_NUMBER = "Please enter a valid number"

# Counters are stored in a 32-bit INTEGER column.
MAX_COUNTER = 2_147_483_647


def coerce_number(raw: Any) -> float:
    """Form value -> float. Blank means 0; anything unparsable or non-finite is NaN."""
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return math.nan
    if math.isinf(value):
        return math.nan
    return value


def parse_day(raw: Any) -> dt.date | None:
    if raw is None:
        return None
    if isinstance(raw, dt.datetime):
        return raw.date()
    if isinstance(raw, dt.date):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(text).date()
    except ValueError:
        return None


def read_form_values(config: RoleConfig, form: Mapping[str, Any]) -> dict[str, float]:
    # Accept both the wire key (dailyCallsBooked) and the column name (daily_calls_booked).
    values: dict[str, float] = {}
    for f in config.fields:
        raw = form.get(f.key) if f.key in form else form.get(f.name)
        values[f.name] = coerce_number(raw)
    return values


def is_valid_number(field: MetricField, value: float) -> bool:
    if math.isnan(value) or value < 0:
        return False
    if not field.is_currency and (not float(value).is_integer() or value > MAX_COUNTER):
        return False
    return True


def validate_submission(config: RoleConfig, day: dt.date | None, values: Mapping[str, float]) -> dict[str, str]:
    """Return ``{wire_key: message}`` for every problem found, or ``{}`` when the record is valid.

    Field checks are independent and all reported. Cross-field rules are checked
    in configuration order and only the first violated rule is reported.
    """
    errors: dict[str, str] = {}
    if day is None:
        errors["date"] = DATE_REQUIRED

    metrics = {name: values.get(name, math.nan) for name in config.field_names}
    for f in config.fields:
        if not is_valid_number(f, metrics[f.name]):
            errors[f.key] = INVALID_NUMBER

    for rule in config.rules:
        if rule.violated(metrics):
            errors[config.key_for(rule.field)] = rule.message
            break

    return errors
