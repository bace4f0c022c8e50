"""
Validation rules for proposed reservation records.

Each rule inspects the raw request data and returns None when it passes or a
Failure when it rejects. Rules run in a fixed order through run_rules, which
stops at the first Failure so that no later rule (and no write) ever sees a
record an earlier rule rejected. Later rules rely on that: the combined
date/time helpers assume the format rules already passed.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Mapping, Sequence

from app.validation.result import ErrorCode, Failure, RuleResult
from app.validation.status import ReservationStatus

TEXT_FIELDS = ("first_name", "last_name", "mobile_number")

# Largest value an INTEGER column holds on every supported backend
MAX_INTEGER = 2**31 - 1

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
)

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"(?:2[0-3]|[01]?[0-9]):[0-5][0-9](?::[0-5][0-9])?")

WEEKDAY_NAMES = ("Mondays", "Tuesdays", "Wednesdays", "Thursdays", "Fridays", "Saturdays", "Sundays")


@dataclass(frozen=True)
class RuleContext:
    """Per-request inputs the rules need besides the record itself"""
    now: datetime
    closed_weekday: int = 1
    opening_time: time = time(10, 30)
    closing_time: time = time(21, 30)


Rule = Callable[[Mapping[str, Any], RuleContext], RuleResult]


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def parse_reservation_date(value: str) -> date:
    year, month, day = (int(part) for part in value.split("-"))
    return date(year, month, day)


def parse_reservation_time(value: str) -> time:
    parts = [int(part) for part in value.split(":")]
    return time(*parts)


def reservation_instant(data: Mapping[str, Any]) -> datetime:
    """Combine reservation_date and reservation_time into one naive datetime"""
    return datetime.combine(
        parse_reservation_date(data["reservation_date"]),
        parse_reservation_time(data["reservation_time"]),
    )


def _format_clock(value: time) -> str:
    return value.strftime("%I:%M %p").lstrip("0")


# Rules

def has_required_fields(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    for field in REQUIRED_FIELDS:
        if is_blank(data.get(field)):
            return Failure(ErrorCode.MISSING_FIELD, f"{field} is required", field=field)
    return None


def text_fields_are_strings(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    for field in TEXT_FIELDS:
        if not isinstance(data[field], str):
            return Failure(ErrorCode.INVALID_TYPE, f"{field} must be text", field=field)
    return None


def people_is_number(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    people = data["people"]
    # bool is an int subclass; JSON true/false is not a party size
    if isinstance(people, bool) or not isinstance(people, (int, float)):
        return Failure(ErrorCode.INVALID_TYPE, "people property must be a number", field="people")
    if isinstance(people, float) and not people.is_integer():
        return Failure(ErrorCode.INVALID_TYPE, "people property must be a whole number", field="people")
    if people < 1:
        return Failure(ErrorCode.INVALID_TYPE, "people property must be at least 1", field="people")
    if people > MAX_INTEGER:
        return Failure(ErrorCode.INVALID_TYPE, f"people property must be at most {MAX_INTEGER}", field="people")
    return None


def reservation_date_formatted(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    value = data["reservation_date"]
    failure = Failure(
        ErrorCode.INVALID_FORMAT,
        "reservation_date must be in correct format: YYYY-MM-DD",
        field="reservation_date",
    )
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return failure
    try:
        parse_reservation_date(value)
    except ValueError:
        return failure
    return None


def reservation_time_formatted(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    value = data["reservation_time"]
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        return Failure(
            ErrorCode.INVALID_FORMAT,
            "reservation_time must be in correct format: HH:MM or HH:MM:SS",
            field="reservation_time",
        )
    return None


def reservation_not_on_closed_day(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    if reservation_instant(data).weekday() == ctx.closed_weekday:
        return Failure(
            ErrorCode.CLOSED_DAY,
            f"the restaurant is closed on {WEEKDAY_NAMES[ctx.closed_weekday]}",
            field="reservation_date",
        )
    return None


def reservation_not_in_past(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    if reservation_instant(data) < ctx.now:
        return Failure(
            ErrorCode.PAST_DATE,
            "reservations must be made only for future dates",
            field="reservation_date",
        )
    return None


def reservation_during_open_hours(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    at = parse_reservation_time(data["reservation_time"])
    if at < ctx.opening_time or at > ctx.closing_time:
        return Failure(
            ErrorCode.OUTSIDE_HOURS,
            "reservations must be made between "
            f"{_format_clock(ctx.opening_time)} and {_format_clock(ctx.closing_time)}",
            field="reservation_time",
        )
    return None


def status_is_booked(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    status = data.get("status")
    if not is_blank(status) and status != ReservationStatus.BOOKED.value:
        return Failure(ErrorCode.INVALID_STATUS, f"status cannot be {status}", field="status")
    return None


# Create and full-update share the same chain; the booked-only gate for
# updates depends on the stored record and runs after it.
RESERVATION_RULES: Sequence[Rule] = (
    has_required_fields,
    text_fields_are_strings,
    people_is_number,
    reservation_date_formatted,
    reservation_time_formatted,
    reservation_not_on_closed_day,
    reservation_not_in_past,
    reservation_during_open_hours,
    status_is_booked,
)


def run_rules(rules: Sequence[Rule], data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    """Run rules in order and return the first Failure, or None if all pass"""
    for rule in rules:
        failure = rule(data, ctx)
        if failure is not None:
            return failure
    return None


def validate_reservation(data: Mapping[str, Any], ctx: RuleContext) -> RuleResult:
    return run_rules(RESERVATION_RULES, data, ctx)


def to_record(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Typed column values for a record that passed validate_reservation"""
    return {
        "first_name": data["first_name"],
        "last_name": data["last_name"],
        "mobile_number": data["mobile_number"],
        "reservation_date": parse_reservation_date(data["reservation_date"]),
        "reservation_time": parse_reservation_time(data["reservation_time"]),
        "people": int(data["people"]),
    }
