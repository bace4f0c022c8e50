"""Validation rules for tables and seating"""

from typing import Any, Mapping

from app.validation.result import ErrorCode, Failure, RuleResult
from app.validation.reservation import MAX_INTEGER

REQUIRED_TABLE_FIELDS = ("table_name", "capacity")


def validate_table(data: Mapping[str, Any]) -> RuleResult:
    for field in REQUIRED_TABLE_FIELDS:
        value = data.get(field)
        if value is None or value == "":
            return Failure(ErrorCode.MISSING_FIELD, f"{field} is required", field=field)

    table_name = data["table_name"]
    if not isinstance(table_name, str) or len(table_name.strip()) < 2:
        return Failure(
            ErrorCode.INVALID_FORMAT,
            "table_name must be at least 2 characters long",
            field="table_name",
        )

    capacity = data["capacity"]
    if isinstance(capacity, bool) or not isinstance(capacity, int) or not 1 <= capacity <= MAX_INTEGER:
        return Failure(ErrorCode.INVALID_TYPE, "capacity must be a number of at least 1", field="capacity")
    return None


def validate_seat_request(data: Mapping[str, Any]) -> RuleResult:
    reservation_id = data.get("reservation_id")
    if reservation_id is None or reservation_id == "":
        return Failure(ErrorCode.MISSING_FIELD, "reservation_id is required", field="reservation_id")
    if isinstance(reservation_id, bool) or not isinstance(reservation_id, int) or abs(reservation_id) > MAX_INTEGER:
        return Failure(ErrorCode.INVALID_TYPE, "reservation_id must be a number", field="reservation_id")
    return None


def ensure_fits(table_name: str, capacity: int, people: int) -> RuleResult:
    if people > capacity:
        return Failure(
            ErrorCode.INSUFFICIENT_CAPACITY,
            f"table {table_name} seats {capacity}, party has {people}",
            field="capacity",
        )
    return None


def ensure_free(table_name: str, reservation_id: Any) -> RuleResult:
    if reservation_id is not None:
        return Failure(ErrorCode.TABLE_OCCUPIED, f"table {table_name} is occupied", field="table_id")
    return None


def ensure_occupied(table_name: str, reservation_id: Any) -> RuleResult:
    if reservation_id is None:
        return Failure(ErrorCode.TABLE_NOT_OCCUPIED, f"table {table_name} is not occupied", field="table_id")
    return None
