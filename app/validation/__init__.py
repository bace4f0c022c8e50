"""Reservation and table rules"""

from app.validation.result import ErrorCode, Failure, RuleResult
from app.validation.clock import Clock, get_clock, system_clock
from app.validation.status import (
    ReservationStatus,
    KNOWN_STATUSES,
    parse_status,
    set_status,
    ensure_full_update_allowed,
    ensure_can_seat,
)
from app.validation.reservation import (
    REQUIRED_FIELDS,
    RuleContext,
    run_rules,
    validate_reservation,
    to_record,
)
from app.validation.table import (
    validate_table,
    validate_seat_request,
    ensure_fits,
    ensure_free,
    ensure_occupied,
)

__all__ = [
    "ErrorCode",
    "Failure",
    "RuleResult",
    "Clock",
    "get_clock",
    "system_clock",
    "ReservationStatus",
    "KNOWN_STATUSES",
    "parse_status",
    "set_status",
    "ensure_full_update_allowed",
    "ensure_can_seat",
    "REQUIRED_FIELDS",
    "RuleContext",
    "run_rules",
    "validate_reservation",
    "to_record",
    "validate_table",
    "validate_seat_request",
    "ensure_fits",
    "ensure_free",
    "ensure_occupied",
]
