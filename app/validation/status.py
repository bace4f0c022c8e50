"""Reservation status state machine"""

import enum
from typing import Any, Union

from app.validation.result import ErrorCode, Failure, RuleResult


class ReservationStatus(str, enum.Enum):
    """Lifecycle stage of a reservation"""
    BOOKED = "booked"
    SEATED = "seated"
    FINISHED = "finished"
    CANCELLED = "cancelled"


KNOWN_STATUSES = tuple(status.value for status in ReservationStatus)

# booked -> seated -> finished, booked -> cancelled
TRANSITIONS = {
    ReservationStatus.BOOKED: {ReservationStatus.SEATED, ReservationStatus.CANCELLED},
    ReservationStatus.SEATED: {ReservationStatus.FINISHED},
    ReservationStatus.FINISHED: set(),
    ReservationStatus.CANCELLED: set(),
}


def parse_status(raw: Any) -> Union[ReservationStatus, Failure]:
    """Turn untrusted input into a ReservationStatus"""
    try:
        return ReservationStatus(raw)
    except ValueError:
        return Failure(
            ErrorCode.UNKNOWN_STATUS,
            f"status {raw} is unknown. must be booked, seated, finished or cancelled",
            field="status",
        )


def set_status(current: Union[str, ReservationStatus], requested: Any) -> Union[ReservationStatus, Failure]:
    """
    Resolve a status-only update.

    The requested value must be one of the four known statuses, and nothing
    may move a finished reservation. The returned status becomes current.
    """
    status = parse_status(requested)
    if isinstance(status, Failure):
        return status
    if ReservationStatus(current) is ReservationStatus.FINISHED:
        return Failure(ErrorCode.TERMINAL_STATUS, "finished reservations cannot be updated", field="status")
    return status


def ensure_full_update_allowed(current: Union[str, ReservationStatus]) -> RuleResult:
    """Only booked reservations can be edited"""
    if ReservationStatus(current) is not ReservationStatus.BOOKED:
        return Failure(
            ErrorCode.NOT_BOOKED,
            "only reservations with a status of booked can be edited",
            field="status",
        )
    return None


def ensure_can_seat(reservation_id: int, current: Union[str, ReservationStatus]) -> RuleResult:
    if ReservationStatus.SEATED not in TRANSITIONS[ReservationStatus(current)]:
        return Failure(
            ErrorCode.NOT_BOOKED,
            f"reservation {reservation_id} is {ReservationStatus(current).value} and cannot be seated",
            field="reservation_id",
        )
    return None
