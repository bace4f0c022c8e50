"""Rule outcomes shared by the reservation and table validators"""

import enum
from dataclasses import dataclass
from typing import Optional


class ErrorCode(str, enum.Enum):
    """Client-input error taxonomy"""
    MISSING_FIELD = "MissingField"
    INVALID_TYPE = "InvalidType"
    INVALID_FORMAT = "InvalidFormat"
    CLOSED_DAY = "ClosedDay"
    PAST_DATE = "PastDate"
    OUTSIDE_HOURS = "OutsideHours"
    INVALID_STATUS = "InvalidStatus"
    UNKNOWN_STATUS = "UnknownStatus"
    TERMINAL_STATUS = "TerminalStatus"
    NOT_BOOKED = "NotBooked"
    NOT_FOUND = "NotFound"
    INSUFFICIENT_CAPACITY = "InsufficientCapacity"
    TABLE_OCCUPIED = "TableOccupied"
    TABLE_NOT_OCCUPIED = "TableNotOccupied"


@dataclass(frozen=True)
class Failure:
    """A rejected rule: which rule failed and why"""
    code: ErrorCode
    message: str
    field: Optional[str] = None

    @property
    def status_code(self) -> int:
        if self.code is ErrorCode.NOT_FOUND:
            return 404
        return 400


# A rule passes with None and rejects with a Failure
RuleResult = Optional[Failure]
