"""Pydantic schemas for responses"""

from app.schemas.reservation import ReservationResponse
from app.schemas.table import TableResponse

__all__ = [
    "ReservationResponse",
    "TableResponse",
]
