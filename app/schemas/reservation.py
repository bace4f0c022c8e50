"""Reservation schemas"""

from datetime import date, datetime, time
from typing import Optional
from pydantic import BaseModel, field_serializer


class ReservationResponse(BaseModel):
    """Reservation response"""
    reservation_id: int
    first_name: str
    last_name: str
    mobile_number: str
    reservation_date: date
    reservation_time: time
    people: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_serializer("reservation_time")
    def serialize_time(self, value: time) -> str:
        return value.strftime("%H:%M:%S")

    class Config:
        from_attributes = True
