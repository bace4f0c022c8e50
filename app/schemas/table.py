"""Table schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class TableResponse(BaseModel):
    """Table response"""
    table_id: int
    table_name: str
    capacity: int
    reservation_id: Optional[int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
