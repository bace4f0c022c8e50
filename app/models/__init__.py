"""Database models"""

from app.models.reservation import Reservation
from app.models.table import Table

__all__ = [
    "Reservation",
    "Table",
]
