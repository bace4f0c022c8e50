"""Dining table model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base


class Table(Base):
    """Physical tables that reservations are seated at"""
    __tablename__ = "tables"
    
    table_id = Column(Integer, primary_key=True, autoincrement=True)
    table_name = Column(String(100), nullable=False)
    capacity = Column(Integer, nullable=False)
    
    # Occupied while set; cleared when the party finishes
    reservation_id = Column(Integer, ForeignKey("reservations.reservation_id"), nullable=True)
    
    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    reservation = relationship("Reservation", back_populates="table")

    @property
    def is_occupied(self) -> bool:
        return self.reservation_id is not None
