"""Reservation model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, Date, Time, DateTime
from sqlalchemy.orm import relationship

from app.database import Base


class Reservation(Base):
    """Table reservations"""
    __tablename__ = "reservations"
    
    reservation_id = Column(Integer, primary_key=True, autoincrement=True)
    
    # Guest information
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    mobile_number = Column(String(50), nullable=False, index=True)
    
    # Reservation details
    reservation_date = Column(Date, nullable=False, index=True)
    reservation_time = Column(Time, nullable=False)
    people = Column(Integer, nullable=False)
    
    # Status
    status = Column(String(50), nullable=False, default="booked")  # booked, seated, finished, cancelled
    
    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    table = relationship("Table", back_populates="reservation", uselist=False)
