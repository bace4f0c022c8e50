#!/usr/bin/env python3
"""
Seed script to create demo tables and reservations
"""

import asyncio
from datetime import date, time, timedelta


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from app.database import SessionLocal, engine, Base
    from app.models.reservation import Reservation
    from app.models.table import Table
    from app.validation import ReservationStatus
    
    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async with SessionLocal() as db:
        # Check if demo tables already exist
        result = await db.execute(select(Table).where(Table.table_name == "Bar #1"))
        existing = result.scalar_one_or_none()
        
        if existing:
            print("Demo data already exists. Skipping...")
            return
        
        print("Creating demo tables...")
        
        tables_data = [
            {"table_name": "Bar #1", "capacity": 1},
            {"table_name": "Bar #2", "capacity": 1},
            {"table_name": "#1", "capacity": 6},
            {"table_name": "#2", "capacity": 6},
        ]
        for table_data in tables_data:
            db.add(Table(**table_data))
        
        # Next day the restaurant is open (closed on Tuesdays)
        day = date.today() + timedelta(days=1)
        if day.weekday() == 1:
            day += timedelta(days=1)
        
        reservations_data = [
            {"first_name": "Rick", "last_name": "Sanchez", "mobile_number": "202-555-0164",
             "reservation_time": time(20, 0), "people": 6},
            {"first_name": "Frank", "last_name": "Palicky", "mobile_number": "202-555-0153",
             "reservation_time": time(11, 30), "people": 1},
            {"first_name": "Bird", "last_name": "Person", "mobile_number": "808-555-0141",
             "reservation_time": time(12, 30), "people": 1},
            {"first_name": "Tiger", "last_name": "Lion", "mobile_number": "808-555-0140",
             "reservation_time": time(18, 0), "people": 3},
        ]
        for reservation_data in reservations_data:
            db.add(Reservation(
                reservation_date=day,
                status=ReservationStatus.BOOKED.value,
                **reservation_data,
            ))
        
        await db.commit()
        
        print(f"""
Demo data created successfully!

Tables: {len(tables_data)} created
Reservations: {len(reservations_data)} booked for {day.isoformat()}
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
