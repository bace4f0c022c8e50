"""
Tables: listing, creation and seating.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.reservation import Reservation
from app.models.table import Table
from app.validation.status import ReservationStatus


async def get_table(db: AsyncSession, table_id: int) -> Optional[Table]:
    result = await db.execute(select(Table).where(Table.table_id == table_id))
    return result.scalar_one_or_none()


async def list_tables(db: AsyncSession) -> List[Table]:
    result = await db.execute(select(Table).order_by(Table.table_name))
    return list(result.scalars().all())


async def create_table(
    db: AsyncSession,
    table_name: str,
    capacity: int,
) -> Table:
    table = Table(table_name=table_name, capacity=capacity)
    db.add(table)
    await db.commit()
    await db.refresh(table)
    return table


async def seat_reservation(db: AsyncSession, table: Table, reservation: Reservation) -> Table:
    """Assign the reservation to the table and mark it seated, in one commit."""
    table.reservation_id = reservation.reservation_id
    reservation.status = ReservationStatus.SEATED.value
    await db.commit()
    await db.refresh(table)
    return table


async def finish_table(db: AsyncSession, table: Table, reservation: Optional[Reservation]) -> Table:
    """Free the table and mark its reservation finished, in one commit."""
    if reservation is not None:
        reservation.status = ReservationStatus.FINISHED.value
    table.reservation_id = None
    await db.commit()
    await db.refresh(table)
    return table
