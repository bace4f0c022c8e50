"""
Reservation records: lookups, listing and writes.
"""
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.reservation import Reservation
from app.models.table import Table
from app.validation.status import ReservationStatus


async def get_reservation(db: AsyncSession, reservation_id: int) -> Optional[Reservation]:
    result = await db.execute(
        select(Reservation).where(Reservation.reservation_id == reservation_id)
    )
    return result.scalar_one_or_none()


async def list_by_date(db: AsyncSession, reservation_date: date) -> List[Reservation]:
    """Reservations for a day that are still on the floor plan, earliest first."""
    result = await db.execute(
        select(Reservation)
        .where(
            Reservation.reservation_date == reservation_date,
            Reservation.status != ReservationStatus.FINISHED.value,
        )
        .order_by(Reservation.reservation_time, Reservation.reservation_id)
    )
    return list(result.scalars().all())


async def search_by_mobile_number(db: AsyncSession, mobile_number: str) -> List[Reservation]:
    """Partial match on the digits of a mobile number, ignoring ( ) - and spaces."""
    digits = "".join(ch for ch in mobile_number if ch not in "()- ")
    digits = digits.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    stored = Reservation.mobile_number
    for ch in "()- ":
        stored = func.replace(stored, ch, "")
    result = await db.execute(
        select(Reservation)
        .where(stored.like(f"%{digits}%", escape="\\"))
        .order_by(Reservation.reservation_date, Reservation.reservation_time)
    )
    return list(result.scalars().all())


async def list_reservations(db: AsyncSession) -> List[Reservation]:
    result = await db.execute(
        select(Reservation).order_by(Reservation.reservation_date, Reservation.reservation_time)
    )
    return list(result.scalars().all())


async def create_reservation(db: AsyncSession, values: Dict[str, Any]) -> Reservation:
    reservation = Reservation(**values, status=ReservationStatus.BOOKED.value)
    db.add(reservation)
    await db.commit()
    await db.refresh(reservation)
    return reservation


async def update_reservation(db: AsyncSession, reservation: Reservation, values: Dict[str, Any]) -> Reservation:
    for field, value in values.items():
        setattr(reservation, field, value)
    await db.commit()
    await db.refresh(reservation)
    return reservation


async def update_status(db: AsyncSession, reservation: Reservation, status: ReservationStatus) -> Reservation:
    """Set the status; a reservation that is no longer seated gives up its table."""
    reservation.status = status.value
    if status is not ReservationStatus.SEATED:
        await db.execute(
            update(Table)
            .where(Table.reservation_id == reservation.reservation_id)
            .values(reservation_id=None)
        )
    await db.commit()
    await db.refresh(reservation)
    return reservation
