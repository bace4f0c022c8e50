"""Table and seating API endpoints"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.errors import ApiError, raise_for
from app.models.table import Table
from app.schemas.table import TableResponse
from app.services import reservation_service, table_service
from app.validation import (
    ensure_can_seat,
    ensure_fits,
    ensure_free,
    ensure_occupied,
    validate_seat_request,
    validate_table,
)
from app.api.deps import get_table_or_404, not_found, request_data

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[TableResponse])
async def list_tables(
    db: AsyncSession = Depends(get_db),
):
    """List tables by name"""
    return await table_service.list_tables(db)


@router.post("", response_model=TableResponse, status_code=201)
async def create_table(
    data: Dict[str, Any] = Depends(request_data),
    db: AsyncSession = Depends(get_db),
):
    """Create a new table"""
    raise_for(validate_table(data))

    table = await table_service.create_table(db, data["table_name"].strip(), data["capacity"])
    logger.info("Table created", table_id=table.table_id, capacity=table.capacity)
    return table


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(
    table: Table = Depends(get_table_or_404),
):
    """Get table details"""
    return table


@router.put("/{table_id}/seat", response_model=TableResponse)
async def seat_table(
    table: Table = Depends(get_table_or_404),
    data: Dict[str, Any] = Depends(request_data),
    db: AsyncSession = Depends(get_db),
):
    """Seat a booked reservation at a free table that fits the party"""
    raise_for(validate_seat_request(data))

    reservation_id = data["reservation_id"]
    reservation = await reservation_service.get_reservation(db, reservation_id)
    if reservation is None:
        raise ApiError(not_found("reservation", reservation_id))

    raise_for(ensure_can_seat(reservation.reservation_id, reservation.status))
    raise_for(ensure_fits(table.table_name, table.capacity, reservation.people))
    raise_for(ensure_free(table.table_name, table.reservation_id))

    table = await table_service.seat_reservation(db, table, reservation)
    logger.info("Reservation seated", table_id=table.table_id, reservation_id=reservation_id)
    return table


@router.delete("/{table_id}/seat", response_model=TableResponse)
async def finish_table(
    table: Table = Depends(get_table_or_404),
    db: AsyncSession = Depends(get_db),
):
    """Finish the party at a table and free it"""
    raise_for(ensure_occupied(table.table_name, table.reservation_id))

    reservation_id = table.reservation_id
    reservation = await reservation_service.get_reservation(db, reservation_id)
    table = await table_service.finish_table(db, table, reservation)
    logger.info("Table finished", table_id=table.table_id, reservation_id=reservation_id)
    return table
