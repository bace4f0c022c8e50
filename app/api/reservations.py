"""Reservation management API endpoints"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.errors import ApiError, raise_for
from app.models.reservation import Reservation
from app.schemas.reservation import ReservationResponse
from app.services import reservation_service
from app.validation import (
    Failure,
    RuleContext,
    ensure_full_update_allowed,
    set_status,
    to_record,
    validate_reservation,
)
from app.validation.reservation import parse_reservation_date, reservation_date_formatted
from app.api.deps import get_reservation_or_404, get_rule_context, request_data

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[ReservationResponse])
async def list_reservations(
    date: Optional[str] = None,
    mobile_number: Optional[str] = None,
    context: RuleContext = Depends(get_rule_context),
    db: AsyncSession = Depends(get_db),
):
    """List reservations for a day, or search them by mobile number"""
    if date:
        raise_for(reservation_date_formatted({"reservation_date": date}, context))
        return await reservation_service.list_by_date(db, parse_reservation_date(date))

    if mobile_number:
        return await reservation_service.search_by_mobile_number(db, mobile_number)

    return await reservation_service.list_reservations(db)


@router.post("", response_model=ReservationResponse, status_code=201)
async def create_reservation(
    data: Dict[str, Any] = Depends(request_data),
    context: RuleContext = Depends(get_rule_context),
    db: AsyncSession = Depends(get_db),
):
    """Create a new reservation; it always starts out booked"""
    raise_for(validate_reservation(data, context))

    reservation = await reservation_service.create_reservation(db, to_record(data))
    logger.info(
        "Reservation created",
        reservation_id=reservation.reservation_id,
        reservation_date=str(reservation.reservation_date),
        people=reservation.people,
    )
    return reservation


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation: Reservation = Depends(get_reservation_or_404),
):
    """Get reservation details"""
    return reservation


@router.put("/{reservation_id}/status", response_model=ReservationResponse)
async def update_reservation_status(
    reservation: Reservation = Depends(get_reservation_or_404),
    data: Dict[str, Any] = Depends(request_data),
    db: AsyncSession = Depends(get_db),
):
    """Move a reservation to another status"""
    status = set_status(reservation.status, data.get("status"))
    if isinstance(status, Failure):
        raise ApiError(status)

    previous = reservation.status
    reservation = await reservation_service.update_status(db, reservation, status)
    logger.info(
        "Reservation status updated",
        reservation_id=reservation.reservation_id,
        from_status=previous,
        to_status=reservation.status,
    )
    return reservation


@router.put("/{reservation_id}", response_model=ReservationResponse)
async def update_reservation(
    reservation: Reservation = Depends(get_reservation_or_404),
    data: Dict[str, Any] = Depends(request_data),
    context: RuleContext = Depends(get_rule_context),
    db: AsyncSession = Depends(get_db),
):
    """Edit a booked reservation"""
    raise_for(validate_reservation(data, context))
    raise_for(ensure_full_update_allowed(reservation.status))

    reservation = await reservation_service.update_reservation(db, reservation, to_record(data))
    logger.info("Reservation updated", reservation_id=reservation.reservation_id)
    return reservation
