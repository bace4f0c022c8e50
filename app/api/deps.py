"""Shared request dependencies"""

from typing import Any, Dict, Optional

from fastapi import Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.errors import ApiError
from app.models.reservation import Reservation
from app.models.table import Table
from app.services import reservation_service, table_service
from app.validation import Clock, ErrorCode, Failure, RuleContext, get_clock
from app.validation.reservation import MAX_INTEGER


def get_rule_context(clock: Clock = Depends(get_clock)) -> RuleContext:
    """Rule inputs for this request, with "now" read once from the clock"""
    return RuleContext(
        now=clock(),
        closed_weekday=settings.closed_weekday,
        opening_time=settings.opening_time,
        closing_time=settings.closing_time,
    )


def request_data(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Request body, accepting both a bare object and the {"data": {...}} envelope"""
    data = payload.get("data")
    if isinstance(data, dict):
        return data
    return payload


def not_found(kind: str, identifier: Any) -> Failure:
    return Failure(ErrorCode.NOT_FOUND, f"{kind} {identifier} does not exist")


def parse_identifier(raw: str) -> Optional[int]:
    """Path id as an int, or None when it cannot name a stored row"""
    try:
        identifier = int(raw)
    except ValueError:
        return None
    if not 1 <= identifier <= MAX_INTEGER:
        return None
    return identifier


async def get_reservation_or_404(
    reservation_id: str,
    db: AsyncSession = Depends(get_db),
) -> Reservation:
    identifier = parse_identifier(reservation_id)
    reservation = None
    if identifier is not None:
        reservation = await reservation_service.get_reservation(db, identifier)
    if reservation is None:
        raise ApiError(not_found("reservation", reservation_id))
    return reservation


async def get_table_or_404(
    table_id: str,
    db: AsyncSession = Depends(get_db),
) -> Table:
    identifier = parse_identifier(table_id)
    table = None
    if identifier is not None:
        table = await table_service.get_table(db, identifier)
    if table is None:
        raise ApiError(not_found("table", table_id))
    return table
