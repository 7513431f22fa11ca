"""
Admin endpoints - read-only views over every flight and booking
"""
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.api.deps import Identity, require_admin
from flight_booking.core.database import get_db
from flight_booking.middleware.rate_limiter import limiter
from flight_booking.schemas import BookingListResponse, BookingResponse, FlightResponse
from flight_booking.services import BookingService, FlightService

router = APIRouter(prefix="/admin")


@router.get("/flights", response_model=List[FlightResponse])
@limiter.limit("30/minute")
async def list_all_flights(
    request: Request,
    identity: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """All flights, ordered by departure"""
    flights = await FlightService.list_flights(db)
    return [FlightResponse.model_validate(f) for f in flights]


@router.get("/bookings", response_model=BookingListResponse)
@limiter.limit("30/minute")
async def list_all_bookings(
    request: Request,
    identity: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """All bookings across users, newest first"""
    bookings = await BookingService.list_all_bookings(db)
    return BookingListResponse(
        bookings=[BookingResponse.from_booking(b) for b in bookings],
        total=len(bookings),
    )
