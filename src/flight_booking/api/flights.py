"""
Flight endpoints - read-only
Uses FlightService for business logic
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.core.database import get_db
from flight_booking.middleware.rate_limiter import limiter
from flight_booking.models import CabinClass
from flight_booking.schemas import FlightResponse, SeatMapResponse
from flight_booking.services import FlightService

router = APIRouter()


@router.get("/flights/search", response_model=List[FlightResponse])
@limiter.limit("30/minute")
async def search_flights(
    request: Request,
    origin: str = Query(..., min_length=3, max_length=3, description="Origin airport code"),
    destination: str = Query(..., min_length=3, max_length=3, description="Destination airport code"),
    departure_date: date = Query(..., alias="date", description="Departure date (YYYY-MM-DD)"),
    db: AsyncSession = Depends(get_db),
):
    """
    Search flights by route and departure day

    Returns an empty list when nothing matches.
    """
    flights = await FlightService.search_flights(
        db=db,
        origin=origin,
        destination=destination,
        departure_date=departure_date,
    )
    return [FlightResponse.model_validate(f) for f in flights]


@router.get("/flights/{flight_id}", response_model=FlightResponse)
@limiter.limit("60/minute")
async def get_flight(
    request: Request,
    flight_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a flight with airline and airport details"""
    flight = await FlightService.get_flight(db=db, flight_id=flight_id)
    return FlightResponse.model_validate(flight)


@router.get("/flights/{flight_id}/seats", response_model=SeatMapResponse)
@limiter.limit("30/minute")
async def get_flight_seats(
    request: Request,
    flight_id: int,
    cabin_class: Optional[CabinClass] = Query(None, alias="cabinClass"),
    db: AsyncSession = Depends(get_db),
):
    """Seat inventory for a flight, optionally filtered by cabin class"""
    seats, cabins = await FlightService.get_flight_seats(
        db=db,
        flight_id=flight_id,
        cabin_class=cabin_class,
    )
    return SeatMapResponse(
        flight_id=flight_id,
        seats=seats,
        total_seats=len(seats),
        available_seats=sum(1 for seat in seats if seat.is_available),
        cabins=cabins,
    )
