"""Airport and airline endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.core.database import get_db
from flight_booking.middleware.rate_limiter import limiter
from flight_booking.schemas import AirlineResponse, AirportResponse
from flight_booking.services import FlightService

router = APIRouter()


@router.get("/airports", response_model=List[AirportResponse])
@limiter.limit("60/minute")
async def list_airports(request: Request, db: AsyncSession = Depends(get_db)):
    """List all airports"""
    airports = await FlightService.list_airports(db)
    return [AirportResponse.model_validate(a) for a in airports]


@router.get("/airlines", response_model=List[AirlineResponse])
@limiter.limit("60/minute")
async def list_airlines(request: Request, db: AsyncSession = Depends(get_db)):
    """List all airlines"""
    airlines = await FlightService.list_airlines(db)
    return [AirlineResponse.model_validate(a) for a in airlines]
