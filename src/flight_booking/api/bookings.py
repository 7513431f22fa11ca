"""Bookings API endpoints"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.api.deps import Identity, get_identity
from flight_booking.core.database import get_db
from flight_booking.middleware.rate_limiter import limiter
from flight_booking.models import BookingStatus
from flight_booking.schemas import (
    BookingCreate,
    BookingListResponse,
    BookingResponse,
    CancellationResponse,
)
from flight_booking.services import BookingService

router = APIRouter()


@router.post("/bookings", response_model=BookingResponse, status_code=201)
@limiter.limit("10/minute")
async def create_booking(
    request: Request,
    booking_data: BookingCreate,
    identity: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a confirmed booking

    Errors:
    - 404: flight or seat not found
    - 409: seat already taken
    - 400: validation (seat/passenger mismatch, wrong cabin, flight not bookable)
    """
    result = await BookingService.create_booking(
        db=db,
        flight_id=booking_data.flight_id,
        cabin_class=booking_data.cabin_class,
        passengers=booking_data.passengers,
        seat_ids=booking_data.seat_ids,
        user_key=identity.user_key,
        payment_method=booking_data.payment_method,
    )
    return BookingResponse.from_booking(result.booking, result.breakdown)


@router.get("/bookings", response_model=BookingListResponse)
@limiter.limit("30/minute")
async def list_user_bookings(
    request: Request,
    status: Optional[BookingStatus] = Query(None),
    identity: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    """List all bookings for the current user"""
    bookings = await BookingService.list_user_bookings(db=db, user_key=identity.user_key, status=status)
    return BookingListResponse(
        bookings=[BookingResponse.from_booking(b) for b in bookings],
        total=len(bookings),
    )


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
@limiter.limit("60/minute")
async def get_booking(
    request: Request,
    booking_id: int,
    identity: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific booking by ID"""
    booking = await BookingService.get_booking(
        db=db,
        booking_id=booking_id,
        user_key=identity.user_key,
        is_admin=identity.is_admin,
    )
    return BookingResponse.from_booking(booking)


@router.patch("/bookings/{booking_id}/cancel", response_model=CancellationResponse)
@limiter.limit("10/minute")
async def cancel_booking(
    request: Request,
    booking_id: int,
    identity: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    """Cancel a booking and release its seats; repeating the call is harmless"""
    result = await BookingService.cancel_booking(
        db=db,
        booking_id=booking_id,
        requester_key=identity.user_key,
        is_admin=identity.is_admin,
    )
    return CancellationResponse(
        message="Booking already cancelled" if result.already_cancelled else "Booking cancelled",
        booking_id=result.booking.id,
        status=result.booking.status,
        released_seats=result.released_seats,
    )
