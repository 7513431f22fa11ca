"""
Pydantic schemas for API request/response validation
"""
from flight_booking.schemas.catalog import AirlineResponse, AirportResponse, FlightResponse
from flight_booking.schemas.seat import SeatMapResponse, SeatResponse
from flight_booking.schemas.booking import (
    BookingCreate,
    BookingListResponse,
    BookingResponse,
    CancellationResponse,
    PassengerCreate,
    PassengerResponse,
    PriceBreakdownResponse,
)

__all__ = [
    # Catalog
    "AirportResponse",
    "AirlineResponse",
    "FlightResponse",
    # Seats
    "SeatResponse",
    "SeatMapResponse",
    # Bookings
    "BookingCreate",
    "BookingListResponse",
    "BookingResponse",
    "CancellationResponse",
    "PassengerCreate",
    "PassengerResponse",
    "PriceBreakdownResponse",
]
