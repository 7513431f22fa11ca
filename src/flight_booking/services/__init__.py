"""
Services package exports
"""
from flight_booking.services.booking_service import (
    BookingResult,
    BookingService,
    CancellationResult,
    PriceBreakdown,
    compute_price,
)
from flight_booking.services.exceptions import (
    AuthorizationError,
    BookingAccessDeniedError,
    BookingNotFoundError,
    BookingServiceError,
    ConflictError,
    FlightNotBookableError,
    FlightNotFoundError,
    InvalidBookingTransitionError,
    NotFoundError,
    PNRGenerationError,
    SeatAlreadyTakenError,
    SeatClassMismatchError,
    SeatNotFoundError,
    SeatPassengerMismatchError,
    ValidationError,
)
from flight_booking.services.fare_resolver import resolve_fare
from flight_booking.services.flight_service import FlightService
from flight_booking.services.surge import SurgeDecision, evaluate_surge

__all__ = [
    "BookingResult",
    "BookingService",
    "CancellationResult",
    "PriceBreakdown",
    "compute_price",
    "FlightService",
    "SurgeDecision",
    "evaluate_surge",
    "resolve_fare",
    "AuthorizationError",
    "BookingAccessDeniedError",
    "BookingNotFoundError",
    "BookingServiceError",
    "ConflictError",
    "FlightNotBookableError",
    "FlightNotFoundError",
    "InvalidBookingTransitionError",
    "NotFoundError",
    "PNRGenerationError",
    "SeatAlreadyTakenError",
    "SeatClassMismatchError",
    "SeatNotFoundError",
    "SeatPassengerMismatchError",
    "ValidationError",
]
