"""
SQLAlchemy models for the flight booking system

Import all models here so relationships resolve when any one is used.
"""
from flight_booking.core.database import Base

from flight_booking.models.enums import BookingStatus, CabinClass, FlightStatus, PaymentStatus
from flight_booking.models.airline import Airline
from flight_booking.models.airport import Airport
from flight_booking.models.flight import Flight
from flight_booking.models.seat import Seat
from flight_booking.models.booking import Booking
from flight_booking.models.passenger import Passenger
from flight_booking.models.pricing_attempt import PricingAttempt

__all__ = [
    "Base",
    "Airline",
    "Airport",
    "Flight",
    "Seat",
    "Booking",
    "Passenger",
    "PricingAttempt",
    "BookingStatus",
    "CabinClass",
    "FlightStatus",
    "PaymentStatus",
]
