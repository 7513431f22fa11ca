"""
Enumerations shared by the flight booking models
"""
from enum import Enum as PyEnum


class CabinClass(PyEnum):
    """Cabin class of a seat or booking"""
    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST = "first"


class FlightStatus(PyEnum):
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class BookingStatus(PyEnum):
    """Booking lifecycle: confirmed -> cancelled | completed"""
    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(PyEnum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
