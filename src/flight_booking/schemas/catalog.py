"""
Pydantic schemas for airports, airlines and flights
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from flight_booking.models.enums import FlightStatus
from flight_booking.schemas.base import CamelModel


class AirportResponse(CamelModel):
    id: int
    name: str
    code: str = Field(..., description="IATA airport code")
    city: str
    country: str
    timezone: Optional[str] = None


class AirlineResponse(CamelModel):
    id: int
    name: str
    code: str
    logo_url: Optional[str] = None


class FlightResponse(CamelModel):
    """Flight with embedded airline and airport details"""
    id: int
    flight_number: str
    departure_time: datetime
    arrival_time: datetime
    economy_price: Decimal
    business_price: Optional[Decimal] = None
    first_class_price: Optional[Decimal] = None
    economy_seats: int
    business_seats: int
    first_class_seats: int
    aircraft_type: Optional[str] = None
    status: FlightStatus
    airline: AirlineResponse
    origin_airport: AirportResponse
    destination_airport: AirportResponse
