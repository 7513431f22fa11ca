"""
Pydantic schemas for Seat resources
"""
from decimal import Decimal

from pydantic import Field

from flight_booking.models.enums import CabinClass
from flight_booking.schemas.base import CamelModel


class SeatResponse(CamelModel):
    id: int
    flight_id: int
    seat_number: str = Field(..., description="Row and column, e.g. 12A")
    cabin_class: CabinClass
    is_available: bool
    price: Decimal = Field(..., description="Seat surcharge")


class SeatMapResponse(CamelModel):
    """Seat inventory for a flight, grouped by cabin class for rendering"""
    flight_id: int
    seats: list[SeatResponse]
    total_seats: int
    available_seats: int
    cabins: dict[str, list[SeatResponse]] = Field(default_factory=dict)
