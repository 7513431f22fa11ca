"""
Fare resolution: base per-passenger fare for a flight and cabin class
"""
from decimal import Decimal
from typing import Optional

from flight_booking.models import CabinClass, Flight
from flight_booking.services.exceptions import FlightNotFoundError

_FARE_COLUMNS = {
    CabinClass.ECONOMY: "economy_price",
    CabinClass.BUSINESS: "business_price",
    CabinClass.FIRST: "first_class_price",
}


def resolve_fare(flight: Optional[Flight], cabin_class: CabinClass) -> Decimal:
    """
    Return the stored base fare for the cabin class.

    Flights seeded before per-cabin prices existed only carry an economy
    price; any missing class price falls back to it.
    """
    if flight is None:
        raise FlightNotFoundError("Flight not found")

    price = getattr(flight, _FARE_COLUMNS[cabin_class])
    if price is None:
        price = flight.economy_price
    return Decimal(str(price))
