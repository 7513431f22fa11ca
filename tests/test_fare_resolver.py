from decimal import Decimal

import pytest

from flight_booking.models import CabinClass, Flight
from flight_booking.services import FlightNotFoundError, resolve_fare


def make_flight(**prices):
    defaults = {
        "economy_price": Decimal("4500.00"),
        "business_price": Decimal("15000.00"),
        "first_class_price": Decimal("35000.00"),
    }
    defaults.update(prices)
    return Flight(flight_number="AI101", **defaults)


@pytest.mark.parametrize("cabin_class, expected", [
    (CabinClass.ECONOMY, Decimal("4500.00")),
    (CabinClass.BUSINESS, Decimal("15000.00")),
    (CabinClass.FIRST, Decimal("35000.00")),
])
def test_resolves_stored_class_price(cabin_class, expected):
    assert resolve_fare(make_flight(), cabin_class) == expected


def test_missing_class_price_falls_back_to_economy():
    flight = make_flight(business_price=None, first_class_price=None)

    assert resolve_fare(flight, CabinClass.BUSINESS) == Decimal("4500.00")
    assert resolve_fare(flight, CabinClass.FIRST) == Decimal("4500.00")


def test_missing_flight_raises_not_found():
    with pytest.raises(FlightNotFoundError):
        resolve_fare(None, CabinClass.ECONOMY)


def test_returns_decimal():
    assert isinstance(resolve_fare(make_flight(economy_price=4500), CabinClass.ECONOMY), Decimal)
