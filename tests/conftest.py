"""
Shared fixtures: in-memory SQLite database, a seeded flight and an HTTP client
"""
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["RATE_LIMIT_STORAGE_URL"] = "memory://"
os.environ["ADMIN_USER_IDS"] = "admin-1"
os.environ["LOG_JSON"] = "false"

from dataclasses import dataclass, field  # noqa: E402
from datetime import date, datetime  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Dict  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from flight_booking.core.database import Base, get_db  # noqa: E402
from flight_booking.main import app  # noqa: E402
from flight_booking.models import (  # noqa: E402
    Airline,
    Airport,
    CabinClass,
    Flight,
    FlightStatus,
    Seat,
)
from flight_booking.schemas import PassengerCreate  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEPARTURE = datetime(2030, 1, 15, 10, 0)

# Economy seats alternate 10.00 / 15.00 surcharges
ECONOMY_SEATS = {
    "7A": Decimal("10.00"), "7B": Decimal("15.00"),
    "7C": Decimal("10.00"), "7D": Decimal("15.00"),
    "7E": Decimal("10.00"), "7F": Decimal("15.00"),
    "8A": Decimal("10.00"), "8B": Decimal("15.00"),
}
BUSINESS_SEATS = {"3A": Decimal("50.00"), "3B": Decimal("50.00")}


@dataclass
class SeededFlight:
    flight_id: int
    cancelled_flight_id: int
    seats: Dict[str, int] = field(default_factory=dict)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def seeded(session_factory) -> SeededFlight:
    """DEL -> BOM on 2030-01-15 with 8 economy and 2 business seats, plus a cancelled flight"""
    async with session_factory() as db:
        delhi = Airport(code="DEL", name="Indira Gandhi International", city="Delhi", country="India")
        mumbai = Airport(code="BOM", name="Chhatrapati Shivaji", city="Mumbai", country="India")
        jfk = Airport(code="JFK", name="John F. Kennedy International", city="New York", country="USA")
        lhr = Airport(code="LHR", name="Heathrow", city="London", country="UK")
        airline = Airline(code="AI", name="Air India")
        db.add_all([delhi, mumbai, jfk, lhr, airline])
        await db.flush()

        flight = Flight(
            flight_number="AI101",
            airline_id=airline.id,
            origin_airport_id=delhi.id,
            destination_airport_id=mumbai.id,
            departure_time=DEPARTURE,
            arrival_time=DEPARTURE.replace(hour=12),
            economy_price=Decimal("100.00"),
            business_price=Decimal("300.00"),
            first_class_price=None,
            economy_seats=len(ECONOMY_SEATS),
            business_seats=len(BUSINESS_SEATS),
            first_class_seats=0,
            aircraft_type="Airbus A320",
            status=FlightStatus.SCHEDULED,
        )
        cancelled = Flight(
            flight_number="AI999",
            airline_id=airline.id,
            origin_airport_id=delhi.id,
            destination_airport_id=mumbai.id,
            departure_time=DEPARTURE.replace(hour=18),
            arrival_time=DEPARTURE.replace(hour=20),
            economy_price=Decimal("100.00"),
            status=FlightStatus.CANCELLED,
        )
        db.add_all([flight, cancelled])
        await db.flush()

        seats = {}
        for number, price in ECONOMY_SEATS.items():
            seats[number] = Seat(flight_id=flight.id, seat_number=number,
                                 cabin_class=CabinClass.ECONOMY, price=price)
        for number, price in BUSINESS_SEATS.items():
            seats[number] = Seat(flight_id=flight.id, seat_number=number,
                                 cabin_class=CabinClass.BUSINESS, price=price)
        db.add_all(seats.values())
        await db.commit()

        return SeededFlight(
            flight_id=flight.id,
            cancelled_flight_id=cancelled.id,
            seats={number: seat.id for number, seat in seats.items()},
        )


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app, one fresh session per request"""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def make_passengers(count: int):
    return [
        PassengerCreate(
            title="Mr",
            first_name=f"Traveler{i}",
            last_name="Sharma",
            date_of_birth=date(1990, 1, 1 + i),
            passport_number=f"P{1000000 + i}",
        )
        for i in range(count)
    ]


def passenger_payload(count: int):
    return [
        {
            "title": "Ms",
            "firstName": f"Guest{i}",
            "lastName": "Rao",
            "dateOfBirth": f"1992-05-{10 + i:02d}",
        }
        for i in range(count)
    ]
