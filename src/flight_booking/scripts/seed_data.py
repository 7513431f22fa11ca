"""
Seed script to populate database with airports, airlines, flights and seats

Usage:
    python -m flight_booking.scripts.seed_data
"""
import asyncio
import random
from datetime import datetime, timedelta
from decimal import Decimal
from itertools import permutations

from sqlalchemy import select

from flight_booking.core.database import AsyncSessionLocal, init_db
from flight_booking.models import Airline, Airport, CabinClass, Flight, FlightStatus, Seat

AIRPORTS = [
    {"code": "BOM", "name": "Chhatrapati Shivaji Maharaj International", "city": "Mumbai",
     "country": "India", "timezone": "Asia/Kolkata"},
    {"code": "DEL", "name": "Indira Gandhi International", "city": "Delhi",
     "country": "India", "timezone": "Asia/Kolkata"},
    {"code": "BLR", "name": "Kempegowda International", "city": "Bangalore",
     "country": "India", "timezone": "Asia/Kolkata"},
    {"code": "JFK", "name": "John F. Kennedy International", "city": "New York",
     "country": "USA", "timezone": "America/New_York"},
    {"code": "LHR", "name": "Heathrow", "city": "London",
     "country": "UK", "timezone": "Europe/London"},
]

AIRLINES = [
    {"code": "AI", "name": "Air India", "logo_url": "https://example.com/ai-logo.png"},
    {"code": "6E", "name": "IndiGo", "logo_url": "https://example.com/indigo-logo.png"},
    {"code": "EK", "name": "Emirates", "logo_url": "https://example.com/ek-logo.png"},
]

# Cabin layout: (class, first row, last row, surcharge per seat)
CABIN_LAYOUT = [
    (CabinClass.FIRST, 1, 2, Decimal("5000.00")),
    (CabinClass.BUSINESS, 3, 6, Decimal("2000.00")),
    (CabinClass.ECONOMY, 7, 30, Decimal("0.00")),
]
SEAT_COLUMNS = "ABCDEF"
# Window and aisle seats cost a little extra in economy
PREFERRED_ECONOMY_COLUMNS = {"A": Decimal("300.00"), "F": Decimal("300.00"),
                             "C": Decimal("150.00"), "D": Decimal("150.00")}

FLIGHTS_PER_ROUTE = 2


async def create_airports(db):
    """Create airports, skipping codes that already exist"""
    airports = {}
    for data in AIRPORTS:
        result = await db.execute(select(Airport).where(Airport.code == data["code"]))
        existing = result.scalar_one_or_none()
        if existing:
            print(f"Airport {data['code']} already exists, skipping...")
            airports[data["code"]] = existing
            continue

        airport = Airport(**data)
        db.add(airport)
        airports[data["code"]] = airport
        print(f"Created airport: {data['code']} ({data['city']})")

    await db.flush()
    return airports


async def create_airlines(db):
    """Create airlines, skipping codes that already exist"""
    airlines = []
    for data in AIRLINES:
        result = await db.execute(select(Airline).where(Airline.code == data["code"]))
        existing = result.scalar_one_or_none()
        if existing:
            print(f"Airline {data['code']} already exists, skipping...")
            airlines.append(existing)
            continue

        airline = Airline(**data)
        db.add(airline)
        airlines.append(airline)
        print(f"Created airline: {data['name']}")

    await db.flush()
    return airlines


def create_seats_for_flight(flight: Flight) -> dict:
    """
    Add the full seat map to a flight.

    Layout:
    - First: rows 1-2
    - Business: rows 3-6
    - Economy: rows 7-30, window/aisle seats carry a small surcharge
    """
    counts = {cabin: 0 for cabin, _, _, _ in CABIN_LAYOUT}
    for cabin, first_row, last_row, surcharge in CABIN_LAYOUT:
        for row in range(first_row, last_row + 1):
            for column in SEAT_COLUMNS:
                price = surcharge
                if cabin == CabinClass.ECONOMY:
                    price = PREFERRED_ECONOMY_COLUMNS.get(column, Decimal("0.00"))
                flight.seats.append(Seat(
                    seat_number=f"{row}{column}",
                    cabin_class=cabin,
                    is_available=True,
                    price=price,
                ))
                counts[cabin] += 1
    return counts


async def create_flights(db, airports: dict, airlines: list):
    """Two flights for every ordered pair of airports"""
    result = await db.execute(select(Flight.id).limit(1))
    if result.first() is not None:
        print("Flights already exist, skipping...")
        return []

    base_day = (datetime.utcnow() + timedelta(days=7)).replace(hour=0, minute=0, second=0, microsecond=0)
    rng = random.Random(42)

    flights = []
    for index, (origin, destination) in enumerate(permutations(airports.values(), 2)):
        for slot in range(FLIGHTS_PER_ROUTE):
            airline = airlines[(index + slot) % len(airlines)]
            departure = base_day + timedelta(hours=6 + slot * 8)
            flight = Flight(
                flight_number=f"{airline.code}{100 + index * FLIGHTS_PER_ROUTE + slot}",
                airline_id=airline.id,
                origin_airport_id=origin.id,
                destination_airport_id=destination.id,
                departure_time=departure,
                arrival_time=departure + timedelta(hours=rng.randint(2, 14)),
                economy_price=Decimal(4000 + rng.randint(0, 5000)),
                business_price=Decimal("15000.00"),
                first_class_price=Decimal("35000.00"),
                aircraft_type="Boeing 737",
                status=FlightStatus.SCHEDULED,
            )
            counts = create_seats_for_flight(flight)
            flight.economy_seats = counts[CabinClass.ECONOMY]
            flight.business_seats = counts[CabinClass.BUSINESS]
            flight.first_class_seats = counts[CabinClass.FIRST]

            db.add(flight)
            flights.append(flight)
            print(f"Created flight: {flight.flight_number} {origin.code} -> {destination.code} "
                  f"with {flight.total_seats} seats")

    return flights


async def seed_database():
    """Main seeding function"""
    print("Starting database seeding...")
    await init_db()

    async with AsyncSessionLocal() as db:
        try:
            print("\n=== Creating Airports ===")
            airports = await create_airports(db)

            print("\n=== Creating Airlines ===")
            airlines = await create_airlines(db)

            print("\n=== Creating Flights and Seats ===")
            flights = await create_flights(db, airports, airlines)

            await db.commit()

            print("\n=== Seeding Complete! ===")
            print(f"Airports: {len(airports)}")
            print(f"Airlines: {len(airlines)}")
            print(f"Flights created: {len(flights)}")

        except Exception as e:
            print(f"Error during seeding: {e}")
            await db.rollback()
            raise


if __name__ == "__main__":
    asyncio.run(seed_database())
