"""
Flight catalog service: airports, airlines, flight search and seat maps
"""
import logging
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from flight_booking.models import Airline, Airport, CabinClass, Flight, Seat
from flight_booking.schemas.seat import SeatResponse
from flight_booking.services.cache_service import CacheService
from flight_booking.services.exceptions import FlightNotFoundError

logger = logging.getLogger(__name__)


def _with_details(query):
    return query.options(
        selectinload(Flight.airline),
        selectinload(Flight.origin_airport),
        selectinload(Flight.destination_airport),
    )


class FlightService:
    """Read-only operations over the flight catalog"""

    @staticmethod
    async def list_airports(db: AsyncSession) -> List[Airport]:
        result = await db.execute(select(Airport).order_by(Airport.code))
        return list(result.scalars().all())

    @staticmethod
    async def list_airlines(db: AsyncSession) -> List[Airline]:
        result = await db.execute(select(Airline).order_by(Airline.code))
        return list(result.scalars().all())

    @staticmethod
    async def get_airport_by_code(db: AsyncSession, code: str) -> Optional[Airport]:
        result = await db.execute(
            select(Airport).where(func.upper(Airport.code) == code.strip().upper())
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def search_flights(
        db: AsyncSession,
        origin: str,
        destination: str,
        departure_date: date,
    ) -> List[Flight]:
        """
        Flights between two airport codes departing on the given day.

        Unknown airports simply yield no flights.
        """
        origin_airport = await FlightService.get_airport_by_code(db, origin)
        destination_airport = await FlightService.get_airport_by_code(db, destination)
        if origin_airport is None or destination_airport is None:
            return []

        start_of_day = datetime.combine(departure_date, time.min)
        end_of_day = start_of_day + timedelta(days=1)

        query = _with_details(
            select(Flight)
            .where(
                Flight.origin_airport_id == origin_airport.id,
                Flight.destination_airport_id == destination_airport.id,
                Flight.departure_time >= start_of_day,
                Flight.departure_time < end_of_day,
            )
            .order_by(Flight.departure_time.asc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def list_flights(db: AsyncSession) -> List[Flight]:
        result = await db.execute(_with_details(select(Flight).order_by(Flight.departure_time.asc())))
        return list(result.scalars().all())

    @staticmethod
    async def get_flight(db: AsyncSession, flight_id: int) -> Flight:
        result = await db.execute(_with_details(select(Flight).where(Flight.id == flight_id)))
        flight = result.scalar_one_or_none()
        if flight is None:
            raise FlightNotFoundError(f"Flight {flight_id} not found")
        return flight

    @staticmethod
    async def get_flight_seats(
        db: AsyncSession,
        flight_id: int,
        cabin_class: Optional[CabinClass] = None,
    ) -> Tuple[List[SeatResponse], Dict[str, List[SeatResponse]]]:
        """
        Seat map with caching

        Cache key: flight:{flight_id}:seats, only the unfiltered map is cached
        """
        if cabin_class is None:
            cached = await CacheService.get_flight_seats(flight_id)
            if cached:
                seats = [SeatResponse(**seat) for seat in cached['seats']]
                return seats, _group_by_cabin(seats)

        exists = await db.execute(select(Flight.id).where(Flight.id == flight_id))
        if exists.first() is None:
            raise FlightNotFoundError(f"Flight {flight_id} not found")

        query = select(Seat).where(Seat.flight_id == flight_id)
        if cabin_class is not None:
            query = query.where(Seat.cabin_class == cabin_class)
        query = query.order_by(Seat.id)

        result = await db.execute(query)
        seats = [SeatResponse.model_validate(seat) for seat in result.scalars().all()]

        if cabin_class is None:
            await CacheService.set_flight_seats(
                flight_id, {'seats': [s.model_dump(mode='json') for s in seats]}
            )

        return seats, _group_by_cabin(seats)


def _group_by_cabin(seats: List[SeatResponse]) -> Dict[str, List[SeatResponse]]:
    cabins: Dict[str, List[SeatResponse]] = {}
    for seat in seats:
        cabins.setdefault(seat.cabin_class.value, []).append(seat)
    return cabins
