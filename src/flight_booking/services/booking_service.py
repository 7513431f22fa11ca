"""
Booking Service - surge-aware pricing, atomic seat allocation, PNR issuance
"""
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from flight_booking.core.config import settings
from flight_booking.core.metrics import (
    booking_creation_duration_seconds,
    bookings_cancelled_total,
    record_booking_created,
    track_time,
)
from flight_booking.models import (
    Booking,
    BookingStatus,
    CabinClass,
    Flight,
    Passenger,
    PaymentStatus,
    Seat,
)
from flight_booking.schemas.booking import PassengerCreate
from flight_booking.services import seat_allocator
from flight_booking.services.cache_service import CacheService
from flight_booking.services.exceptions import (
    BookingAccessDeniedError,
    BookingNotFoundError,
    FlightNotBookableError,
    FlightNotFoundError,
    InvalidBookingTransitionError,
    SeatPassengerMismatchError,
    ValidationError,
)
from flight_booking.services.fare_resolver import resolve_fare
from flight_booking.services.pnr import generate_unique_pnr
from flight_booking.services.pricing_attempts import record_attempt
from flight_booking.services.surge import SurgeDecision, evaluate_surge

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PriceBreakdown:
    base_fare: Decimal
    passenger_count: int
    seat_surcharges: Decimal
    subtotal: Decimal
    taxes: Decimal
    surge_multiplier: Decimal
    total: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


def compute_price(
    base_fare: Decimal,
    passenger_count: int,
    seat_prices: Sequence[Decimal],
    surge_multiplier: Decimal,
    tax_rate: Optional[Decimal] = None,
) -> PriceBreakdown:
    """
    total = (base_fare * n + sum(seat_prices)) * (1 + tax_rate) * multiplier

    Rounded to cents once, at the end.
    """
    tax_rate = settings.TAX_RATE if tax_rate is None else tax_rate
    seat_surcharges = sum((Decimal(str(p)) for p in seat_prices), Decimal("0"))
    subtotal = base_fare * passenger_count + seat_surcharges
    taxes = subtotal * tax_rate
    total = (subtotal + taxes) * surge_multiplier

    return PriceBreakdown(
        base_fare=base_fare.quantize(CENTS, rounding=ROUND_HALF_UP),
        passenger_count=passenger_count,
        seat_surcharges=seat_surcharges.quantize(CENTS, rounding=ROUND_HALF_UP),
        subtotal=subtotal.quantize(CENTS, rounding=ROUND_HALF_UP),
        taxes=taxes.quantize(CENTS, rounding=ROUND_HALF_UP),
        surge_multiplier=surge_multiplier,
        total=total.quantize(CENTS, rounding=ROUND_HALF_UP),
    )


@dataclass
class BookingResult:
    booking: Booking
    breakdown: PriceBreakdown
    surge: SurgeDecision

    @property
    def pnr(self) -> str:
        return self.booking.pnr

    @property
    def surge_applied(self) -> bool:
        return self.surge.applied


@dataclass
class CancellationResult:
    booking: Booking
    released_seats: int = 0
    already_cancelled: bool = False


def _with_details(query):
    return query.options(
        selectinload(Booking.passengers).selectinload(Passenger.seat)
    )


class BookingService:
    """Service for creating, reading and cancelling bookings"""

    @staticmethod
    @track_time(booking_creation_duration_seconds)
    async def create_booking(
        db: AsyncSession,
        flight_id: int,
        cabin_class: CabinClass,
        passengers: List[PassengerCreate],
        seat_ids: List[int],
        user_key: str,
        payment_method: str,
    ) -> BookingResult:
        """
        Create a confirmed, paid booking.

        Seat allocation, booking and passenger inserts and the pricing
        attempt share one transaction; any failure rolls all of them back,
        so no seat stays unavailable without a booking.
        """
        if not passengers:
            raise ValidationError("At least one passenger is required")

        if len(passengers) > settings.MAX_PASSENGERS_PER_BOOKING:
            raise ValidationError(
                f"Cannot book more than {settings.MAX_PASSENGERS_PER_BOOKING} passengers at once"
            )

        seat_ids = list(seat_ids or [])

        async with db.begin():
            # 1. Flight must exist and be scheduled
            flight = await db.get(Flight, flight_id)
            if flight is None:
                raise FlightNotFoundError(f"Flight {flight_id} not found")
            if not flight.is_bookable:
                raise FlightNotBookableError(
                    f"Flight {flight.flight_number} is {flight.status.value}, not bookable"
                )

            # 2. One seat per passenger
            if (seat_ids or settings.REQUIRE_SEAT_SELECTION) and len(seat_ids) != len(passengers):
                raise SeatPassengerMismatchError(
                    f"{len(passengers)} passengers but {len(seat_ids)} seats selected"
                )

            # 3. Surge is decided on prior attempts only
            surge = await evaluate_surge(db, flight_id=flight_id, user_key=user_key)

            # 4. Allocate seats (compare-and-set), fails with nothing written
            seats: List[Seat] = await seat_allocator.allocate(
                db, flight_id=flight_id, cabin_class=cabin_class, seat_ids=seat_ids
            )

            # 5. Price
            breakdown = compute_price(
                base_fare=resolve_fare(flight, cabin_class),
                passenger_count=len(passengers),
                seat_prices=[seat.price for seat in seats],
                surge_multiplier=surge.multiplier,
            )

            # 6. PNR
            pnr = await generate_unique_pnr(db)

            # 7. Booking row
            booking = Booking(
                pnr=pnr,
                user_key=user_key,
                flight_id=flight_id,
                cabin_class=cabin_class,
                status=BookingStatus.CONFIRMED,
                total_amount=breakdown.total,
                surge_applied=surge.applied,
                payment_status=PaymentStatus.PAID,
                payment_method=payment_method,
            )
            db.add(booking)
            await db.flush()

            # 8. One passenger row per traveler, paired with seats in order
            for index, passenger in enumerate(passengers):
                db.add(Passenger(
                    booking_id=booking.id,
                    title=passenger.title,
                    first_name=passenger.first_name,
                    last_name=passenger.last_name,
                    date_of_birth=passenger.date_of_birth,
                    passport_number=passenger.passport_number,
                    seat_id=seats[index].id if index < len(seats) else None,
                ))

            # 9. Count this attempt towards future surge decisions
            await record_attempt(db, flight_id=flight_id, user_key=user_key)

        booking_id = booking.id

        logger.info(
            f"Booking {pnr} created: {len(passengers)} pax, total {breakdown.total}",
            extra={'booking_id': booking_id, 'pnr': pnr, 'flight_id': flight_id, 'user_key': user_key},
        )
        record_booking_created(cabin_class.value, surge.applied)
        if seat_ids:
            await CacheService.invalidate_flight_seats(flight_id)

        result = await db.execute(_with_details(select(Booking).where(Booking.id == booking_id)))
        return BookingResult(booking=result.scalar_one(), breakdown=breakdown, surge=surge)

    @staticmethod
    async def cancel_booking(
        db: AsyncSession,
        booking_id: int,
        requester_key: str,
        is_admin: bool = False,
    ) -> CancellationResult:
        """
        Cancel a confirmed booking and release its seats.

        Cancelling an already-cancelled booking is a no-op success.
        """
        async with db.begin():
            query = _with_details(
                select(Booking).where(Booking.id == booking_id).with_for_update()
            )
            booking = (await db.execute(query)).scalar_one_or_none()

            if booking is None:
                raise BookingNotFoundError(f"Booking {booking_id} not found")

            if booking.user_key != requester_key and not is_admin:
                raise BookingAccessDeniedError("Unauthorized: must be the booking owner")

            if booking.is_cancelled:
                logger.info(f"Booking {booking.pnr} already cancelled", extra={'booking_id': booking_id})
                return CancellationResult(booking=booking, already_cancelled=True)

            if booking.status != BookingStatus.CONFIRMED:
                raise InvalidBookingTransitionError(
                    f"Booking is {booking.status.value}, only confirmed bookings can be cancelled"
                )

            booking.status = BookingStatus.CANCELLED
            booking.payment_status = PaymentStatus.REFUNDED
            booking.cancelled_at = datetime.utcnow()

            released = await seat_allocator.release(db, booking.seat_ids)

        logger.info(
            f"Booking {booking.pnr} cancelled, {released} seats released",
            extra={'booking_id': booking_id, 'pnr': booking.pnr, 'user_key': requester_key},
        )
        bookings_cancelled_total.inc()
        if released:
            await CacheService.invalidate_flight_seats(booking.flight_id)

        return CancellationResult(booking=booking, released_seats=released)

    @staticmethod
    async def get_booking(
        db: AsyncSession,
        booking_id: int,
        user_key: str,
        is_admin: bool = False,
    ) -> Booking:
        result = await db.execute(_with_details(select(Booking).where(Booking.id == booking_id)))
        booking = result.scalar_one_or_none()

        if booking is None:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
        if booking.user_key != user_key and not is_admin:
            raise BookingAccessDeniedError("Unauthorized: must be the booking owner")
        return booking

    @staticmethod
    async def list_user_bookings(
        db: AsyncSession,
        user_key: str,
        status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        """Get all bookings for a user, newest first"""
        query = _with_details(
            select(Booking)
            .where(Booking.user_key == user_key)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        if status:
            query = query.where(Booking.status == status)

        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def list_all_bookings(db: AsyncSession) -> List[Booking]:
        result = await db.execute(
            _with_details(select(Booking).order_by(Booking.created_at.desc(), Booking.id.desc()))
        )
        return list(result.scalars().all())
