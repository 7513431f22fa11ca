"""
Seat allocator - the only writer of Seat.is_available

Allocation is a single conditional UPDATE guarded by is_available, so two
concurrent bookings cannot both claim the same seat. It must run inside the
caller's transaction: on SeatAlreadyTakenError the caller rolls back and no
partial allocation survives.
"""
import logging
from typing import List, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.core.metrics import booking_conflicts_total
from flight_booking.models import CabinClass, Seat
from flight_booking.services.exceptions import (
    SeatAlreadyTakenError,
    SeatClassMismatchError,
    SeatNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def allocate(
    db: AsyncSession,
    flight_id: int,
    cabin_class: CabinClass,
    seat_ids: Sequence[int],
) -> List[Seat]:
    """Mark all seats unavailable, or none of them"""
    if not seat_ids:
        return []

    if len(set(seat_ids)) != len(seat_ids):
        raise ValidationError("Duplicate seat ids in request")

    # 1. Validate ownership and cabin class
    result = await db.execute(
        select(Seat).where(Seat.id.in_(seat_ids), Seat.flight_id == flight_id)
    )
    seats = {seat.id: seat for seat in result.scalars().all()}

    missing = [seat_id for seat_id in seat_ids if seat_id not in seats]
    if missing:
        raise SeatNotFoundError(f"Seats {missing} not found on flight {flight_id}")

    wrong_class = [seat.seat_number for seat in seats.values() if seat.cabin_class != cabin_class]
    if wrong_class:
        raise SeatClassMismatchError(
            f"Seats {wrong_class} are not in {cabin_class.value} class"
        )

    seen_taken = [seats[seat_id].seat_number for seat_id in seat_ids if not seats[seat_id].is_available]

    # 2. Compare-and-set on availability
    stmt = (
        update(Seat)
        .where(
            Seat.id.in_(seat_ids),
            Seat.flight_id == flight_id,
            Seat.is_available == True,
        )
        .values(is_available=False)
    )
    result = await db.execute(stmt)

    if result.rowcount != len(seat_ids):
        booking_conflicts_total.inc()
        logger.warning(
            f"Seat conflict on flight {flight_id}: {result.rowcount}/{len(seat_ids)} allocated",
            extra={'flight_id': flight_id},
        )
        taken = seen_taken or [seats[seat_id].seat_number for seat_id in seat_ids]
        raise SeatAlreadyTakenError(f"Seats {taken} are no longer available")

    return [seats[seat_id] for seat_id in seat_ids]


async def release(db: AsyncSession, seat_ids: Sequence[int]) -> int:
    """Make seats available again. Returns the number of seats flipped."""
    if not seat_ids:
        return 0

    stmt = (
        update(Seat)
        .where(Seat.id.in_(seat_ids), Seat.is_available == False)
        .values(is_available=True)
    )
    result = await db.execute(stmt)
    return result.rowcount
