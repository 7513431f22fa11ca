"""
Pricing-attempt log: append-only record of booking attempts per flight/user
"""
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.models import PricingAttempt


async def record_attempt(
    db: AsyncSession,
    flight_id: int,
    user_key: str,
    timestamp: Optional[datetime] = None,
) -> PricingAttempt:
    """Append an attempt. Flushes but leaves committing to the caller."""
    attempt = PricingAttempt(
        flight_id=flight_id,
        user_key=user_key,
        attempt_time=timestamp or datetime.utcnow(),
    )
    db.add(attempt)
    await db.flush()
    return attempt


async def count_recent_attempts(
    db: AsyncSession,
    flight_id: int,
    user_key: str,
    window_seconds: int,
    now: Optional[datetime] = None,
) -> int:
    """Count attempts for (flight, user) with now - window <= attempt_time <= now"""
    now = now or datetime.utcnow()
    window_start = now - timedelta(seconds=window_seconds)

    query = select(func.count(PricingAttempt.id)).where(
        PricingAttempt.flight_id == flight_id,
        PricingAttempt.user_key == user_key,
        PricingAttempt.attempt_time >= window_start,
        PricingAttempt.attempt_time <= now,
    )
    result = await db.execute(query)
    return result.scalar_one()
