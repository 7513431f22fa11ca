"""
Surge evaluator: repeat-attempt heuristic on top of the pricing-attempt log
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.core.config import settings
from flight_booking.services.pricing_attempts import count_recent_attempts

logger = logging.getLogger(__name__)

NO_SURGE = Decimal("1.00")


@dataclass(frozen=True)
class SurgeDecision:
    applied: bool
    multiplier: Decimal
    prior_attempts: int = 0


async def evaluate_surge(
    db: AsyncSession,
    flight_id: int,
    user_key: str,
    now: Optional[datetime] = None,
) -> SurgeDecision:
    """
    Decide the multiplier for this attempt.

    Only prior attempts are counted: callers evaluate first and record the
    current attempt afterwards.
    """
    prior = await count_recent_attempts(
        db,
        flight_id=flight_id,
        user_key=user_key,
        window_seconds=settings.SURGE_WINDOW_SECONDS,
        now=now,
    )

    if prior >= settings.SURGE_THRESHOLD:
        logger.info(
            f"Surge applied for flight {flight_id}: {prior} attempts in window",
            extra={'flight_id': flight_id, 'user_key': user_key},
        )
        return SurgeDecision(applied=True, multiplier=settings.SURGE_MULTIPLIER, prior_attempts=prior)

    return SurgeDecision(applied=False, multiplier=NO_SURGE, prior_attempts=prior)
