"""
PNR (booking reference) generation
"""
import logging
import secrets
import string

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.core.config import settings
from flight_booking.models import Booking
from flight_booking.services.exceptions import PNRGenerationError

logger = logging.getLogger(__name__)

PNR_ALPHABET = string.ascii_uppercase + string.digits


def generate_pnr(length: int = None) -> str:
    length = length or settings.PNR_LENGTH
    return "".join(secrets.choice(PNR_ALPHABET) for _ in range(length))


async def pnr_exists(db: AsyncSession, pnr: str) -> bool:
    result = await db.execute(select(Booking.id).where(Booking.pnr == pnr))
    return result.first() is not None


async def generate_unique_pnr(db: AsyncSession) -> str:
    """Draw PNRs until one is unused, up to PNR_MAX_RETRIES draws"""
    for attempt in range(1, settings.PNR_MAX_RETRIES + 1):
        pnr = generate_pnr()
        if not await pnr_exists(db, pnr):
            return pnr
        logger.warning(f"PNR collision on attempt {attempt}: {pnr}")

    raise PNRGenerationError(
        f"Could not generate a unique PNR after {settings.PNR_MAX_RETRIES} attempts"
    )
