"""
Cache service for managing Redis cache keys and invalidation
"""
import logging
from typing import Any, Dict, Optional

from flight_booking.core.config import settings
from flight_booking.core.redis import redis_client

logger = logging.getLogger(__name__)


class CacheService:
    """Service for managing cache keys and invalidation"""

    # Cache key patterns
    FLIGHT_SEATS_KEY = "flight:{flight_id}:seats"

    @staticmethod
    async def get_flight_seats(flight_id: int) -> Optional[Dict[str, Any]]:
        """Get cached seat map"""
        key = CacheService.FLIGHT_SEATS_KEY.format(flight_id=flight_id)
        cached = await redis_client.get(key)
        logger.debug(f"Cache {'HIT' if cached else 'MISS'}: {key}")
        return cached

    @staticmethod
    async def set_flight_seats(flight_id: int, data: Dict[str, Any]) -> bool:
        """Cache seat map (short TTL, availability changes with every booking)"""
        key = CacheService.FLIGHT_SEATS_KEY.format(flight_id=flight_id)
        return await redis_client.set(key, data, ttl=settings.REDIS_SEATS_TTL)

    @staticmethod
    async def invalidate_flight_seats(flight_id: int) -> bool:
        """Invalidate seat map after allocation or release"""
        key = CacheService.FLIGHT_SEATS_KEY.format(flight_id=flight_id)
        logger.info(f"Invalidating seat cache for flight {flight_id}", extra={'flight_id': flight_id})
        return await redis_client.delete(key)
