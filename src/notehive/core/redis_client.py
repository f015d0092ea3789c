"""Redis client for the access-token blacklist."""

import logging
from typing import Optional

import redis.asyncio as redis

from ..config import get_settings

logger = logging.getLogger(__name__)

BLACKLIST_PREFIX = "blacklist:"


class RedisClient:
    """Thin async wrapper; every call degrades to a no-op when Redis is down."""

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Connect to Redis."""
        if self.redis is not None:
            return
        try:
            client = redis.from_url(
                self.settings.redis_url,
                max_connections=self.settings.redis_max_connections,
                decode_responses=True,
            )
            await client.ping()
            self.redis = client
            logger.info("Connected to Redis successfully")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        """Set value in Redis with optional expiration."""
        if not self.redis:
            return False
        try:
            if expire:
                return bool(await self.redis.setex(key, expire, value))
            return bool(await self.redis.set(key, value))
        except Exception as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def exists(self, key: str) -> bool:
        """Check if key exists in Redis."""
        if not self.redis:
            return False
        try:
            return await self.redis.exists(key) > 0
        except Exception as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            return False

    async def add_to_blacklist(self, jti: str, expire_seconds: int) -> bool:
        """Blacklist a token id until the token would have expired anyway."""
        return await self.set(f"{BLACKLIST_PREFIX}{jti}", "1", expire_seconds)

    async def is_token_blacklisted(self, jti: str) -> bool:
        return await self.exists(f"{BLACKLIST_PREFIX}{jti}")


_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Process-wide Redis client (the connection pool is the only shared state)."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
