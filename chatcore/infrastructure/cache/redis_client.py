"""
Async Redis Client Factory.

Creates Redis client with connection pooling for DI container.
Uses redis.asyncio so pub/sub listeners run on the application's event loop.
"""

import logging
import redis.asyncio as redis
from redis.asyncio import Redis
from chatcore.config.settings import Config

logger = logging.getLogger(__name__)


async def create_redis_client(url: str = Config.REDIS_URL) -> Redis:
    """
    Create async Redis client with connection pool.

    Raises:
        redis.ConnectionError: If Redis is not reachable

    Note:
        - decode_responses=True so pub/sub payloads arrive as str
        - no socket_timeout: subscribers block on reads indefinitely
    """
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5.0,
    )

    await client.ping()
    logger.info("[Redis] Connected to %s", url)

    return client


async def close_redis_client(client: Redis) -> None:
    """Close Redis client connection. Called on application shutdown."""
    if client:
        await client.aclose()
        logger.info("[Redis] Connection closed")
