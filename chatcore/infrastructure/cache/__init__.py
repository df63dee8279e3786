"""Redis client used by the pub/sub fan-out relay."""

from chatcore.infrastructure.cache.redis_client import (
    create_redis_client,
    close_redis_client,
)

__all__ = ["create_redis_client", "close_redis_client"]
