"""Broadcaster implementations for realtime fan-out."""

from chatcore.infrastructure.realtime.in_memory_broadcaster import InMemoryBroadcaster
from chatcore.infrastructure.realtime.redis_broadcaster import RedisBroadcaster

__all__ = ["InMemoryBroadcaster", "RedisBroadcaster"]
