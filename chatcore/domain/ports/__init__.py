"""
PORTS - Interfaces the domain needs, implemented by infrastructure.
"""

from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.domain.ports.broadcaster import MessageBroadcaster, Subscription

__all__ = [
    "UnitOfWork",
    "MessageBroadcaster",
    "Subscription",
]
