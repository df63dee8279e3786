import os
import time

# Must be set before chatcore.config.settings is imported
os.environ["SERVICE_AUTH_SECRET"] = "chatcore-test-secret-0123456789abcdef"
os.environ["SERVICE_AUTH_ISSUER"] = "chat-identity"
os.environ["SERVICE_AUTH_AUDIENCE"] = "chat-core"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["FANOUT_BACKEND"] = "memory"

import jwt
import pytest
from fastapi.testclient import TestClient

from chatcore.config.settings import Config
from chatcore.domain.entities import User
from chatcore.fastapi_app import create_fastapi_app
from chatcore.infrastructure.memory import InMemoryStore, InMemoryUnitOfWork
from chatcore.infrastructure.realtime import InMemoryBroadcaster
from chatcore.services.fanout import MessageFanout
from chatcore.setup.ioc.container import (
    InMemoryFanoutProvider,
    InMemoryStorageProvider,
    create_container,
)

USERS = [
    User(id=1, username="alice", email="alice@example.com", phone="+46700000001"),
    User(id=2, username="bob", email="bob@example.com", phone="+46700000002"),
    User(id=3, username="carol", email="carol@example.com", phone="+46700000003"),
    User(id=4, username="dave", email="dave@example.org", phone="+46700000004"),
]


def _service_token(user_id=1, expires_in=300, secret=None):
    now = int(time.time())
    return jwt.encode(
        {
            "sub": str(user_id),
            "iat": now,
            "exp": now + expires_in,
            "iss": Config.SERVICE_AUTH_ISSUER,
            "aud": Config.SERVICE_AUTH_AUDIENCE,
        },
        secret or Config.SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )


@pytest.fixture()
def store():
    """A fresh in-memory database seeded with four users."""
    store = InMemoryStore()
    for user in USERS:
        store.users[user.id] = user
    store.sequences["user"] = len(USERS)
    return store


@pytest.fixture()
def uow(store):
    return InMemoryUnitOfWork(store)


@pytest.fixture()
def broadcaster():
    return InMemoryBroadcaster(queue_size=10)


@pytest.fixture()
def fanout(broadcaster):
    return MessageFanout(broadcaster)


@pytest.fixture()
def app(store, broadcaster):
    """Create and configure a new FastAPI app instance for each test."""
    container = create_container(
        InMemoryStorageProvider(store), InMemoryFanoutProvider(broadcaster)
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client sharing one event loop between HTTP and WebSocket calls."""
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def auth_headers():
    """Authentication headers for a given user id."""

    def _headers(user_id=1):
        return {"Authorization": f"Bearer {_service_token(user_id)}"}

    return _headers
