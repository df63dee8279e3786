"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Server settings
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    # Number of uvicorn worker processes handling requests concurrently
    WORKERS = int(os.getenv("WORKERS", "4"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Auth (tokens are issued by the identity service, we only verify them)
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "chat-identity")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "chat-core")

    # Storage backend: "prisma" (PostgreSQL) or "memory" (tests, local dev)
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "prisma").lower()

    # Postgresql Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    # Interactive transaction limits, in milliseconds
    DB_TX_MAX_WAIT_MS: int = int(os.getenv("DB_TX_MAX_WAIT_MS", "2000"))
    DB_TX_TIMEOUT_MS: int = int(os.getenv("DB_TX_TIMEOUT_MS", "5000"))

    # Realtime fan-out: "memory" (single process) or "redis" (pub/sub relay)
    FANOUT_BACKEND: str = os.getenv("FANOUT_BACKEND", "memory").lower()
    FANOUT_QUEUE_SIZE: int = int(os.getenv("FANOUT_QUEUE_SIZE", "100"))
    FANOUT_CHANNEL_PREFIX: str = os.getenv("FANOUT_CHANNEL_PREFIX", "chat:conversation")

    # Redis settings
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")

    # Conversation rules
    NAME_MAX_LENGTH: int = int(os.getenv("NAME_MAX_LENGTH", "50"))
    MESSAGE_MAX_LENGTH: int = int(os.getenv("MESSAGE_MAX_LENGTH", "4000"))
    USER_SEARCH_LIMIT: int = int(os.getenv("USER_SEARCH_LIMIT", "10"))

