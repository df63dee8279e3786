"""
INFRASTRUCTURE LAYER - Adapters for the domain ports.

- persistence/: Prisma (PostgreSQL) repositories and unit of work
- memory/: in-memory repositories and unit of work
- realtime/: message broadcasters (in-process, Redis pub/sub)
- cache/: Redis client factory
"""
