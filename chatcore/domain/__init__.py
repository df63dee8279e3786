"""
DOMAIN LAYER - Conversations, membership and messages

This layer contains:
- Entities: Business objects with identity (Conversation, Participation, Message, User)
- Value Objects: Immutable types (ParticipationKey, TextBody, MessageDelivery, enums)
- Ports: Interfaces/abstractions that infrastructure implements
- Policies: Pure authorization decisions (no I/O)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Redis, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
