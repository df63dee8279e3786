"""
In-memory repositories.

Entities are copied on the way in and on the way out, so callers never
mutate stored rows without going through a repository method.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.entities.conversation import Conversation, private_pair_key
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.participation import Participation
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import AlreadyParticipantError, DuplicateConversationError
from chatcore.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    ParticipationRepository,
    UserRepository,
)
from chatcore.infrastructure.memory.store import InMemoryStore

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _to_entity(self, conversation: Conversation) -> Conversation:
        count = sum(
            1
            for conversation_id, _ in self._store.participations
            if conversation_id == conversation.id
        )
        return replace(conversation, participant_count=count)

    def _user_conversations(self, user_id: int) -> list[Conversation]:
        return [
            self._store.conversations[conversation_id]
            for conversation_id, member_id in self._store.participations
            if member_id == user_id and conversation_id in self._store.conversations
        ]

    def _has_messages(self, conversation_id: int) -> bool:
        return any(
            m.conversation_id == conversation_id for m in self._store.messages.values()
        )

    async def create(self, conversation: Conversation) -> Conversation:
        if conversation.private_pair is not None and any(
            c.private_pair == conversation.private_pair
            for c in self._store.conversations.values()
        ):
            raise DuplicateConversationError()
        stored = replace(
            conversation,
            id=self._store.next_id("conversation"),
            participant_count=0,
        )
        self._store.conversations[stored.id] = stored
        return self._to_entity(stored)

    async def get_by_id(self, conversation_id: int) -> Optional[Conversation]:
        conversation = self._store.conversations.get(conversation_id)
        return self._to_entity(conversation) if conversation else None

    async def find_by_user_id(self, user_id: int) -> list[Conversation]:
        conversations = sorted(
            self._user_conversations(user_id),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )
        return [self._to_entity(c) for c in conversations]

    async def find_with_messages(self, user_id: int) -> list[Conversation]:
        conversations = sorted(
            (c for c in self._user_conversations(user_id) if self._has_messages(c.id)),
            key=lambda c: (c.last_message_at or _EPOCH, c.id),
            reverse=True,
        )
        return [self._to_entity(c) for c in conversations]

    async def find_without_messages(self, user_id: int) -> list[Conversation]:
        conversations = sorted(
            (
                c
                for c in self._user_conversations(user_id)
                if not self._has_messages(c.id)
            ),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )
        return [self._to_entity(c) for c in conversations]

    async def exists_private_between(self, user_id1: int, user_id2: int) -> bool:
        key = private_pair_key(user_id1, user_id2)
        return any(c.private_pair == key for c in self._store.conversations.values())

    async def update_last_message_at(
        self, conversation_id: int, timestamp: datetime
    ) -> None:
        conversation = self._store.conversations.get(conversation_id)
        if conversation:
            conversation.last_message_at = timestamp

    async def rename(self, conversation_id: int, name: str) -> None:
        conversation = self._store.conversations.get(conversation_id)
        if conversation:
            conversation.name = name

    async def release_private_pair(self, conversation_id: int) -> None:
        conversation = self._store.conversations.get(conversation_id)
        if conversation:
            conversation.private_pair = None


class InMemoryParticipationRepository(ParticipationRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _to_entity(self, participation: Participation) -> Participation:
        user = self._store.users.get(participation.user_id)
        return replace(participation, username=user.username if user else None)

    async def get(self, conversation_id: int, user_id: int) -> Optional[Participation]:
        participation = self._store.participations.get((conversation_id, user_id))
        return self._to_entity(participation) if participation else None

    async def list_by_conversation(self, conversation_id: int) -> list[Participation]:
        rows = [
            p
            for (cid, _), p in self._store.participations.items()
            if cid == conversation_id
        ]
        rows.sort(key=lambda p: (p.joined_at, p.user_id))
        return [self._to_entity(p) for p in rows]

    @staticmethod
    def _row_key(participation: Participation) -> tuple[int, int]:
        key = participation.key
        return key.conversation_id, key.user_id

    async def add(self, participation: Participation) -> None:
        key = self._row_key(participation)
        if key in self._store.participations:
            raise AlreadyParticipantError(participation.user_id, participation.conversation_id)
        self._store.participations[key] = replace(participation, username=None)

    async def upsert(self, participation: Participation) -> None:
        key = self._row_key(participation)
        self._store.participations[key] = replace(participation, username=None)

    async def remove(self, conversation_id: int, user_id: int) -> bool:
        return self._store.participations.pop((conversation_id, user_id), None) is not None


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def append(self, message: Message) -> Message:
        stored = replace(
            message,
            id=self._store.next_id("message"),
            created_at=message.created_at or datetime.now(timezone.utc),
            sender_name=None,
        )
        self._store.messages[stored.id] = stored
        return replace(stored)

    async def list_by_conversation(
        self, conversation_id: int, with_sender: bool = False
    ) -> list[Message]:
        rows = sorted(
            (m for m in self._store.messages.values() if m.conversation_id == conversation_id),
            key=lambda m: (m.created_at, m.id),
        )
        if not with_sender:
            return [replace(m) for m in rows]
        result = []
        for m in rows:
            sender = self._store.users.get(m.sender_id)
            result.append(replace(m, sender_name=sender.username if sender else None))
        return result

    async def get_by_id(self, message_id: int) -> Optional[Message]:
        message = self._store.messages.get(message_id)
        return replace(message) if message else None

    async def delete(self, message_id: int) -> bool:
        return self._store.messages.pop(message_id, None) is not None


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: int) -> Optional[User]:
        user = self._store.users.get(user_id)
        return replace(user) if user else None

    async def search(self, query: str, limit: int) -> list[User]:
        needle = query.lower()
        matches = [
            replace(u)
            for u in sorted(self._store.users.values(), key=lambda u: u.id)
            if needle in u.username.lower()
            or needle in u.email.lower()
            or needle in u.phone.lower()
        ]
        return matches[:limit]

    async def save(self, user: User) -> User:
        self._store.sequences["user"] = max(self._store.sequences["user"], user.id)
        self._store.users[user.id] = replace(user)
        return replace(user)
