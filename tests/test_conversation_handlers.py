import asyncio

import pytest

from chatcore.application.commands.conversations import (
    CreateGroupConversationCommand,
    CreateGroupConversationHandler,
    CreatePrivateConversationCommand,
    CreatePrivateConversationHandler,
    RenameGroupCommand,
    RenameGroupHandler,
)
from chatcore.application.commands.messages import SendMessageCommand, SendMessageHandler
from chatcore.application.commands.participants import (
    RemoveParticipantCommand,
    RemoveParticipantHandler,
)
from chatcore.application.queries.conversations import (
    ConversationScope,
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from chatcore.domain.exceptions import (
    DomainValidationError,
    DuplicateConversationError,
    EntityNotFoundError,
    NotAParticipantError,
    SelfConversationError,
)
from chatcore.domain.value_objects import ConversationKind, ParticipantRole
from chatcore.infrastructure.memory import InMemoryUnitOfWork


def _create_private(store, user_id1, user_id2, custom_name=None):
    handler = CreatePrivateConversationHandler(InMemoryUnitOfWork(store))
    return handler.execute(
        CreatePrivateConversationCommand(
            user_id1=user_id1, user_id2=user_id2, custom_name=custom_name
        )
    )


def _create_group(store, name, creator_id):
    handler = CreateGroupConversationHandler(InMemoryUnitOfWork(store))
    return handler.execute(CreateGroupConversationCommand(name=name, creator_id=creator_id))


@pytest.mark.asyncio
async def test_create_private_conversation(store):
    conversation = await _create_private(store, 1, 2)

    assert conversation.kind == ConversationKind.PRIVATE
    assert conversation.name is None
    assert conversation.participant_count == 2
    assert conversation.private_pair == "1:2"

    creator = store.participations[(conversation.id, 1)]
    other = store.participations[(conversation.id, 2)]
    assert creator.role is None and other.role is None
    # Each side sees the other's phone by default
    assert creator.custom_name == "+46700000002"
    assert other.custom_name == "+46700000001"


@pytest.mark.asyncio
async def test_create_private_with_custom_name(store):
    conversation = await _create_private(store, 1, 3, custom_name="Carol C")

    assert store.participations[(conversation.id, 1)].custom_name == "Carol C"
    assert store.participations[(conversation.id, 3)].custom_name == "+46700000001"


@pytest.mark.asyncio
async def test_create_private_with_self_creates_nothing(store):
    with pytest.raises(SelfConversationError):
        await _create_private(store, 1, 1)
    assert store.conversations == {}
    assert store.participations == {}


@pytest.mark.asyncio
async def test_create_private_with_unknown_user(store):
    with pytest.raises(EntityNotFoundError):
        await _create_private(store, 1, 99)
    assert store.conversations == {}


@pytest.mark.asyncio
async def test_create_private_twice_in_either_order_conflicts(store):
    await _create_private(store, 1, 2)
    with pytest.raises(DuplicateConversationError):
        await _create_private(store, 2, 1)
    assert len(store.conversations) == 1


@pytest.mark.asyncio
async def test_concurrent_create_private_only_one_succeeds(store):
    results = await asyncio.gather(
        _create_private(store, 1, 2),
        _create_private(store, 2, 1),
        return_exceptions=True,
    )

    conflicts = [r for r in results if isinstance(r, DuplicateConversationError)]
    created = [r for r in results if not isinstance(r, Exception)]
    assert len(conflicts) == 1
    assert len(created) == 1
    assert len(store.conversations) == 1
    assert len(store.participations) == 2


@pytest.mark.asyncio
async def test_private_pair_is_released_when_a_participant_leaves(store):
    conversation = await _create_private(store, 1, 2)
    remove = RemoveParticipantHandler(InMemoryUnitOfWork(store))
    await remove.execute(
        RemoveParticipantCommand(actor_id=2, conversation_id=conversation.id, target_user_id=2)
    )

    again = await _create_private(store, 1, 2)
    assert again.id != conversation.id


@pytest.mark.asyncio
async def test_create_group_makes_creator_admin(store):
    conversation = await _create_group(store, "  Team  ", 1)

    assert conversation.kind == ConversationKind.GROUP
    assert conversation.name == "Team"
    assert conversation.participant_count == 1
    assert store.participations[(conversation.id, 1)].role == ParticipantRole.ADMIN


@pytest.mark.asyncio
async def test_create_group_rejects_blank_and_long_names(store):
    with pytest.raises(DomainValidationError):
        await _create_group(store, "   ", 1)
    with pytest.raises(DomainValidationError):
        await _create_group(store, "x" * 51, 1)
    assert store.conversations == {}


@pytest.mark.asyncio
async def test_rename_group(store):
    conversation = await _create_group(store, "Team", 1)
    handler = RenameGroupHandler(InMemoryUnitOfWork(store))

    renamed = await handler.execute(
        RenameGroupCommand(actor_id=1, conversation_id=conversation.id, new_name="Crew")
    )

    assert renamed.name == "Crew"
    assert store.conversations[conversation.id].name == "Crew"


@pytest.mark.asyncio
async def test_rename_private_is_rejected(store):
    conversation = await _create_private(store, 1, 2)
    handler = RenameGroupHandler(InMemoryUnitOfWork(store))

    with pytest.raises(DomainValidationError):
        await handler.execute(
            RenameGroupCommand(actor_id=1, conversation_id=conversation.id, new_name="Us")
        )


@pytest.mark.asyncio
async def test_rename_by_non_participant(store):
    conversation = await _create_group(store, "Team", 1)
    handler = RenameGroupHandler(InMemoryUnitOfWork(store))

    with pytest.raises(NotAParticipantError):
        await handler.execute(
            RenameGroupCommand(actor_id=3, conversation_id=conversation.id, new_name="Mine")
        )


@pytest.mark.asyncio
async def test_get_conversation_requires_participation(store):
    conversation = await _create_group(store, "Team", 1)
    handler = GetConversationHandler(InMemoryUnitOfWork(store))

    found = await handler.execute(
        GetConversationQuery(conversation_id=conversation.id, actor_id=1)
    )
    assert found.id == conversation.id

    with pytest.raises(NotAParticipantError):
        await handler.execute(GetConversationQuery(conversation_id=conversation.id, actor_id=2))
    with pytest.raises(EntityNotFoundError):
        await handler.execute(GetConversationQuery(conversation_id=999, actor_id=1))


@pytest.mark.asyncio
async def test_list_scopes_split_chats_and_contacts(store, fanout):
    quiet = await _create_private(store, 1, 2)
    busy = await _create_group(store, "Team", 1)
    other = await _create_private(store, 3, 4)

    send = SendMessageHandler(InMemoryUnitOfWork(store), fanout)
    await send.execute(SendMessageCommand(actor_id=1, conversation_id=busy.id, content="hi"))

    handler = ListConversationsHandler(InMemoryUnitOfWork(store))
    everything = await handler.execute(ListConversationsQuery(user_id=1))
    chats = await handler.execute(
        ListConversationsQuery(user_id=1, scope=ConversationScope.CHATS)
    )
    contacts = await handler.execute(
        ListConversationsQuery(user_id=1, scope=ConversationScope.CONTACTS)
    )

    assert {c.id for c in everything} == {quiet.id, busy.id}
    assert other.id not in {c.id for c in everything}
    assert [c.id for c in chats] == [busy.id]
    assert [c.id for c in contacts] == [quiet.id]
