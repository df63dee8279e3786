import asyncio

import pytest

from chatcore.domain.entities import Conversation, Participation
from chatcore.domain.exceptions import AlreadyParticipantError, DuplicateConversationError
from chatcore.infrastructure.memory import InMemoryUnitOfWork


@pytest.mark.asyncio
async def test_error_inside_unit_of_work_rolls_back(store):
    uow = InMemoryUnitOfWork(store)

    with pytest.raises(RuntimeError):
        async with uow:
            conversation = await uow.conversations.create(Conversation.new_group("Team", 1))
            await uow.participants.add(Participation(conversation.id, 1))
            raise RuntimeError("boom")

    assert store.conversations == {}
    assert store.participations == {}
    assert not store.lock.locked()


@pytest.mark.asyncio
async def test_cancelled_unit_of_work_rolls_back(store):
    uow = InMemoryUnitOfWork(store)
    written = asyncio.Event()

    async def writer():
        async with uow:
            await uow.conversations.create(Conversation.new_group("Team", 1))
            written.set()
            await asyncio.sleep(10)

    task = asyncio.create_task(writer())
    await written.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert store.conversations == {}
    assert not store.lock.locked()


@pytest.mark.asyncio
async def test_commit_keeps_changes_and_ids_keep_increasing(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        first = await uow.conversations.create(Conversation.new_group("A", 1))
    async with uow:
        second = await uow.conversations.create(Conversation.new_group("B", 1))

    assert second.id == first.id + 1
    assert set(store.conversations) == {first.id, second.id}


@pytest.mark.asyncio
async def test_store_enforces_private_pair_uniqueness(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        await uow.conversations.create(Conversation.new_private(1, 2))

    with pytest.raises(DuplicateConversationError):
        async with uow:
            await uow.conversations.create(Conversation.new_private(2, 1))
    assert len(store.conversations) == 1


@pytest.mark.asyncio
async def test_store_enforces_participation_key(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        conversation = await uow.conversations.create(Conversation.new_group("Team", 1))
        await uow.participants.add(Participation(conversation.id, 1))
        with pytest.raises(AlreadyParticipantError):
            await uow.participants.add(Participation(conversation.id, 1))


@pytest.mark.asyncio
async def test_returned_entities_are_copies(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        conversation = await uow.conversations.create(Conversation.new_group("Team", 1))
        await uow.participants.add(Participation(conversation.id, 1))
        loaded = await uow.participants.get(conversation.id, 1)
        loaded.promote()

    assert store.participations[(conversation.id, 1)].role is None


@pytest.mark.asyncio
async def test_user_search_is_case_insensitive_and_limited(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        by_name = await uow.users.search("ALI", 10)
        by_domain = await uow.users.search("example.com", 2)
        by_phone = await uow.users.search("0004", 10)

    assert [u.username for u in by_name] == ["alice"]
    assert [u.username for u in by_domain] == ["alice", "bob"]
    assert [u.username for u in by_phone] == ["dave"]
