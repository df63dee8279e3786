"""
Dishka DI Container Setup.

- AppProvider: command/query handlers and the fan-out service
- storage providers: UnitOfWork (memory or Prisma)
- fan-out providers: MessageBroadcaster (in-process or Redis)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  Container → provides → PrismaUnitOfWork → to → SendMessageHandler
                                ↓
                        uses UnitOfWork interface
"""

from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from redis.asyncio import Redis

from chatcore.application.commands.conversations import (
    CreateGroupConversationHandler,
    CreatePrivateConversationHandler,
    RenameGroupHandler,
)
from chatcore.application.commands.messages import (
    DeleteMessageAsAdminHandler,
    DeleteMessageHandler,
    SendMessageHandler,
)
from chatcore.application.commands.participants import (
    AddParticipantHandler,
    BlockParticipantHandler,
    PromoteParticipantHandler,
    RemoveParticipantHandler,
    UnblockParticipantHandler,
)
from chatcore.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from chatcore.application.queries.messages import ListMessagesHandler
from chatcore.application.queries.participants import ListParticipantsHandler
from chatcore.application.queries.users import SearchUsersHandler
from chatcore.config.settings import Config
from chatcore.domain.ports.broadcaster import MessageBroadcaster
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.infrastructure.cache.redis_client import (
    close_redis_client,
    create_redis_client,
)
from chatcore.infrastructure.memory import InMemoryStore, InMemoryUnitOfWork
from chatcore.infrastructure.realtime import InMemoryBroadcaster, RedisBroadcaster
from chatcore.services.fanout import MessageFanout


class AppProvider(Provider):
    """
    Application dependency provider.

    Every handler gets a fresh UnitOfWork per request; the fan-out service
    is shared by the whole process.
    """

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_message_fanout(self, broadcaster: MessageBroadcaster) -> MessageFanout:
        return MessageFanout(broadcaster)

    # ==================== CONVERSATION HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_private_handler(
        self, uow: UnitOfWork
    ) -> CreatePrivateConversationHandler:
        """
        - Parameter asks for UnitOfWork (abstract)
        - Dishka resolves it from whichever storage provider is installed
        """
        return CreatePrivateConversationHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_create_group_handler(self, uow: UnitOfWork) -> CreateGroupConversationHandler:
        return CreateGroupConversationHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_rename_group_handler(self, uow: UnitOfWork) -> RenameGroupHandler:
        return RenameGroupHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(self, uow: UnitOfWork) -> GetConversationHandler:
        return GetConversationHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, uow: UnitOfWork
    ) -> ListConversationsHandler:
        return ListConversationsHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_search_users_handler(self, uow: UnitOfWork) -> SearchUsersHandler:
        return SearchUsersHandler(uow)

    # ==================== PARTICIPANT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_participant_handler(self, uow: UnitOfWork) -> AddParticipantHandler:
        return AddParticipantHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_remove_participant_handler(
        self, uow: UnitOfWork
    ) -> RemoveParticipantHandler:
        return RemoveParticipantHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_promote_participant_handler(
        self, uow: UnitOfWork
    ) -> PromoteParticipantHandler:
        return PromoteParticipantHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_block_participant_handler(self, uow: UnitOfWork) -> BlockParticipantHandler:
        return BlockParticipantHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_unblock_participant_handler(
        self, uow: UnitOfWork
    ) -> UnblockParticipantHandler:
        return UnblockParticipantHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_list_participants_handler(self, uow: UnitOfWork) -> ListParticipantsHandler:
        return ListParticipantsHandler(uow)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self, uow: UnitOfWork, fanout: MessageFanout
    ) -> SendMessageHandler:
        return SendMessageHandler(uow=uow, fanout=fanout)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(self, uow: UnitOfWork) -> ListMessagesHandler:
        return ListMessagesHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(self, uow: UnitOfWork) -> DeleteMessageHandler:
        return DeleteMessageHandler(uow)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_as_admin_handler(
        self, uow: UnitOfWork
    ) -> DeleteMessageAsAdminHandler:
        return DeleteMessageAsAdminHandler(uow)


class InMemoryStorageProvider(Provider):
    """STORAGE_BACKEND=memory. Pass a store to share it with the caller (tests)."""

    def __init__(self, store: Optional[InMemoryStore] = None):
        super().__init__()
        self._store = store or InMemoryStore()

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return self._store

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, store: InMemoryStore) -> UnitOfWork:
        return InMemoryUnitOfWork(store)


class InMemoryFanoutProvider(Provider):
    """FANOUT_BACKEND=memory: single-process broadcast."""

    def __init__(self, broadcaster: Optional[MessageBroadcaster] = None):
        super().__init__()
        self._broadcaster = broadcaster

    @provide(scope=Scope.APP)
    def get_broadcaster(self) -> MessageBroadcaster:
        return self._broadcaster or InMemoryBroadcaster()


class RedisFanoutProvider(Provider):
    """FANOUT_BACKEND=redis: relay deliveries between instances over pub/sub."""

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client(Config.REDIS_URL)
        yield client
        await close_redis_client(client)

    @provide(scope=Scope.APP)
    def get_broadcaster(self, redis: Redis) -> MessageBroadcaster:
        return RedisBroadcaster(redis, Config.FANOUT_CHANNEL_PREFIX)


def _storage_provider() -> Provider:
    if Config.STORAGE_BACKEND == "memory":
        return InMemoryStorageProvider()
    if Config.STORAGE_BACKEND == "prisma":
        # Needs a generated Prisma client, so only imported when selected
        from chatcore.setup.ioc.prisma_provider import PrismaStorageProvider

        return PrismaStorageProvider()
    raise ValueError(f"Unknown STORAGE_BACKEND: {Config.STORAGE_BACKEND}")


def _fanout_provider() -> Provider:
    if Config.FANOUT_BACKEND == "memory":
        return InMemoryFanoutProvider()
    if Config.FANOUT_BACKEND == "redis":
        return RedisFanoutProvider()
    raise ValueError(f"Unknown FANOUT_BACKEND: {Config.FANOUT_BACKEND}")


def create_container(
    storage: Optional[Provider] = None, fanout: Optional[Provider] = None
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Backends come from Config unless providers are passed explicitly.
    Call this ONCE per application.
    """
    return make_async_container(
        AppProvider(),
        storage or _storage_provider(),
        fanout or _fanout_provider(),
    )
