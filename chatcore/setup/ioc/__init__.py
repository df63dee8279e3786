from chatcore.setup.ioc.container import (
    AppProvider,
    InMemoryStorageProvider,
    InMemoryFanoutProvider,
    RedisFanoutProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InMemoryStorageProvider",
    "InMemoryFanoutProvider",
    "RedisFanoutProvider",
    "create_container",
]
