# soundchange\shared\container.py
from dependency_injector import containers, providers

from soundchange.shared.config import settings
from soundchange.adapters.persistence.json_inventory_repo import JsonInventoryRepository
from soundchange.core.use_cases.apply_sound_changes import ApplySoundChanges

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # Notation (Singleton: every rule set shares one immutable config)
    notation = providers.Singleton(settings.notation)

    # 2. Gateways (Infrastructure Adapters)

    # Persistence (Singleton: One access point to files)
    inventory_repository = providers.Singleton(
        JsonInventoryRepository,
        base_path=config.INVENTORY_DIR,
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance created for every request (stateless logic),
    # but with Singleton dependencies injected.
    apply_sound_changes_use_case = providers.Factory(
        ApplySoundChanges,
        repository=inventory_repository,
        config=notation,
    )

# Instantiate the container for global access
container = Container()
