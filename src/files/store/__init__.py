"""Transfer store registry.

``TRANSFER_STORE_ADAPTER`` selects the implementation:
- ``repository`` (default): TransferOwnership aggregates in the active domain
- ``memory``: process-local dict, for development without a domain context
"""

import os

from files.store.port import TransferStore

_store_instance: TransferStore | None = None


def get_store() -> TransferStore:
    """Return the configured transfer store (singleton)."""
    global _store_instance
    if _store_instance is None:
        adapter = os.environ.get("TRANSFER_STORE_ADAPTER", "repository")
        if adapter == "repository":
            from files.store.repository_adapter import RepositoryTransferStore

            _store_instance = RepositoryTransferStore()
        elif adapter == "memory":
            from files.store.memory_adapter import InMemoryTransferStore

            _store_instance = InMemoryTransferStore()
        else:
            raise ValueError(f"Unknown transfer store adapter: {adapter}")
    return _store_instance


def set_store(store: TransferStore) -> None:
    """Override the active transfer store (useful for tests)."""
    global _store_instance
    _store_instance = store


def reset_store() -> None:
    """Reset the store singleton (useful for testing)."""
    global _store_instance
    _store_instance = None
