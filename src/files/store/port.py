"""Transfer store port — CRUD over pending transfer records."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TransferRecord:
    id: int
    source_user: str
    target_user: str
    node_name: str
    file_id: int | None = None


class TransferNotFoundError(LookupError):
    """No pending transfer exists with the requested id."""

    def __init__(self, transfer_id: int):
        self.transfer_id = transfer_id
        super().__init__(f"Transfer {transfer_id} does not exist")


class TransferStore(ABC):
    """Abstract interface for transfer record persistence.

    ``get`` and ``delete`` raise ``TransferNotFoundError`` for unknown ids.
    """

    @abstractmethod
    def add(self, source_user: str, target_user: str, node_name: str, file_id: int | None = None) -> TransferRecord:
        """Persist a new pending transfer and return it with its assigned id."""
        ...

    @abstractmethod
    def get(self, transfer_id: int) -> TransferRecord: ...

    @abstractmethod
    def delete(self, record: TransferRecord) -> None: ...
