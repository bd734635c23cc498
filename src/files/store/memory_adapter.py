"""In-memory transfer store for development and testing."""

from itertools import count

from files.store.port import TransferNotFoundError, TransferRecord, TransferStore


class InMemoryTransferStore(TransferStore):
    """Transfer store backed by a dict. Ids start at 1 and are never reused."""

    def __init__(self) -> None:
        self.records: dict[int, TransferRecord] = {}
        self.deleted: list[int] = []
        self._ids = count(1)

    def add(self, source_user: str, target_user: str, node_name: str, file_id: int | None = None) -> TransferRecord:
        record = TransferRecord(
            id=next(self._ids),
            source_user=source_user,
            target_user=target_user,
            node_name=node_name,
            file_id=file_id,
        )
        self.records[record.id] = record
        return record

    def get(self, transfer_id: int) -> TransferRecord:
        try:
            return self.records[transfer_id]
        except KeyError:
            raise TransferNotFoundError(transfer_id) from None

    def delete(self, record: TransferRecord) -> None:
        if self.records.pop(record.id, None) is None:
            raise TransferNotFoundError(record.id)
        self.deleted.append(record.id)
