"""Repository transfer store — pending transfers persisted as TransferOwnership aggregates."""

from contextlib import contextmanager

from protean import UnitOfWork
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain, current_uow

from files.store.port import TransferNotFoundError, TransferRecord, TransferStore
from files.transfer.sequence import TransferSequence
from files.transfer.transfer import TransferOwnership

SEQUENCE_NAME = "transfer_ownership"


def _to_record(transfer: TransferOwnership) -> TransferRecord:
    return TransferRecord(
        id=transfer.transfer_id,
        source_user=transfer.source_user,
        target_user=transfer.target_user,
        node_name=transfer.node_name,
        file_id=transfer.file_id,
    )


@contextmanager
def _unit_of_work():
    """Join the active unit of work (inside a command handler) or open one."""
    if current_uow:
        yield
    else:
        with UnitOfWork():
            yield


class RepositoryTransferStore(TransferStore):
    """Transfer store over the active domain's TransferOwnership repository.

    Ids come from a ``TransferSequence`` and are never reused.
    """

    def add(self, source_user: str, target_user: str, node_name: str, file_id: int | None = None) -> TransferRecord:
        with _unit_of_work():
            transfer = TransferOwnership.create(
                transfer_id=self._next_id(),
                source_user=source_user,
                target_user=target_user,
                node_name=node_name,
                file_id=file_id,
            )
            current_domain.repository_for(TransferOwnership).add(transfer)
        return _to_record(transfer)

    def get(self, transfer_id: int) -> TransferRecord:
        return _to_record(self._load(transfer_id))

    def delete(self, record: TransferRecord) -> None:
        with _unit_of_work():
            transfer = self._load(record.id)
            current_domain.repository_for(TransferOwnership)._dao.delete(transfer)

    @staticmethod
    def _load(transfer_id: int) -> TransferOwnership:
        repo = current_domain.repository_for(TransferOwnership)
        try:
            return repo.get(transfer_id)
        except ObjectNotFoundError:
            raise TransferNotFoundError(transfer_id) from None

    @staticmethod
    def _next_id() -> int:
        repo = current_domain.repository_for(TransferSequence)
        try:
            sequence = repo.get(SEQUENCE_NAME)
        except ObjectNotFoundError:
            sequence = TransferSequence(name=SEQUENCE_NAME, last_id=0)

        transfer_id = sequence.next_id()
        repo.add(sequence)
        return transfer_id
