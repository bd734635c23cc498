"""TransferOwnership aggregate — a pending ownership transfer.

Created when a user asks to hand a file tree over to another user and
removed once the request is accepted, rejected or dismissed. Records are
addressed by an integer id, which is also the object id of the request
notification.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String

from files.domain import files


@files.aggregate
class TransferOwnership:
    """A request to move ownership of a node from one user to another."""

    transfer_id: Integer(identifier=True, required=True)

    source_user: String(required=True, max_length=64)
    target_user: String(required=True, max_length=64)

    # Node being transferred
    file_id: Integer()
    node_name: String(required=True, max_length=255)

    created_at: DateTime()

    @classmethod
    def create(cls, transfer_id, source_user, target_user, node_name, file_id=None):
        """Create a pending transfer."""
        return cls(
            transfer_id=transfer_id,
            source_user=source_user,
            target_user=target_user,
            node_name=node_name,
            file_id=file_id,
            created_at=datetime.now(UTC),
        )
