"""TransferSequence aggregate — hands out transfer ids.

The counter only grows, so an id is never given to a second transfer even
after the first one is deleted.
"""

from protean.fields import Integer, String

from files.domain import files


@files.aggregate
class TransferSequence:
    name: String(identifier=True, required=True, max_length=32)
    last_id: Integer(default=0)

    def next_id(self) -> int:
        self.last_id = (self.last_id or 0) + 1
        return self.last_id
