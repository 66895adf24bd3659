"""Errors raised by record store adapters."""


class RecordStoreError(RuntimeError):
    """The data store is unreachable or answered with a failure status."""


class RecordNotFoundError(RecordStoreError):
    """A referenced record id does not exist in the store."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"{collection} record not found: {record_id}")
        self.collection = collection
        self.record_id = record_id


__all__ = ["RecordStoreError", "RecordNotFoundError"]
