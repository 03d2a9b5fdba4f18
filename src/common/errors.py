"""Error taxonomy shared by the storage adapters and the feed reader."""


class StorageError(Exception):
    """Base class for every failure raised by a storage adapter."""


class StoreConnectionError(StorageError):
    """The backing store file could not be opened or created."""


class SchemaError(StorageError):
    """A relation could not be created, dropped or found, or a table type is misconfigured."""


class BindingError(StorageError):
    """A record's fields do not line up with the columns declared for its table."""


class ConstraintError(StorageError):
    """A row violated a uniqueness or not-null constraint; the batch was rolled back."""


class DeserializationError(StorageError):
    """A stored row could not be rebuilt into its record type."""


class FeedError(Exception):
    """A GTFS flat file is missing or does not match its frame model."""
