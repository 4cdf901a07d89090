class StockroomError(Exception):
    """Base class for errors raised by the stock operations."""


class ValidationError(StockroomError):
    """A write request is missing a required field or carries an invalid one."""


class StorageError(StockroomError):
    """The document store could not be reached or queried."""
