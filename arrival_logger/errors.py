"""Exception types raised by the bus arrival logger."""


class ArrivalLoggerError(Exception):
    """Base class for all bus arrival logger errors."""


class BatchError(ArrivalLoggerError):
    """Raised when a step of a batch invocation fails."""


class FetchError(BatchError):
    """Raised when the arrival API request fails or returns a non-200 response."""


class ParseError(BatchError):
    """Raised when the arrival API response is not a readable JSON envelope."""


class PersistenceError(BatchError):
    """Raised when the CSV table or the run log cannot be written."""


class TypeMismatchError(ArrivalLoggerError, TypeError):
    """Raised when a loosely-typed field cannot be read as an integer."""
