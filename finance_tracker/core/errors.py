"""Domain errors raised by the Finance Tracker services.

Every error the services raise on purpose derives from ``AppError``; the API
layer turns it into a JSON ``{"detail": ...}`` response with ``status_code``.
I/O errors and SQLAlchemy errors are not wrapped and propagate as-is.
"""


class AppError(Exception):
    """Base class for errors reported back to the caller."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Store the message and the HTTP status code to report."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InsufficientBalanceError(AppError):
    """An outcome transaction is larger than the current total balance."""

    def __init__(self, message: str = "You do not have enough balance") -> None:
        """Create the error with the default balance message."""
        super().__init__(message, status_code=400)


class CSVParseError(AppError):
    """The imported CSV has a malformed row shape or invalid row values."""
