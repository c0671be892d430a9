"""Core package: provides models, database helpers, settings, errors, and shared utilities."""

from .db import Category, Transaction  # noqa: F401
from .errors import AppError, CSVParseError, InsufficientBalanceError  # noqa: F401
from .models import Balance, TransactionCreate, TransactionType  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
