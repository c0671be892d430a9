"""Services package: balance, category resolution, transaction writing, creation and CSV import."""

from .balance import BalanceAggregator  # noqa: F401
from .categories import CategoryResolver  # noqa: F401
from .create_transaction import CreateTransactionService  # noqa: F401
from .import_transactions import ImportTransactionsService  # noqa: F401
from .list_transactions import ListTransactionsService  # noqa: F401
from .transactions import TransactionWriter  # noqa: F401
