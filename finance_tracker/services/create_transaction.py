"""Single transaction creation with balance validation."""

from finance_tracker.core.db import Transaction
from finance_tracker.core.errors import InsufficientBalanceError
from finance_tracker.core.models import TransactionCreate, TransactionType
from finance_tracker.core.store import BaseStore
from finance_tracker.core.utils import get_logger
from finance_tracker.services.balance import BalanceAggregator
from finance_tracker.services.categories import CategoryResolver
from finance_tracker.services.transactions import TransactionWriter

logger = get_logger("finance-tracker.create")


class CreateTransactionService:
    """Validates a request against the current balance, then resolves its category and saves it."""

    def __init__(self, store: BaseStore) -> None:
        """Initialize the service and its collaborators with the same store."""
        self.balance = BalanceAggregator(store)
        self.categories = CategoryResolver(store)
        self.writer = TransactionWriter(store)

    def execute(self, request: TransactionCreate) -> Transaction:
        """Create a transaction, or raise InsufficientBalanceError without writing anything."""
        total = self.balance.get_balance().total
        if request.type is TransactionType.OUTCOME and request.value > total:
            logger.warning(f"Rejected outcome '{request.title}': value {request.value} exceeds balance {total}")
            raise InsufficientBalanceError
        category = self.categories.resolve_one(request.category)
        transaction = self.writer.write(request, category)
        logger.info(f"Created {transaction.type} transaction {transaction.id}: '{transaction.title}' {transaction.value}")
        return transaction
