"""Transaction persistence, one at a time or in a single batch."""

from collections.abc import Iterable

from finance_tracker.core.db import Category, Transaction
from finance_tracker.core.models import TransactionCreate
from finance_tracker.core.store import BaseStore


class TransactionWriter:
    """Builds transaction entities from requests and saves them.

    Callers pass categories that are already persisted (or None).
    """

    def __init__(self, store: BaseStore) -> None:
        self.store = store

    def build(self, request: TransactionCreate, category: Category | None) -> Transaction:
        return self.store.create_transaction(
            title=request.title,
            type=request.type.value,
            value=request.value,
            category=category,
        )

    def write(self, request: TransactionCreate, category: Category | None) -> Transaction:
        """Persist one transaction and return it with its id."""
        transaction = self.build(request, category)
        self.store.save_transactions([transaction])
        return transaction

    def write_many(self, items: Iterable[tuple[TransactionCreate, Category | None]]) -> list[Transaction]:
        """Persist all transactions with one batch save."""
        transactions = [self.build(request, category) for request, category in items]
        return self.store.save_transactions(transactions)
