"""Listing of all transactions together with the current balance."""

from finance_tracker.core.models import TransactionList, TransactionOut
from finance_tracker.core.store import BaseStore
from finance_tracker.services.balance import BalanceAggregator


class ListTransactionsService:
    """Returns every transaction and the balance in one response model."""

    def __init__(self, store: BaseStore) -> None:
        self.store = store
        self.balance = BalanceAggregator(store)

    def execute(self) -> TransactionList:
        transactions = [TransactionOut.model_validate(t) for t in self.store.list_transactions()]
        return TransactionList(transactions=transactions, balance=self.balance.get_balance())
