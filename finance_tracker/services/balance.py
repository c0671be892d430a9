"""Balance aggregation over all persisted transactions."""

from finance_tracker.core.models import Balance
from finance_tracker.core.store import BaseStore


class BalanceAggregator:
    """Computes income, outcome and net total from the store."""

    def __init__(self, store: BaseStore) -> None:
        self.store = store

    def get_balance(self) -> Balance:
        """Return the current balance; all zeros when nothing is persisted."""
        return self.store.compute_balance()
