"""Store access for the Finance Tracker services.

``BaseStore`` is the interface every service receives at construction time;
``SQLAlchemyStore`` implements it on top of a SQLAlchemy session. ``create_*``
methods build unsaved entities, ``save_*`` methods persist them in one commit.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from finance_tracker.core.db import Category, Transaction
from finance_tracker.core.models import Balance, TransactionType
from finance_tracker.core.utils import get_logger

logger = get_logger("finance-tracker.store")


class BaseStore(ABC):
    """Abstract interface over the persistent store."""

    @abstractmethod
    def find_categories_by_titles(self, titles: Iterable[str]) -> list[Category]:
        """Return the categories whose title is one of ``titles``, in one lookup."""

    @abstractmethod
    def find_category_by_title(self, title: str) -> Category | None:
        """Return the category with exactly this title, if any."""

    @abstractmethod
    def create_category(self, title: str) -> Category:
        """Build an unsaved category."""

    @abstractmethod
    def save_categories(self, categories: list[Category]) -> list[Category]:
        """Persist categories in one batch and return them with their ids."""

    @abstractmethod
    def create_transaction(self, **fields: object) -> Transaction:
        """Build an unsaved transaction."""

    @abstractmethod
    def save_transactions(self, transactions: list[Transaction]) -> list[Transaction]:
        """Persist transactions in one batch and return them with their ids."""

    @abstractmethod
    def compute_balance(self) -> Balance:
        """Aggregate income and outcome over all persisted transactions."""

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """Return every persisted transaction with its category loaded."""


class SQLAlchemyStore(BaseStore):
    """Store implementation backed by a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        """Initialize the store with a SQLAlchemy session."""
        self.session = session

    def find_categories_by_titles(self, titles: Iterable[str]) -> list[Category]:
        titles = set(titles)
        if not titles:
            return []
        stmt = select(Category).where(Category.title.in_(titles))
        return list(self.session.scalars(stmt))

    def find_category_by_title(self, title: str) -> Category | None:
        stmt = select(Category).where(Category.title == title)
        return self.session.scalars(stmt).first()

    def create_category(self, title: str) -> Category:
        return Category(title=title)

    def save_categories(self, categories: list[Category]) -> list[Category]:
        self._commit(categories)
        return categories

    def create_transaction(self, **fields: object) -> Transaction:
        return Transaction(**fields)

    def save_transactions(self, transactions: list[Transaction]) -> list[Transaction]:
        self._commit(transactions)
        return transactions

    def compute_balance(self) -> Balance:
        stmt = select(Transaction.type, func.sum(Transaction.value)).group_by(Transaction.type)
        sums = {row_type: Decimal(str(total or 0)) for row_type, total in self.session.execute(stmt)}
        income = sums.get(TransactionType.INCOME.value, Decimal(0))
        outcome = sums.get(TransactionType.OUTCOME.value, Decimal(0))
        return Balance(income=income, outcome=outcome, total=income - outcome)

    def list_transactions(self) -> list[Transaction]:
        stmt = select(Transaction).options(joinedload(Transaction.category)).order_by(Transaction.id)
        return list(self.session.scalars(stmt))

    def close(self) -> None:
        """Close the SQLAlchemy session."""
        self.session.close()

    def _commit(self, entities: list[Category] | list[Transaction]) -> None:
        if not entities:
            return
        self.session.add_all(entities)
        try:
            self.session.commit()
        except SQLAlchemyError:
            logger.exception(f"Failed to save {len(entities)} {type(entities[0]).__name__} record(s)")
            self.session.rollback()
            raise
