"""ORM models, engine and session factory for the Finance Tracker."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Category(Base):
    """A named grouping shared by many transactions, created on first use."""

    __tablename__ = "categories"
    id = Column(Integer, primary_key=True)
    title = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Category {self.title!r}>"


class Transaction(Base):
    """An income or outcome entry, never mutated after creation."""

    __tablename__ = "transactions"
    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    type = Column(String(10), nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    category = relationship("Category")

    def __repr__(self) -> str:
        return f"<Transaction {self.type} {self.value}>"


def get_engine(url: str | None = None) -> Engine:
    """Create a SQLAlchemy engine using the configured database URL."""
    if url is None:
        from finance_tracker.core.settings import get_settings

        url = get_settings().database_url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = get_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(bind: Engine) -> None:
    """Create the categories and transactions tables if they are missing."""
    Base.metadata.create_all(bind)
