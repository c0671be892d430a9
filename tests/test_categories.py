"""Tests for CategoryResolver batch and single-item resolution."""

from collections.abc import Iterable

from finance_tracker.core.db import Category
from finance_tracker.core.store import SQLAlchemyStore
from finance_tracker.services import CategoryResolver


class CountingStore(SQLAlchemyStore):
    """SQLAlchemyStore that records how many lookups and saves are made."""

    def __init__(self, session) -> None:
        super().__init__(session)
        self.lookups = 0
        self.saved_batches: list[list[str]] = []

    def find_categories_by_titles(self, titles: Iterable[str]) -> list[Category]:
        self.lookups += 1
        return super().find_categories_by_titles(titles)

    def save_categories(self, categories: list[Category]) -> list[Category]:
        self.saved_batches.append([c.title for c in categories])
        return super().save_categories(categories)


def test_resolve_deduplicates_and_batches(session_factory) -> None:
    """Duplicated names are looked up once and created in a single batch."""
    store = CountingStore(session_factory())
    resolved = CategoryResolver(store).resolve(["Food", "Housing", "Food", "", "Housing"])
    if sorted(resolved) != ["Food", "Housing"]:
        msg = f"Expected Food and Housing, got {sorted(resolved)}"
        raise AssertionError(msg)
    if store.lookups != 1:
        msg = f"Expected one batched lookup, got {store.lookups}"
        raise AssertionError(msg)
    if store.saved_batches != [["Food", "Housing"]]:
        msg = f"Expected one batch with both titles, got {store.saved_batches}"
        raise AssertionError(msg)
    if any(category.id is None for category in resolved.values()):
        msg = "Expected every resolved category to be persisted"
        raise AssertionError(msg)


def test_resolve_reuses_existing_categories(store: SQLAlchemyStore, category_titles) -> None:
    resolver = CategoryResolver(store)
    first = resolver.resolve(["Food"])
    second = resolver.resolve(["Food", "Travel"])
    if second["Food"].id != first["Food"].id:
        msg = "Expected the existing Food category to be reused"
        raise AssertionError(msg)
    if category_titles() != ["Food", "Travel"]:
        msg = f"Unexpected categories: {category_titles()}"
        raise AssertionError(msg)


def test_resolve_empty_input_touches_nothing(session_factory) -> None:
    store = CountingStore(session_factory())
    if CategoryResolver(store).resolve([]) != {}:
        msg = "Expected an empty mapping"
        raise AssertionError(msg)
    if store.lookups or store.saved_batches:
        msg = "Expected no store access for an empty input"
        raise AssertionError(msg)


def test_resolve_one_creates_then_fetches(store: SQLAlchemyStore, category_titles) -> None:
    resolver = CategoryResolver(store)
    created = resolver.resolve_one("Health")
    fetched = resolver.resolve_one("Health")
    if created.id != fetched.id or category_titles() != ["Health"]:
        msg = "Expected a single Health category"
        raise AssertionError(msg)
    if resolver.resolve_one("") is not None:
        msg = "Expected None for an empty title"
        raise AssertionError(msg)
