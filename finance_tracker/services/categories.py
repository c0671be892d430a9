"""Category resolution: find existing categories by title and create the missing ones."""

from collections.abc import Iterable

from finance_tracker.core.db import Category
from finance_tracker.core.store import BaseStore
from finance_tracker.core.utils import get_logger

logger = get_logger("finance-tracker.categories")


class CategoryResolver:
    """Maps category titles to persisted categories, creating them on first use.

    Titles match exactly (case-sensitive). Empty titles are ignored.
    """

    def __init__(self, store: BaseStore) -> None:
        self.store = store

    def resolve(self, titles: Iterable[str]) -> dict[str, Category]:
        """Resolve every title with one lookup and at most one batch insert."""
        wanted = list(dict.fromkeys(title for title in titles if title))
        if not wanted:
            return {}
        existing = self.store.find_categories_by_titles(wanted)
        existing_titles = {category.title for category in existing}
        missing = [title for title in wanted if title not in existing_titles]
        created = self.store.save_categories([self.store.create_category(title) for title in missing])
        if created:
            logger.info(f"Created {len(created)} new categories: {[c.title for c in created]}")
        return {category.title: category for category in [*created, *existing]}

    def resolve_one(self, title: str) -> Category | None:
        """Return the category named ``title``, creating it when absent."""
        if not title:
            return None
        category = self.store.find_category_by_title(title)
        if category is None:
            category = self.store.create_category(title)
            self.store.save_categories([category])
            logger.info(f"Created new category: '{title}'")
        return category
