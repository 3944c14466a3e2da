"""
Category Store - Owns the set of categories habits refer to
"""
import logging
import threading
from typing import Dict, List, Optional

from cadenza.core.constants import (
    UNCATEGORIZED_ID,
    UNCATEGORIZED_NAME,
    UNCATEGORIZED_COLOR,
    UNCATEGORIZED_ICON
)
from cadenza.core.exceptions import CategoryNotFoundError, DuplicateIdError
from cadenza.models.category import Category
from cadenza.services.notifications import ChangeKind, ChangeNotifier

logger = logging.getLogger(__name__)

# Shown in place of a category that no longer exists
UNCATEGORIZED = Category(
    id=UNCATEGORIZED_ID,
    name=UNCATEGORIZED_NAME,
    color=UNCATEGORIZED_COLOR,
    icon=UNCATEGORIZED_ICON
)


class CategoryStore:
    """
    Ordered set of categories, keyed by id

    Removing a category never touches habits; habits that still point at it
    resolve to UNCATEGORIZED.
    """

    def __init__(self, notifier: Optional[ChangeNotifier] = None,
                 categories: Optional[List[Category]] = None):
        self.notifier = notifier or ChangeNotifier()
        self._categories: Dict[str, Category] = {}
        self._lock = threading.RLock()
        for category in categories or []:
            self._insert(category)

    def _insert(self, category: Category) -> None:
        if category.id in self._categories:
            raise DuplicateIdError(f"Category with id '{category.id}' already exists")
        self._categories[category.id] = category

    def get_categories(self) -> List[Category]:
        """Get all categories in insertion order"""
        with self._lock:
            return list(self._categories.values())

    def get_category(self, category_id: str) -> Category:
        """
        Get a single category by id

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        with self._lock:
            category = self._categories.get(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category '{category_id}' not found")
        return category

    def resolve(self, category_id: Optional[str]) -> Category:
        """
        Look up a category for display, falling back to UNCATEGORIZED

        Args:
            category_id: Id taken from a habit, possibly dangling

        Returns:
            The category, or UNCATEGORIZED when it does not exist
        """
        if category_id is None:
            return UNCATEGORIZED
        with self._lock:
            return self._categories.get(category_id, UNCATEGORIZED)

    def add_category(self, category: Category) -> Category:
        """
        Add a new category

        Raises:
            DuplicateIdError: If the id is already taken
        """
        with self._lock:
            self._insert(category)
        logger.info(f"Category '{category.name}' added ({category.id})")
        self.notifier.publish(ChangeKind.CATEGORIES_CHANGED, "add_category", category.id)
        return category

    def remove_category(self, category_id: str) -> Category:
        """
        Remove a category; habits referencing it are left as they are

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        with self._lock:
            category = self._categories.pop(category_id, None)
        if category is None:
            raise CategoryNotFoundError(f"Category '{category_id}' not found")
        logger.info(f"Category '{category.name}' removed ({category_id})")
        self.notifier.publish(ChangeKind.CATEGORIES_CHANGED, "remove_category", category_id)
        return category
