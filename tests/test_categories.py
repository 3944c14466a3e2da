"""
Unit tests for the category store
"""
import pytest
from pydantic import ValidationError

from cadenza.core.exceptions import CategoryNotFoundError, DuplicateIdError
from cadenza.models.category import Category
from cadenza.services.categories import UNCATEGORIZED
from cadenza.services.notifications import ChangeKind


class TestCategoryStore:
    """Test category CRUD and fallback resolution"""

    def test_sample_categories(self, seeded, category_store):
        names = [c.name for c in category_store.get_categories()]
        assert names == ["Health", "Fitness", "Productivity", "Learning", "Mindfulness", "Social"]
        assert category_store.get_category("health").icon == "heart.fill"

    def test_categories_are_immutable(self):
        category = Category(name="Music", color="red", icon="music.note")
        with pytest.raises(ValidationError):
            category.name = "Noise"

    def test_add_and_duplicate(self, category_store, events):
        category = category_store.add_category(Category(id="music", name="Music", color="red", icon="music.note"))
        assert category_store.get_category("music") == category
        with pytest.raises(DuplicateIdError):
            category_store.add_category(Category(id="music", name="Other", color="red", icon="x"))
        assert len(events) == 1
        assert events[0].kind == ChangeKind.CATEGORIES_CHANGED

    def test_remove_missing(self, category_store):
        with pytest.raises(CategoryNotFoundError):
            category_store.remove_category("missing")

    def test_removal_leaves_habits_dangling(self, seeded, category_store, habit_by_name):
        category_store.remove_category("health")
        water = habit_by_name("Drink 8 glasses of water")
        assert water.category_id == "health"
        assert category_store.resolve(water.category_id) == UNCATEGORIZED
        assert [h.name for h in seeded.filter_by_category("health")] == ["Drink 8 glasses of water"]

    def test_resolve_none(self, category_store):
        assert category_store.resolve(None) is UNCATEGORIZED
