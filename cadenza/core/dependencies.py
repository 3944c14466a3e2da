"""
Dependency injection for the shared state owners
"""
from cadenza.core.config import settings
from cadenza.services.categories import CategoryStore
from cadenza.services.habits import HabitService, load_sample_data
from cadenza.services.navigation import NavigationState
from cadenza.services.notifications import ChangeNotifier


class AppState:
    """The notifier, stores and navigation state one process works with"""

    def __init__(self, load_samples: bool = False):
        self.notifier = ChangeNotifier()
        self.category_store = CategoryStore(self.notifier)
        self.habit_service = HabitService(notifier=self.notifier)
        self.navigation = NavigationState(self.habit_service, self.notifier)
        if load_samples:
            load_sample_data(self.category_store, self.habit_service)


# Create singleton instance for the application
app_state = AppState(load_samples=settings.LOAD_SAMPLE_DATA)


def get_app_state() -> AppState:
    """Get the application state"""
    return app_state


def get_category_store() -> CategoryStore:
    """Get the category store"""
    return app_state.category_store


def get_habit_service() -> HabitService:
    """Get the habit collection service"""
    return app_state.habit_service


def get_navigation() -> NavigationState:
    """Get the navigation state"""
    return app_state.navigation
