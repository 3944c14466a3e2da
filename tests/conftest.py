"""
Pytest fixtures for the habit engine tests
"""
import pytest
from datetime import date
from fastapi.testclient import TestClient

from cadenza.core.dependencies import (
    AppState,
    get_app_state,
    get_category_store,
    get_habit_service,
    get_navigation
)
from cadenza.main import app
from cadenza.models.habit import Habit
from cadenza.services.categories import CategoryStore
from cadenza.services.habits import HabitService, load_sample_data
from cadenza.services.navigation import NavigationState
from cadenza.services.notifications import ChangeNotifier


TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    """Fixed reference day"""
    return TODAY


@pytest.fixture
def notifier():
    return ChangeNotifier()


@pytest.fixture
def events(notifier):
    """Every event published on the notifier, in order"""
    received = []
    notifier.subscribe(received.append)
    return received


@pytest.fixture
def category_store(notifier):
    return CategoryStore(notifier)


@pytest.fixture
def habit_service(notifier):
    return HabitService(notifier=notifier)


@pytest.fixture
def navigation(habit_service, notifier):
    return NavigationState(habit_service, notifier)


@pytest.fixture
def seeded(category_store, habit_service, today):
    """Stores filled with the sample data"""
    load_sample_data(category_store, habit_service, today)
    return habit_service


@pytest.fixture
def habit_by_name(seeded):
    def lookup(name):
        return next(h for h in seeded.get_habits() if h.name == name)
    return lookup


@pytest.fixture
def fresh_habit(habit_service, today):
    """A habit with streak 5, not completed today and no entry for today"""
    habit = Habit(name="Stretch", category_id="fitness", streak=5, created_date=today)
    return habit_service.add_habit(habit, today=today)


@pytest.fixture
def app_state(today):
    state = AppState()
    load_sample_data(state.category_store, state.habit_service, today)
    return state


@pytest.fixture
def client(app_state):
    """Test client bound to an isolated, seeded application state"""
    app.dependency_overrides[get_app_state] = lambda: app_state
    app.dependency_overrides[get_category_store] = lambda: app_state.category_store
    app.dependency_overrides[get_habit_service] = lambda: app_state.habit_service
    app.dependency_overrides[get_navigation] = lambda: app_state.navigation
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
