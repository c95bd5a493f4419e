"""
Test configuration and fixtures for the wedding planner API.
"""
import pytest
from fastapi.testclient import TestClient

from wedding_planner.main import app
from wedding_planner.database.supabase_client import get_supabase, get_service_supabase
from wedding_planner.core.notifications import ChangeNotifier, get_notifier
from wedding_planner.modules.auth.service import clear_auth_cache

from tests.fake_supabase import FakeSupabase, token_for


@pytest.fixture
def fake_supabase():
    """Fresh in-memory Supabase for each test."""
    return FakeSupabase()


@pytest.fixture
def notifier():
    return ChangeNotifier(maxsize=10)


@pytest.fixture
def client(fake_supabase, notifier):
    """A test client wired to the fake Supabase."""
    clear_auth_cache()
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_service_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_auth_cache()


@pytest.fixture
def signup(client):
    """Register a couple through the API; returns (user_id, auth headers)."""
    def _signup(email="alex.sam@example.com", couple_names="Alex & Sam", wedding_date=None):
        payload = {"email": email, "password": "s3cret-pass", "couple_names": couple_names}
        if wedding_date:
            payload["wedding_date"] = wedding_date
        response = client.post("/api/v1/auth/signup", json=payload)
        assert response.status_code == 201, response.text
        user_id = response.json()["user_id"]
        return user_id, {"Authorization": f"Bearer {token_for(user_id)}"}
    return _signup


@pytest.fixture
def make_admin(fake_supabase):
    """Flip is_admin the way a backend operator would."""
    def _make_admin(user_id):
        for profile in fake_supabase.rows("profiles"):
            if profile["id"] == user_id:
                profile["is_admin"] = True
    return _make_admin


@pytest.fixture
def sample_vendor():
    return {
        "name": "Bloom & Vine",
        "type": "Florist",
        "email": "hello@bloomvine.example",
        "phone": "555-0100",
        "cost": "$2,400",
        "notes": "Peonies if in season",
    }


@pytest.fixture
def sample_guest():
    return {
        "first_name": "Jordan",
        "last_name": "Lee",
        "email": "jordan@example.com",
        "group_name": "College friends",
        "rsvp_status": "attending",
        "plus_one": "Casey",
        "table_number": 4,
        "dietary_restrictions": "Vegetarian",
    }
