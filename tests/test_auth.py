"""
Tests for sign-up, login and the session view gate.
"""
from collections import Counter

from wedding_planner.config.settings import settings
from wedding_planner.config.checklist_config import PHASES
from wedding_planner.modules.auth.service import resolve_view

from tests.fake_supabase import token_for

SIGNUP_BODY = {"email": "alex.sam@example.com", "password": "s3cret-pass", "couple_names": "Alex & Sam"}


class TestSignup:

    def test_signup_creates_profile_and_default_tasks(self, client, fake_supabase):
        response = client.post("/api/v1/auth/signup", json={
            "email": "alex.sam@example.com",
            "password": "s3cret-pass",
            "couple_names": "Alex & Sam",
            "wedding_date": "2027-06-12",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["profile"]["couple_names"] == "Alex & Sam"
        assert body["profile"]["wedding_date"] == "2027-06-12"
        assert body["profile"]["is_admin"] is False

        tasks = fake_supabase.rows("tasks")
        assert len(tasks) == 60
        assert Counter(t["phase"] for t in tasks) == {phase: 10 for phase in PHASES}
        assert all(t["user_id"] == body["user_id"] and t["completed"] is False for t in tasks)

    def test_seeding_only_touches_new_profile(self, client, fake_supabase, signup):
        first_id, _ = signup()
        signup(email="robin.kai@example.com", couple_names="Robin & Kai")

        owners = Counter(t["user_id"] for t in fake_supabase.rows("tasks"))
        assert owners[first_id] == 60
        assert sum(owners.values()) == 120

    def test_duplicate_email_is_rejected(self, client, signup):
        signup()
        response = client.post("/api/v1/auth/signup", json={
            "email": "alex.sam@example.com", "password": "x", "couple_names": "Again",
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists"

    def test_couple_names_required(self, client):
        response = client.post("/api/v1/auth/signup", json={
            "email": "a@example.com", "password": "x", "couple_names": "",
        })
        assert response.status_code == 422

    def test_seeding_can_be_disabled(self, client, fake_supabase, signup, monkeypatch):
        monkeypatch.setattr(settings, "seed_default_tasks", False)
        signup()

        assert len(fake_supabase.rows("profiles")) == 1
        assert fake_supabase.rows("tasks") == []

    def test_failed_seeding_removes_profile_and_identity(self, client, fake_supabase):
        fake_supabase.fail_ops.add(("insert", "tasks"))
        response = client.post("/api/v1/auth/signup", json=SIGNUP_BODY)

        assert response.status_code == 500
        assert "tasks is unavailable" in response.json()["detail"]
        assert fake_supabase.rows("profiles") == []
        assert fake_supabase.auth.users == {}

    def test_signup_can_be_retried_after_failed_seeding(self, client, fake_supabase):
        fake_supabase.fail_ops.add(("insert", "tasks"))
        assert client.post("/api/v1/auth/signup", json=SIGNUP_BODY).status_code == 500
        fake_supabase.fail_ops.clear()

        response = client.post("/api/v1/auth/signup", json=SIGNUP_BODY)

        assert response.status_code == 201
        headers = {"Authorization": f"Bearer {token_for(response.json()['user_id'])}"}
        assert client.get("/api/v1/auth/session", headers=headers).json()["view"] == "planner"
        assert client.get("/api/v1/planner/overview", headers=headers).status_code == 200

    def test_failed_profile_insert_removes_identity(self, client, fake_supabase):
        fake_supabase.fail_ops.add(("insert", "profiles"))
        response = client.post("/api/v1/auth/signup", json=SIGNUP_BODY)

        assert response.status_code == 500
        assert fake_supabase.auth.users == {}

    def test_login_recreates_missing_profile(self, client, fake_supabase):
        # Identity cleanup fails too, leaving an identity without a profile
        fake_supabase.fail_ops.update({("insert", "tasks"), ("delete", "auth.users")})
        payload = dict(SIGNUP_BODY, wedding_date="2027-06-12")
        assert client.post("/api/v1/auth/signup", json=payload).status_code == 500
        assert fake_supabase.rows("profiles") == []
        fake_supabase.fail_ops.clear()

        response = client.post("/api/v1/auth/login", json={
            "email": SIGNUP_BODY["email"], "password": SIGNUP_BODY["password"],
        })

        assert response.status_code == 200
        profile = fake_supabase.rows("profiles")[0]
        assert profile["id"] == response.json()["user_id"]
        assert profile["couple_names"] == "Alex & Sam"
        assert profile["wedding_date"] == "2027-06-12"
        assert len(fake_supabase.rows("tasks")) == 60


class TestLogin:

    def test_login_returns_token(self, client, signup):
        user_id, _ = signup()
        response = client.post("/api/v1/auth/login", json={
            "email": "alex.sam@example.com", "password": "s3cret-pass",
        })

        assert response.status_code == 200
        assert response.json()["access_token"] == token_for(user_id)
        assert response.json()["token_type"] == "bearer"

    def test_wrong_password(self, client, signup):
        signup()
        response = client.post("/api/v1/auth/login", json={
            "email": "alex.sam@example.com", "password": "nope",
        })

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_logout(self, client, fake_supabase, signup):
        _, headers = signup()
        response = client.post("/api/v1/auth/logout", headers=headers)

        assert response.status_code == 200
        assert fake_supabase.auth.signed_out == 1

    def test_password_reset(self, client, fake_supabase, signup):
        signup()
        response = client.post("/api/v1/auth/password-reset", json={"email": "alex.sam@example.com"})

        assert response.status_code == 200
        assert fake_supabase.auth.reset_requests[0][0] == "alex.sam@example.com"

    def test_me_requires_valid_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer bogus"})
        assert response.status_code == 401

    def test_me(self, client, signup):
        user_id, headers = signup()
        response = client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["id"] == user_id
        assert response.json()["email"] == "alex.sam@example.com"


class TestSessionView:

    def test_resolve_view(self):
        assert resolve_view(None, authenticated=False) == "auth"
        assert resolve_view({"is_admin": True}) == "admin"
        assert resolve_view({"is_admin": False}) == "planner"
        assert resolve_view(None) == "auth"

    def test_anonymous_gets_auth_form(self, client):
        response = client.get("/api/v1/auth/session")

        assert response.status_code == 200
        assert response.json() == {"view": "auth", "profile": None}

    def test_invalid_token_gets_auth_form(self, client):
        response = client.get("/api/v1/auth/session", headers={"Authorization": "Bearer bogus"})
        assert response.json()["view"] == "auth"

    def test_couple_gets_planner(self, client, signup):
        _, headers = signup()
        response = client.get("/api/v1/auth/session", headers=headers)

        assert response.json()["view"] == "planner"
        assert response.json()["profile"]["couple_names"] == "Alex & Sam"

    def test_identity_without_profile_gets_auth_form(self, client, fake_supabase, signup):
        _, headers = signup()
        fake_supabase.tables["profiles"] = []

        response = client.get("/api/v1/auth/session", headers=headers)

        assert response.json() == {"view": "auth", "profile": None}

    def test_admin_gets_dashboard(self, client, signup, make_admin):
        user_id, headers = signup()
        make_admin(user_id)
        response = client.get("/api/v1/auth/session", headers=headers)

        assert response.json()["view"] == "admin"


class TestProfile:

    def test_update_profile(self, client, signup):
        _, headers = signup()
        response = client.put("/api/v1/profiles/me", headers=headers, json={
            "couple_names": "Alex & Sam Rivera", "wedding_date": "2027-09-01",
        })

        assert response.status_code == 200
        assert response.json()["couple_names"] == "Alex & Sam Rivera"
        assert response.json()["wedding_date"] == "2027-09-01"

    def test_is_admin_not_writable(self, client, fake_supabase, signup):
        _, headers = signup()
        client.put("/api/v1/profiles/me", headers=headers, json={"is_admin": True})

        assert fake_supabase.rows("profiles")[0]["is_admin"] is False

    def test_clear_wedding_date(self, client, signup):
        _, headers = signup(wedding_date="2027-06-12")
        response = client.put("/api/v1/profiles/me", headers=headers, json={"wedding_date": None})

        assert response.json()["wedding_date"] is None
