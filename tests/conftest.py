"""Shared test fixtures for the Promptbank test suite.

Tests run against a throwaway SQLite file. Every test starts from freshly
created tables, so no state leaks between tests.
"""

import os
import tempfile

# Point the app at a temporary database before any app imports.
_TMP_DIR = tempfile.mkdtemp(prefix="promptbank-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["LOG_FORMAT"] = "text"
os.environ["ENVIRONMENT"] = "development"

import pytest
from fastapi.testclient import TestClient

from promptbank.database import Base, get_db, engine, SessionLocal
from promptbank.main import app
from promptbank.middleware.request_context import _rate_buckets

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def _fresh_tables():
    """Drop and recreate every table before each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db():
    """Per-test database session."""
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def client(db):
    """FastAPI TestClient with the DB dependency overridden to use the test session."""

    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    _rate_buckets.clear()  # Reset rate limiter so tests don't hit 429
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def sign_in(client):
    """Factory: sign up (if needed) and sign in, returning auth headers."""

    def _sign_in(email: str = "alice@example.com", password: str = PASSWORD) -> dict:
        client.post("/api/auth/signup", json={"email": email, "password": password})
        resp = client.post("/api/auth/signin", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _sign_in


@pytest.fixture()
def auth_headers(sign_in) -> dict:
    """Auth headers for the default test user."""
    return sign_in()


@pytest.fixture()
def other_headers(sign_in) -> dict:
    """Auth headers for a second, unrelated user."""
    return sign_in("mallory@example.com")


@pytest.fixture()
def make_folder(client):
    """Factory: create a folder through the API and return its JSON."""

    def _make_folder(headers: dict, name: str = "Work", color: str = "#3b82f6") -> dict:
        resp = client.post("/api/folders", json={"name": name, "color": color}, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make_folder


@pytest.fixture()
def make_prompt(client):
    """Factory: create a prompt through the API and return its JSON."""

    def _make_prompt(
        headers: dict,
        folder_id: str,
        title: str = "Greeting",
        content: str = "Hello",
        tags=None,
    ) -> dict:
        payload = {"folder_id": folder_id, "title": title, "content": content, "tags": tags or []}
        resp = client.post("/api/prompts", json=payload, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make_prompt


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, delay, fn):
        self.delay = delay
        self.fn = fn
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True


class FakeTimers:
    """Timer factory recording every timer it creates."""

    def __init__(self):
        self.created: list[FakeTimer] = []

    def __call__(self, delay, fn):
        timer = FakeTimer(delay, fn)
        self.created.append(timer)
        return timer

    @property
    def live(self) -> list[FakeTimer]:
        return [t for t in self.created if t.started and not t.cancelled and not t.fired]

    def fire(self) -> None:
        """Fire every armed timer, as if the delay elapsed."""
        for timer in self.live:
            timer.fired = True
            timer.fn()


@pytest.fixture()
def timers() -> FakeTimers:
    return FakeTimers()


@pytest.fixture()
def api(client):
    """ActionsClient talking to the in-process app through the TestClient."""
    from promptbank.client.gateway import ActionsClient

    return ActionsClient(http=client)


SAMPLE_FOLDERS = [
    {"id": "f1", "name": "Work", "color": "#3b82f6"},
    {"id": "f2", "name": "Home", "color": "#22c55e"},
]

SAMPLE_PROMPTS = [
    {"id": "p1", "folder_id": "f1", "title": "Email Reply", "content": "Dear customer", "tags": ["work"]},
    {"id": "p2", "folder_id": "f2", "title": "Poem", "content": "Roses are red", "tags": []},
]


@pytest.fixture()
def make_state():
    """Factory: AppState over a MagicMock gateway, seeded with the given lists."""
    from unittest.mock import MagicMock

    from promptbank.client.gateway import ActionsClient, ActionResult
    from promptbank.client.state import AppState

    def _make_state(folders=None, prompts=None):
        gateway = MagicMock(spec=ActionsClient)
        gateway.get_workspace.return_value = ActionResult.success({
            "user": {"id": "u1", "email": "alice@example.com"},
            "folders": list(SAMPLE_FOLDERS if folders is None else folders),
            "prompts": list(SAMPLE_PROMPTS if prompts is None else prompts),
            "revision": 1,
        })
        state = AppState(gateway)
        state.refresh()
        return state

    return _make_state


@pytest.fixture()
def notifier():
    from promptbank.client.notifications import Notifier

    return Notifier()
