"""Test configuration and fixtures."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from config import database


class FakeQuery:
    """Records calls made through supabase.table(...) and replays scripted outcomes."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.operation = None
        self.payload = None
        self.options = {}

    def insert(self, row):
        self.operation = "insert"
        self.payload = row
        return self

    def select(self, *columns, **options):
        self.operation = "select"
        self.payload = columns
        self.options = options
        return self

    def execute(self):
        self.client.calls.append((self.operation, self.table, self.payload, self.options))
        outcome = self.client.outcomes.get((self.operation, self.table))
        if isinstance(outcome, Exception):
            raise outcome
        if self.operation == "select":
            return SimpleNamespace(data=[], count=outcome)
        return SimpleNamespace(data=[self.payload], count=None)


class FakeSupabase:
    def __init__(self):
        self.calls = []
        self.outcomes = {}

    def table(self, name):
        return FakeQuery(self, name)

    def inserts(self):
        return [call for call in self.calls if call[0] == "insert"]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def installed_supabase(monkeypatch, fake_supabase):
    """Make get_supabase() hand out the fake client."""
    monkeypatch.setattr(database, "_supabase", fake_supabase)
    return fake_supabase


@pytest.fixture
def no_supabase(monkeypatch):
    """Simulate a deployment without Supabase credentials."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    database.reset_supabase()
    yield
    database.reset_supabase()


@pytest.fixture
def client(installed_supabase):
    from app import app, limiter

    app.config["TESTING"] = True
    limiter.enabled = False
    with app.test_client() as test_client:
        yield test_client
