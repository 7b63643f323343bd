from __future__ import annotations

from types import SimpleNamespace

import pytest

from careermentor.db.supabase_store import SupabaseProfileStore
from careermentor.errors import StoreError


class FakeQuery:
    def __init__(self, table: "FakeTable"):
        self.table = table
        self.filters: dict = {}
        self.action = "select"
        self.values: dict = {}

    def select(self, columns):
        self.action = "select"
        return self

    def insert(self, values):
        self.action = "insert"
        self.values = values
        return self

    def update(self, values):
        self.action = "update"
        self.values = values
        return self

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def limit(self, count):
        return self

    def execute(self):
        if self.table.error is not None:
            raise self.table.error
        matches = [row for row in self.table.rows if all(row.get(k) == v for k, v in self.filters.items())]
        if self.action == "insert":
            row = {"id": len(self.table.rows) + 1, **self.values}
            self.table.rows.append(row)
            return SimpleNamespace(data=[row])
        if self.action == "update":
            for row in matches:
                row.update(self.values)
        return SimpleNamespace(data=matches)


class FakeTable:
    def __init__(self):
        self.rows: list[dict] = []
        self.error: Exception | None = None


class FakeClient:
    def __init__(self):
        self.tables: dict[str, FakeTable] = {}

    def table(self, name):
        return FakeQuery(self.tables.setdefault(name, FakeTable()))


def test_insert_then_get_round_trip() -> None:
    client = FakeClient()
    store = SupabaseProfileStore(client)

    created = store.insert({"email": "a@b.c", "branch": "IT", "year": 1, "progress_status": "not_started"})
    fetched = store.get("a@b.c")

    assert created.id == 1
    assert fetched is not None
    assert fetched.branch == "IT"
    assert fetched.updated_at is not None


def test_get_unknown_email_returns_none() -> None:
    assert SupabaseProfileStore(FakeClient()).get("nobody@example.com") is None


def test_update_sets_updated_at_and_returns_row() -> None:
    client = FakeClient()
    store = SupabaseProfileStore(client)
    store.insert({"email": "a@b.c", "roadmap": None})

    updated = store.update("a@b.c", {"roadmap": "## Month 1"})

    assert updated is not None
    assert updated.roadmap == "## Month 1"
    assert "updated_at" in client.tables["user_profiles"].rows[0]


def test_update_unknown_email_returns_none() -> None:
    assert SupabaseProfileStore(FakeClient()).update("x@y.z", {"roadmap": "r"}) is None


def test_client_errors_become_store_errors() -> None:
    client = FakeClient()
    client.table("user_profiles").table.error = RuntimeError("JWT expired")
    store = SupabaseProfileStore(client)

    with pytest.raises(StoreError) as excinfo:
        store.get("a@b.c")
    assert excinfo.value.details == "JWT expired"


def test_unknown_columns_are_rejected() -> None:
    with pytest.raises(StoreError, match="unknown profile columns"):
        SupabaseProfileStore(FakeClient()).update("a@b.c", {"password": "x"})
