"""
Supabase-backed profile store.

Talks to the hosted ``user_profiles`` table through the PostgREST query
builder exposed by the Supabase client.
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, create_client

from careermentor.db.base import utcnow
from careermentor.db.store import checked_columns
from careermentor.errors import StoreError
from careermentor.types import Profile

logger = logging.getLogger(__name__)


class SupabaseProfileStore:
    def __init__(self, client: Client, table: str = "user_profiles"):
        self.client = client
        self.table = table

    @classmethod
    def connect(cls, url: str, key: str, table: str = "user_profiles") -> SupabaseProfileStore:
        client = create_client(url, key)
        logger.info("Supabase client initialized for table %s", table)
        return cls(client, table)

    def get(self, email: str) -> Profile | None:
        rows = self._execute(
            "lookup",
            lambda: self.client.table(self.table).select("*").eq("email", email).limit(1).execute(),
        )
        return Profile.model_validate(rows[0]) if rows else None

    def insert(self, values: dict[str, Any]) -> Profile:
        now = utcnow().isoformat()
        row = {**checked_columns(values), "created_at": now, "updated_at": now}
        rows = self._execute("insert", lambda: self.client.table(self.table).insert(row).execute())
        if not rows:
            raise StoreError("profile insert returned no row")
        return Profile.model_validate(rows[0])

    def update(self, email: str, values: dict[str, Any]) -> Profile | None:
        row = {**checked_columns(values), "updated_at": utcnow().isoformat()}
        rows = self._execute(
            "update",
            lambda: self.client.table(self.table).update(row).eq("email", email).execute(),
        )
        return Profile.model_validate(rows[0]) if rows else None

    def _execute(self, operation: str, query) -> list[dict[str, Any]]:
        try:
            response = query()
        except Exception as exc:
            logger.error("Supabase %s on %s failed: %s", operation, self.table, exc)
            raise StoreError(f"profile {operation} failed", details=str(exc)) from exc
        return list(getattr(response, "data", None) or [])
