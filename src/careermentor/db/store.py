from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from careermentor.db.base import utcnow
from careermentor.db.models import UserProfile
from careermentor.errors import StoreError
from careermentor.types import Profile


PROFILE_COLUMNS: frozenset[str] = frozenset(
    {"email", "branch", "year", "interest", "daily_time", "career_path", "roadmap", "progress_status"}
)


class ProfileStore(Protocol):
    """Single-row access to the ``user_profiles`` table, keyed by email."""

    def get(self, email: str) -> Profile | None: ...

    def insert(self, values: dict[str, Any]) -> Profile: ...

    def update(self, email: str, values: dict[str, Any]) -> Profile | None: ...


def checked_columns(values: dict[str, Any]) -> dict[str, Any]:
    unknown = set(values) - PROFILE_COLUMNS
    if unknown:
        raise StoreError(f"unknown profile columns: {sorted(unknown)}")
    return values


class SqlProfileStore:
    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def get(self, email: str) -> Profile | None:
        try:
            with self.session_factory() as session:
                row = session.scalar(select(UserProfile).where(UserProfile.email == email))
                return Profile.model_validate(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreError("profile lookup failed", details=str(exc)) from exc

    def insert(self, values: dict[str, Any]) -> Profile:
        row = UserProfile(**checked_columns(values))
        try:
            with self.session_factory() as session:
                session.add(row)
                session.commit()
                session.refresh(row)
                return Profile.model_validate(row)
        except SQLAlchemyError as exc:
            raise StoreError("profile insert failed", details=str(exc)) from exc

    def update(self, email: str, values: dict[str, Any]) -> Profile | None:
        values = checked_columns(values)
        try:
            with self.session_factory() as session:
                row = session.scalar(select(UserProfile).where(UserProfile.email == email))
                if row is None:
                    return None
                for key, value in values.items():
                    setattr(row, key, value)
                row.updated_at = utcnow()
                session.commit()
                session.refresh(row)
                return Profile.model_validate(row)
        except SQLAlchemyError as exc:
            raise StoreError("profile update failed", details=str(exc)) from exc
