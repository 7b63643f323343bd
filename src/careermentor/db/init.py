from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.engine import make_url

from careermentor.config import Settings
from careermentor.db import models  # noqa: F401
from careermentor.db.base import Base
from careermentor.db.session import build_engine, build_session_factory
from careermentor.db.store import ProfileStore, SqlProfileStore
from careermentor.errors import ConfigurationError

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def init_database(database_url: str) -> SqlProfileStore:
    ensure_sqlite_directory(database_url)
    engine = build_engine(database_url)
    Base.metadata.create_all(bind=engine)
    return SqlProfileStore(build_session_factory(engine))


def build_store(settings: Settings) -> ProfileStore:
    if settings.store_backend == "sql":
        logger.info("Using SQL profile store at %s", make_url(settings.database_url).render_as_string())
        return init_database(settings.database_url)

    if not settings.supabase_configured:
        raise ConfigurationError(
            "Missing Supabase environment variables: set SUPABASE_URL and SUPABASE_ANON_KEY"
        )

    from careermentor.db.supabase_store import SupabaseProfileStore

    return SupabaseProfileStore.connect(
        settings.supabase_url,
        settings.supabase_anon_key,
        table=settings.supabase_table,
    )
