from careermentor.db.init import init_database


def test_insert_update_and_get() -> None:
    store = init_database("sqlite://")

    created = store.insert({"email": "a@b.c", "branch": "CSE", "year": 2, "progress_status": "not_started"})
    assert created.id is not None
    assert created.roadmap is None

    updated = store.update("a@b.c", {"roadmap": "## Month 1", "progress_status": "in_progress"})
    assert updated is not None
    assert updated.roadmap == "## Month 1"
    assert updated.updated_at >= created.updated_at

    assert store.get("a@b.c").progress_status == "in_progress"
    assert store.get("A@B.C") is None


def test_update_missing_row_returns_none() -> None:
    store = init_database("sqlite://")
    assert store.update("ghost@example.com", {"roadmap": "x"}) is None


def test_file_database_directory_is_created(tmp_path) -> None:
    db_path = tmp_path / "nested" / "career.db"
    store = init_database(f"sqlite:///{db_path}")
    store.insert({"email": "a@b.c"})

    assert db_path.exists()
