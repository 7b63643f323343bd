from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn

from careermentor.api.app import create_app
from careermentor.config import get_settings
from careermentor.core.normalizer import normalize
from careermentor.db.init import build_store, init_database
from careermentor.errors import CareerMentorError
from careermentor.logging_config import configure_logging

app = typer.Typer(help="Career Mentor CLI")
profile_app = typer.Typer(help="Inspect student profiles")

app.add_typer(profile_app, name="profile")


@app.command("init")
def init_cmd(database_url: str = typer.Option("", "--database-url")) -> None:
    """Create the user_profiles table in the SQL store."""
    configure_logging()
    url = database_url or get_settings().database_url
    init_database(url)
    typer.echo(json.dumps({"ok": True, "database_url": url}, indent=2))


@app.command("serve")
def serve_cmd(
    host: str = typer.Option("", "--host"),
    port: int = typer.Option(0, "--port"),
) -> None:
    configure_logging()
    settings = get_settings()
    uvicorn.run(create_app(settings), host=host or settings.app_host, port=port or settings.port)


@profile_app.command("show")
def profile_show(email: str = typer.Argument(...)) -> None:
    configure_logging()
    store = build_store(get_settings())
    try:
        profile = store.get(email)
    except CareerMentorError as exc:
        typer.echo(json.dumps({"ok": False, "error": exc.message, "details": exc.details}, indent=2))
        raise typer.Exit(code=1) from exc

    if profile is None:
        typer.echo(json.dumps({"ok": False, "error": "Profile not found"}, indent=2))
        raise typer.Exit(code=1)
    typer.echo(json.dumps(profile.public_dict(), indent=2))


@app.command("normalize")
def normalize_cmd(file: Path = typer.Argument(..., exists=True, readable=True)) -> None:
    """Print the normalized triple for a saved webhook response body."""
    try:
        normalized = normalize(file.read_bytes())
    except CareerMentorError as exc:
        typer.echo(json.dumps({"ok": False, "error": exc.message}, indent=2))
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(normalized.model_dump(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
