from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from caesarapi.classical import caesar
from caesarapi.config import ConfigError, Settings, load_settings
from caesarapi.db import Database
from caesarapi.log import configure_logging
from caesarapi.repositories import api_keys

app = typer.Typer(help="Caesar Cipher API: HTTP service, key management and offline cipher tools.")

logger = logging.getLogger("caesarapi.cli")

SEED_KEY_NAME = "local-dev-key"


def _settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


def _check_shift(shift: int) -> int:
    if not 0 <= shift <= 25:
        raise typer.BadParameter("Shift must be between 0 and 25")
    return shift


# ----------------------------
# Service
# ----------------------------

@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (defaults to PORT)."),
    migrate: bool = typer.Option(False, "--migrate", help="Create missing tables before starting."),
):
    """Run the HTTP API under uvicorn."""
    import uvicorn

    from caesarapi.api import create_app

    settings = _settings()
    configure_logging(settings.log_level)

    database = Database(settings.database_url)
    if migrate:
        database.create_all()

    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info(
        "Server started",
        extra={"port": bind_port, "environment": settings.environment, "url": f"http://localhost:{bind_port}"},
    )
    uvicorn.run(create_app(settings, database), host=bind_host, port=bind_port, log_level=settings.log_level.lower())


@app.command()
def migrate():
    """Create the api_keys table (and any other missing tables)."""
    settings = _settings()
    configure_logging(settings.log_level)
    database = Database(settings.database_url)
    try:
        database.create_all()
    finally:
        database.dispose()
    typer.echo("Migrations completed successfully.")


@app.command()
def seed():
    """Create the local development API key if it does not exist yet."""
    settings = _settings()
    database = Database(settings.database_url)
    try:
        with database.session() as session:
            if api_keys.find_by_name(session, SEED_KEY_NAME) is not None:
                typer.echo(f"Seed key '{SEED_KEY_NAME}' already exists, skipping.")
                typer.echo("Use the token from the previous seed, or revoke it and re-run.")
                return
            token = api_keys.generate_token()
            api_keys.create_api_key(session, api_keys.hash_token(token), SEED_KEY_NAME)
    finally:
        database.dispose()

    typer.echo(f"Created API key '{SEED_KEY_NAME}'.")
    typer.echo(f"Token: {token}")
    typer.echo("")
    typer.echo(f"  curl -X POST {settings.public_url}/encrypt \\")
    typer.echo('    -H "Content-Type: application/json" \\')
    typer.echo(f'    -H "Authorization: Bearer {token}" \\')
    typer.echo("    -d '{\"text\": \"Hello, World!\", \"shift\": 3}'")
    typer.echo("")
    typer.echo("Save this token - it will not be displayed again!")


@app.command("create-key")
def create_key(name: str = typer.Argument(..., help="Label stored with the key.")):
    """Issue a new API key and print its token once."""
    settings = _settings()
    database = Database(settings.database_url)
    try:
        token = api_keys.generate_token()
        with database.session() as session:
            api_keys.create_api_key(session, api_keys.hash_token(token), name)
    finally:
        database.dispose()
    typer.echo(token)


@app.command("revoke-key")
def revoke_key(token: str = typer.Argument(..., help="Bearer token to deactivate.")):
    """Deactivate an API key."""
    settings = _settings()
    database = Database(settings.database_url)
    try:
        with database.session() as session:
            revoked = api_keys.deactivate_api_key(session, api_keys.hash_token(token))
    finally:
        database.dispose()
    if not revoked:
        typer.echo("No active key matches that token.", err=True)
        raise typer.Exit(code=1)
    typer.echo("Key revoked.")


@app.command()
def openapi(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout."),
):
    """Print (or write) the OpenAPI document."""
    from caesarapi.api import create_app

    # The document does not depend on the environment; no database is touched.
    settings = Settings(database_url="sqlite://")
    doc = json.dumps(create_app(settings).openapi(), indent=2)
    if output is None:
        typer.echo(doc)
    else:
        output.write_text(doc + "\n", encoding="utf-8")
        typer.echo(f"OpenAPI document written to {output}")


# ----------------------------
# Offline cipher tools
# ----------------------------

@app.command()
def encrypt(
    text: str = typer.Argument(..., help="Plaintext."),
    shift: int = typer.Option(..., "--shift", "-s", callback=_check_shift),
):
    typer.echo(caesar.encrypt(text, shift))


@app.command()
def decrypt(
    text: str = typer.Argument(..., help="Ciphertext."),
    shift: int = typer.Option(..., "--shift", "-s", callback=_check_shift),
):
    """Decrypt when you already know the shift."""
    typer.echo(caesar.decrypt(text, shift))


@app.command()
def encode(
    text: str = typer.Argument(...),
    shift: int = typer.Option(caesar.DEFAULT_ENCODE_SHIFT, "--shift", "-s", callback=_check_shift),
):
    typer.echo(caesar.encrypt(text, shift))


@app.command()
def rot13(text: str = typer.Argument(...)):
    typer.echo(caesar.rot13(text))


@app.command()
def bruteforce(text: str = typer.Argument(...)):
    """Show every shift 0..25."""
    for k, pt in caesar.brute_force(text).items():
        typer.echo(f"{int(k):2d}  {pt}")


@app.command("auto-decrypt")
def auto_decrypt(
    text: str = typer.Argument(...),
    as_json: bool = typer.Option(False, "--json", help="Print the API response body instead."),
):
    """Guess the shift by English frequency analysis."""
    result = caesar.auto_decrypt(text)
    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        return

    typer.echo(f"shift={result.shift}")
    typer.echo(result.decrypted)
    if result.candidates:
        typer.echo("\nToo close to call; top candidates:")
        for i, c in enumerate(result.candidates, start=1):
            typer.echo(f"#{i}  shift={c.shift:2d}  score={c.score:.2f}  {c.text}")


def main():
    app()


if __name__ == "__main__":
    main()
