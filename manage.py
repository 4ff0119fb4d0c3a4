# manage.py
import asyncio
import logging
from typing import Optional

import typer
import uvicorn
from google.auth.exceptions import GoogleAuthError

from app.admin.cli import games_cli
from app.config import settings
from app.crud.game import seed_games
from app.database.seed import load_fixture, wait_for_emulator
from app.exceptions import AppError
from app.main import build_store

# Create CLI app for server, seeding and catalogue management
cli = typer.Typer()
cli.add_typer(games_cli, name="games")

logger = logging.getLogger("manage")


@cli.callback()
def main(log_level: str = typer.Option(settings.LOG_LEVEL, help="Logging level")):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def runserver(
        host: str = settings.HOST,
        port: int = settings.PORT,
        reload: bool = settings.RELOAD,
):
    """Run the FastAPI development server"""
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload
    )


@cli.command()
def seed(
        file: str = typer.Option(settings.SEED_FILE, help="JSON fixture with an array of games"),
        wait: bool = typer.Option(False, help="Wait for the Firestore emulator before seeding"),
        attempts: int = typer.Option(30, help="How many times to poll the emulator"),
        interval: float = typer.Option(2.0, help="Seconds between emulator polls"),
        emulator_host: Optional[str] = typer.Option(None, help="Overrides FIRESTORE_EMULATOR_HOST"),
):
    """Load the games fixture into the games collection, overwriting documents with the same ID"""
    host = emulator_host or settings.FIRESTORE_EMULATOR_HOST
    if emulator_host:
        settings.FIRESTORE_EMULATOR_HOST = emulator_host

    if wait:
        if not host:
            typer.echo("--wait needs FIRESTORE_EMULATOR_HOST or --emulator-host")
            raise typer.Exit(code=1)
        if not asyncio.run(wait_for_emulator(host, attempts=attempts, interval=interval)):
            raise typer.Exit(code=1)

    try:
        games = load_fixture(file)
        count = seed_games(build_store(settings), games)
    except (OSError, ValueError, AppError, GoogleAuthError) as e:
        logger.error(f"Error seeding games: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Successfully seeded {count} games")
    typer.echo(f"Seeded {count} games")


if __name__ == "__main__":
    cli()
