# app/admin/cli.py
import asyncio
import json
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator, List, NoReturn, Optional

import aiohttp
import typer

from app.admin.client import ApiError, GamesApiClient
from app.admin.form import FormError, GameForm
from app.admin.table import format_games_table
from app.config import settings
from app.schemas.game import GameType
from app.serializers.game import serialize_game

games_cli = typer.Typer(help="Manage the games catalogue through the API")

TypeOption = Annotated[Optional[GameType], typer.Option("--type", help="BaseGame or Expansion")]
NameOption = Annotated[Optional[str], typer.Option("--name")]
YearOption = Annotated[Optional[int], typer.Option("--year", min=1900, help="Release year")]
PublisherOption = Annotated[Optional[str], typer.Option("--publisher")]
MinPlayersOption = Annotated[Optional[int], typer.Option("--min-players", min=1, max=20)]
MaxPlayersOption = Annotated[Optional[int], typer.Option("--max-players", min=1, max=20)]
BaseGameOption = Annotated[Optional[str], typer.Option("--base-game", help="ID of the base game (expansions only)")]
StandaloneOption = Annotated[
    Optional[bool],
    typer.Option("--standalone/--not-standalone", help="Playable without the base game (expansions only)"),
]
ExpansionsOption = Annotated[
    Optional[List[str]],
    typer.Option("--expansion", help="Expansion ID, repeat for several (base games only)"),
]


@asynccontextmanager
async def open_client() -> AsyncIterator[GamesApiClient]:
    timeout = aiohttp.ClientTimeout(total=settings.API_TIMEOUT)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield GamesApiClient(session, settings.API_BASE_URL)


def fail(message: str, details: Optional[list] = None) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    for detail in details or []:
        typer.secho(f"  {'.'.join(detail['loc'])}: {detail['msg']}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def apply_options(
        form: GameForm,
        game_type: Optional[GameType],
        name: Optional[str],
        year: Optional[int],
        publisher: Optional[str],
        min_players: Optional[int],
        max_players: Optional[int],
        base_game: Optional[str],
        standalone: Optional[bool],
        expansions: Optional[List[str]],
):
    # type first, switching it clears the other variant's fields
    if game_type is not None:
        form.set_type(game_type)

    for field, value in (
            ("name", name),
            ("releaseYear", year),
            ("publisher", publisher),
            ("baseGame", base_game),
            ("standalone", standalone),
    ):
        if value is not None:
            form.set_field(field, value)

    if expansions:
        form.set_field("expansions", list(expansions))
    form.set_players(min_players, max_players)


async def _show_table(client: GamesApiClient):
    games = await client.fetch_games()
    typer.echo(format_games_table(games))


async def _list():
    async with open_client() as client:
        await _show_table(client)


async def _show(game_id: str):
    async with open_client() as client:
        game = await client.get_game(game_id)
    typer.echo(json.dumps(serialize_game(game), indent=2))


async def _create(payload: dict):
    async with open_client() as client:
        saved = await client.create_game(payload)
        typer.secho(f'Game "{saved.name}" has been created', fg=typer.colors.GREEN)
        await _show_table(client)


async def _edit(game_id: str, options: dict):
    async with open_client() as client:
        form = GameForm.edit(await client.get_game(game_id))
        apply_options(form, **options)
        typer.echo(form.title)
        saved = await client.update_game(game_id, form.to_payload())
        typer.secho(f'Game "{saved.name}" has been updated', fg=typer.colors.GREEN)
        await _show_table(client)


async def _delete(game_id: str):
    async with open_client() as client:
        await client.delete_game(game_id)
        typer.secho("Game has been deleted", fg=typer.colors.GREEN)
        await _show_table(client)


@games_cli.command("list")
def list_command():
    """List all games"""
    try:
        asyncio.run(_list())
    except ApiError as e:
        fail(e.message)


@games_cli.command("show")
def show_command(game_id: str):
    """Print a single game as JSON"""
    try:
        asyncio.run(_show(game_id))
    except ApiError as e:
        fail(e.message)


@games_cli.command("add")
def add_command(
        name: NameOption = None,
        game_type: TypeOption = None,
        year: YearOption = None,
        publisher: PublisherOption = None,
        min_players: MinPlayersOption = None,
        max_players: MaxPlayersOption = None,
        base_game: BaseGameOption = None,
        standalone: StandaloneOption = None,
        expansions: ExpansionsOption = None,
        game_id: Annotated[Optional[str], typer.Option("--id", help="Use this ID instead of a generated one")] = None,
):
    """Create a new game"""
    form = GameForm.new()
    try:
        apply_options(form, game_type, name, year, publisher, min_players, max_players,
                      base_game, standalone, expansions)
        payload = form.to_payload()
    except FormError as e:
        fail(e.message, e.details)

    if game_id:
        payload["id"] = game_id

    try:
        asyncio.run(_create(payload))
    except ApiError as e:
        fail(e.message)


@games_cli.command("edit")
def edit_command(
        game_id: str,
        name: NameOption = None,
        game_type: TypeOption = None,
        year: YearOption = None,
        publisher: PublisherOption = None,
        min_players: MinPlayersOption = None,
        max_players: MaxPlayersOption = None,
        base_game: BaseGameOption = None,
        standalone: StandaloneOption = None,
        expansions: ExpansionsOption = None,
):
    """Update an existing game, only the given options change"""
    options = dict(
        game_type=game_type,
        name=name,
        year=year,
        publisher=publisher,
        min_players=min_players,
        max_players=max_players,
        base_game=base_game,
        standalone=standalone,
        expansions=expansions,
    )
    try:
        asyncio.run(_edit(game_id, options))
    except FormError as e:
        fail(e.message, e.details)
    except ApiError as e:
        fail(e.message)


@games_cli.command("delete")
def delete_command(
        game_id: str,
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete a game"""
    if not yes and not typer.confirm("Are you sure you want to delete this game?"):
        raise typer.Abort()

    try:
        asyncio.run(_delete(game_id))
    except ApiError as e:
        fail(e.message)
