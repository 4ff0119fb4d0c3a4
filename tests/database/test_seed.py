"""Unit tests for app/database/seed.py"""

import asyncio
import json
import socket
from pathlib import Path

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer
from pydantic import ValidationError

from app.crud.game import list_games, seed_games
from app.database.memory import InMemoryGameStore
from app.database.seed import load_fixture, wait_for_emulator
from app.serializers.game import serialize_game

FIXTURE_PATH = Path(__file__).resolve().parents[2] / "games.json"


def test_shipped_fixture_is_valid() -> None:
    games = load_fixture(FIXTURE_PATH)
    assert len(games) == len(json.loads(FIXTURE_PATH.read_text(encoding="utf-8")))
    assert len({game.id for game in games}) == len(games)


def test_fixture_round_trip(store: InMemoryGameStore) -> None:
    """Seeding the fixture then listing gives back exactly the fixture entries."""
    raw = json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))
    seed_games(store, load_fixture(FIXTURE_PATH))

    listed = sorted((serialize_game(game) for game in list_games(store)), key=lambda game: game["id"])
    assert listed == sorted(raw, key=lambda game: game["id"])


def test_fixture_entries_need_an_id(tmp_path: Path) -> None:
    fixture = tmp_path / "games.json"
    fixture.write_text(
        json.dumps([{"name": "Azul", "type": "BaseGame", "players": {"min": 2, "max": 4}}]),
        encoding="utf-8",
    )
    with pytest.raises(ValidationError):
        load_fixture(fixture)


def test_missing_fixture(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_fixture(tmp_path / "missing.json")


def test_wait_for_running_emulator() -> None:
    async def ok(request: web.Request) -> web.Response:
        return web.Response(text="Ok")

    async def scenario() -> bool:
        emulator = web.Application()
        emulator.router.add_get("/", ok)
        async with TestServer(emulator) as server:
            return await wait_for_emulator(f"{server.host}:{server.port}", attempts=3, interval=0.1)

    assert asyncio.run(scenario()) is True


def test_wait_gives_up() -> None:
    # grab a free port and release it so nothing is listening there
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

    ready = asyncio.run(wait_for_emulator(f"127.0.0.1:{port}", attempts=2, interval=0.05))
    assert ready is False
