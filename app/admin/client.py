# app/admin/client.py
import asyncio
import logging
from typing import Any, List, Optional
from urllib.parse import quote, urljoin

import aiohttp

from app.schemas.game import DeleteResult, Game
from app.serializers.game import deserialize_game, games_adapter

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class GamesApiClient:
    """Talks to the /v1/games endpoints of the games API"""

    def __init__(self, session: aiohttp.ClientSession, base_url: str):
        self.session = session
        self.base_url = base_url.rstrip("/") + "/"

    async def fetch_games(self) -> List[Game]:
        data = await self._request("GET", "v1/games")
        return games_adapter.validate_python(data)

    async def get_game(self, game_id: str) -> Game:
        data = await self._request("GET", f"v1/games/{quote(game_id, safe='')}")
        return deserialize_game(data)

    async def create_game(self, payload: dict) -> Game:
        data = await self._request("POST", "v1/games", json=payload)
        return deserialize_game(data)

    async def update_game(self, game_id: str, payload: dict) -> Game:
        data = await self._request("PUT", f"v1/games/{quote(game_id, safe='')}", json=payload)
        return deserialize_game(data)

    async def delete_game(self, game_id: str) -> DeleteResult:
        data = await self._request("DELETE", f"v1/games/{quote(game_id, safe='')}")
        return DeleteResult.model_validate(data)

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        url = urljoin(self.base_url, path)
        try:
            async with self.session.request(method, url, json=json) as response:
                if response.status >= 400:
                    raise ApiError(await self._error_message(response), response.status)
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error calling {method} {url}: {e!r}")
            raise ApiError("Failed to reach the games API") from e

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"API request failed with status: {response.status}"
