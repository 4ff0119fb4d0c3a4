# app/database/seed.py
import asyncio
import json
import logging
from pathlib import Path
from typing import List, Union

import aiohttp

from app.schemas.game import Game
from app.serializers.game import games_adapter

logger = logging.getLogger(__name__)


def load_fixture(path: Union[str, Path]) -> List[Game]:
    """Read and validate a JSON array of games. Every entry must carry its id."""
    logger.info(f"Reading games data from: {path}")
    with open(path, encoding="utf-8") as fixture:
        data = json.load(fixture)

    games = games_adapter.validate_python(data)
    logger.info(f"Found {len(games)} games in {Path(path).name}")
    return games


async def wait_for_emulator(host: str, attempts: int = 30, interval: float = 2.0) -> bool:
    """Poll the Firestore emulator until it answers or the attempts run out"""
    url = f"http://{host}/"
    timeout = aiohttp.ClientTimeout(total=interval)

    async with aiohttp.ClientSession(timeout=timeout) as session:
        for attempt in range(1, attempts + 1):
            logger.info(f"Checking if emulator is ready (attempt {attempt}/{attempts})...")
            try:
                async with session.get(url) as response:
                    if response.status == 200:
                        logger.info("Firestore emulator is ready")
                        return True
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.debug(f"Emulator not reachable yet: {e!r}")

            if attempt < attempts:
                await asyncio.sleep(interval)

    logger.error("Timeout waiting for the Firestore emulator")
    return False
