# app/database/firestore.py
import logging
import os
from itertools import islice
from typing import Iterable, Optional, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore

from app.config import Settings
from app.exceptions import StoreError

logger = logging.getLogger(__name__)

# Firestore rejects write batches with more operations than this
MAX_BATCH_SIZE = 500


def create_firestore_client(settings: Settings) -> firestore.Client:
    if settings.FIRESTORE_EMULATOR_HOST:
        # the client library only picks the emulator up from the environment
        os.environ["FIRESTORE_EMULATOR_HOST"] = settings.FIRESTORE_EMULATOR_HOST
        logger.info(f"Using Firestore emulator at {settings.FIRESTORE_EMULATOR_HOST}")
    return firestore.Client(project=settings.FIRESTORE_PROJECT_ID)


class FirestoreGameStore:
    """GameStore backed by a single Firestore collection"""

    def __init__(self, client: firestore.Client, collection: str = "games"):
        self.client = client
        self.collection = client.collection(collection)

    def new_id(self) -> str:
        # ids are generated client side, no round trip
        return self.collection.document().id

    def get_all(self) -> list[dict]:
        try:
            return [snapshot.to_dict() for snapshot in self.collection.stream()]
        except GoogleAPIError as e:
            raise StoreError(str(e)) from e

    def get(self, game_id: str) -> Optional[dict]:
        try:
            snapshot = self.collection.document(game_id).get()
        except GoogleAPIError as e:
            raise StoreError(str(e)) from e
        if not snapshot.exists:
            return None
        return snapshot.to_dict()

    def set(self, game_id: str, document: dict) -> None:
        try:
            self.collection.document(game_id).set(document)
        except GoogleAPIError as e:
            raise StoreError(str(e)) from e

    def update(self, game_id: str, fields: dict) -> None:
        try:
            self.collection.document(game_id).update(fields)
        except GoogleAPIError as e:
            raise StoreError(str(e)) from e

    def delete(self, game_id: str) -> None:
        try:
            self.collection.document(game_id).delete()
        except GoogleAPIError as e:
            raise StoreError(str(e)) from e

    def set_many(self, documents: Iterable[Tuple[str, dict]]) -> int:
        count = 0
        items = iter(documents)
        try:
            while chunk := list(islice(items, MAX_BATCH_SIZE)):
                batch = self.client.batch()
                for game_id, document in chunk:
                    batch.set(self.collection.document(game_id), document)
                batch.commit()
                count += len(chunk)
                logger.debug(f"Committed batch of {len(chunk)} games")
        except GoogleAPIError as e:
            raise StoreError(str(e)) from e
        return count
