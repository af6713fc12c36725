# Copyright 2025 Antimortine
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from catalog.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class MongoDatabase:
    """
    Owns the single MongoClient used by the application.

    Opened once in the application lifespan, held on ``app.state`` and handed
    to the services through a FastAPI dependency.
    """

    def __init__(self, config: Settings = default_settings):
        self._config = config
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def connect(self) -> None:
        logger.info(f"Connecting to MongoDB database '{self._config.MONGO_DB_NAME}'...")
        client = MongoClient(
            self._config.MONGO_URI,
            serverSelectionTimeoutMS=self._config.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        )
        try:
            # MongoClient connects lazily, ping so a bad URI fails at startup
            client.admin.command("ping")
        except Exception:
            client.close()
            raise
        self._client = client
        self._db = client[self._config.MONGO_DB_NAME]
        self.ensure_indexes()
        logger.info("Database working correctly!")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed.")
        self._client = None
        self._db = None

    def ensure_indexes(self) -> None:
        # Game titles are unique across the collection
        self.games.create_index([("title", ASCENDING)], unique=True)
        logger.debug("Ensured unique index on games.title")

    def _collection(self, name: str) -> Collection:
        if self._db is None:
            raise RuntimeError("Database is not connected")
        return self._db[name]

    @property
    def games(self) -> Collection:
        return self._collection(self._config.GAMES_COLLECTION)

    @property
    def characters(self) -> Collection:
        return self._collection(self._config.CHARACTERS_COLLECTION)


def populate(
    documents: List[Dict[str, Any]],
    field: str,
    collection: Collection,
    projection: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Resolves the reference list stored under ``field`` of each document.

    All referenced ids are fetched with a single ``$in`` query. Each list is
    replaced in place by the referenced documents (restricted to
    ``projection`` when given), in stored order. References that no longer
    resolve are dropped.
    """
    ids = []
    for document in documents:
        for ref in document.get(field) or []:
            if ref not in ids:
                ids.append(ref)

    if not ids:
        for document in documents:
            document[field] = []
        return documents

    found = {
        ref_doc["_id"]: ref_doc
        for ref_doc in collection.find({"_id": {"$in": ids}}, projection)
    }
    for document in documents:
        refs = document.get(field) or []
        document[field] = [found[ref] for ref in refs if ref in found]
        if len(document[field]) != len(refs):
            logger.debug(f"Dropped {len(refs) - len(document[field])} dangling '{field}' reference(s) on {document.get('_id')}")
    return documents
