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

from fastapi import HTTPException, status
from bson import ObjectId
from pymongo import ReturnDocument
from typing import Any, Dict
import logging

from catalog.core.database import MongoDatabase, populate
from catalog.models.common import serialize_document, to_object_ids
from catalog.models.game import GameCreate, GameUpdate, GameRead, GameListItem, GameList
from catalog.services.pagination import Pagination
from catalog.services.validation import check_required_fields, is_blank, validate_object_id

logger = logging.getLogger(__name__)

GAME_NOT_FOUND = "GameID Not Found"

# Checked in this order; the first blank one is reported
CREATE_REQUIRED_FIELDS = (
    "title",
    "releaseYear",
    "platforms",
    "genre",
    "description",
    "developer",
)
# A full update also requires the main characters
UPDATE_REQUIRED_FIELDS = CREATE_REQUIRED_FIELDS + ("mainCharacters",)
PATCH_FIELDS = UPDATE_REQUIRED_FIELDS


class GameService:

    def __init__(self, database: MongoDatabase):
        self.database = database

    def _not_found(self) -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GAME_NOT_FOUND)

    def _field_values(self, game_in: GameCreate, fields) -> Dict[str, Any]:
        values = {field: getattr(game_in, field) for field in fields}
        # mainCharacters IDs are not format-checked up front; a malformed one
        # fails the ObjectId conversion like any other storage error
        if values.get("mainCharacters") is not None:
            values["mainCharacters"] = to_object_ids(values["mainCharacters"])
        return values

    def create(self, game_in: GameCreate) -> GameRead:
        """Creates a new game. Duplicate titles are rejected by the unique index."""
        check_required_fields(game_in, CREATE_REQUIRED_FIELDS)

        document = self._field_values(game_in, CREATE_REQUIRED_FIELDS)
        document["mainCharacters"] = to_object_ids(game_in.mainCharacters or [])
        document["enemies"] = game_in.enemies or []
        document["locations"] = game_in.locations or []

        result = self.database.games.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Created game {result.inserted_id} '{game_in.title}'")
        return GameRead.model_validate(serialize_document(document))

    def get_all(self, pagination: Pagination) -> GameList:
        """Lists one page of games with main characters resolved to their names."""
        total_games = self.database.games.count_documents({})
        documents = list(
            self.database.games.find().skip(pagination.skip).limit(pagination.limit)
        )
        populate(documents, "mainCharacters", self.database.characters, {"name": 1})

        return GameList(
            page=pagination.page,
            limit=pagination.limit,
            totalGames=total_games,
            games=[GameListItem.model_validate(serialize_document(doc)) for doc in documents]
        )

    def get_by_id(self, game_id: str) -> GameRead:
        validate_object_id(game_id)
        document = self.database.games.find_one({"_id": ObjectId(game_id)})
        if document is None:
            raise self._not_found()
        return GameRead.model_validate(serialize_document(document))

    def update(self, game_id: str, game_in: GameUpdate) -> GameRead:
        """Replaces every updatable field of a game."""
        validate_object_id(game_id)
        check_required_fields(game_in, UPDATE_REQUIRED_FIELDS)

        document = self.database.games.find_one_and_update(
            {"_id": ObjectId(game_id)},
            {"$set": self._field_values(game_in, UPDATE_REQUIRED_FIELDS)},
            return_document=ReturnDocument.AFTER
        )
        if document is None:
            raise self._not_found()
        logger.info(f"Updated game {game_id}")
        return GameRead.model_validate(serialize_document(document))

    def patch(self, game_id: str, game_in: GameUpdate) -> GameRead:
        """Updates only the fields present (and non-blank) in the request."""
        validate_object_id(game_id)

        present = [field for field in PATCH_FIELDS if not is_blank(getattr(game_in, field))]
        if not present:
            # Nothing to change, MongoDB rejects an empty $set
            logger.debug(f"Patch for game {game_id} has no fields, returning it unchanged")
            return self.get_by_id(game_id)

        document = self.database.games.find_one_and_update(
            {"_id": ObjectId(game_id)},
            {"$set": self._field_values(game_in, present)},
            return_document=ReturnDocument.AFTER
        )
        if document is None:
            raise self._not_found()
        logger.info(f"Patched game {game_id} fields: {present}")
        return GameRead.model_validate(serialize_document(document))

    def delete(self, game_id: str) -> None:
        validate_object_id(game_id)
        document = self.database.games.find_one_and_delete({"_id": ObjectId(game_id)})
        if document is None:
            raise self._not_found()
        logger.info(f"Deleted game {game_id}")
