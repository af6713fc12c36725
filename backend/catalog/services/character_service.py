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
import logging

from catalog.core.database import MongoDatabase, populate
from catalog.models.common import is_valid_object_id, serialize_document, to_object_ids
from catalog.models.character import CharacterCreate, CharacterRead, CharacterListItem, CharacterList
from catalog.services.pagination import Pagination
from catalog.services.validation import check_required_fields

logger = logging.getLogger(__name__)

INVALID_GAME_REFERENCES = "Invalid game ID(s) in the 'games' field"

CREATE_REQUIRED_FIELDS = (
    "name",
    "description",
    "age",
    "nationality",
    "height",
    "weight",
    "occupations",
    "games",
)


class CharacterService:

    def __init__(self, database: MongoDatabase):
        self.database = database

    def create(self, character_in: CharacterCreate) -> CharacterRead:
        """Creates a character and returns it with its games fully populated."""
        check_required_fields(character_in, CREATE_REQUIRED_FIELDS)

        # Referenced games need not exist, but their IDs must be well formed
        if not all(is_valid_object_id(game_id) for game_id in character_in.games):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_GAME_REFERENCES)

        document = {field: getattr(character_in, field) for field in CREATE_REQUIRED_FIELDS}
        document["games"] = to_object_ids(character_in.games)
        document["organizations"] = character_in.organizations or []

        result = self.database.characters.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Created character {result.inserted_id} '{character_in.name}'")

        populate([document], "games", self.database.games)
        return CharacterRead.model_validate(serialize_document(document))

    def get_all(self, pagination: Pagination) -> CharacterList:
        """Lists one page of characters with games resolved to their titles."""
        total_characters = self.database.characters.count_documents({})
        documents = list(
            self.database.characters.find().skip(pagination.skip).limit(pagination.limit)
        )
        populate(documents, "games", self.database.games, {"title": 1})

        return CharacterList(
            page=pagination.page,
            limit=pagination.limit,
            totalCharacters=total_characters,
            characters=[CharacterListItem.model_validate(serialize_document(doc)) for doc in documents]
        )
