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

from fastapi import APIRouter, HTTPException, status, Body, Depends
from typing import Optional
from catalog.models.character import CharacterCreate, CharacterRead, CharacterList
from catalog.api.deps import get_database, get_pagination, internal_error
from catalog.core.database import MongoDatabase
from catalog.services.character_service import CharacterService
from catalog.services.pagination import Pagination
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

def get_character_service(database: MongoDatabase = Depends(get_database)) -> CharacterService:
    return CharacterService(database)

# --- Endpoint Implementations ---

@router.post(
    "/create",
    response_model=CharacterRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Character",
    description="Creates a new character and returns it with the games it appears in."
)
def create_character(
    character_in: Optional[CharacterCreate] = Body(None),
    character_service: CharacterService = Depends(get_character_service)
):
    """
    Creates a new character.

    - **height** / **weight**: free text, so any unit of measurement can be used.
    - **games**: IDs of the games where the character appears; each must be a valid ID.
    """
    try:
        return character_service.create(character_in=character_in or CharacterCreate())
    except HTTPException as e:
        logger.warning(f"HTTPException creating character: {e.status_code} - {e.detail}")
        raise e
    except Exception as e:
        logger.error(f"Error creating character: {e}", exc_info=True)
        raise internal_error()


@router.get(
    "",
    response_model=CharacterList,
    summary="List Characters",
    description="Retrieves a paginated list of characters with the titles of their games."
)
def list_characters(
    pagination: Pagination = Depends(get_pagination),
    character_service: CharacterService = Depends(get_character_service)
):
    logger.info(f"Received request to list characters (page={pagination.page}, limit={pagination.limit})")
    try:
        return character_service.get_all(pagination=pagination)
    except Exception as e:
        logger.error(f"Error trying to get characters: {e}", exc_info=True)
        raise internal_error()
