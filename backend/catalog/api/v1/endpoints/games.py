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

from fastapi import APIRouter, HTTPException, status, Body, Path, Depends
from typing import Optional
from catalog.models.game import GameCreate, GameUpdate, GameRead, GameList
from catalog.models.common import Message
from catalog.api.deps import get_database, get_pagination, internal_error
from catalog.core.database import MongoDatabase
from catalog.services.game_service import GameService
from catalog.services.pagination import Pagination
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

def get_game_service(database: MongoDatabase = Depends(get_database)) -> GameService:
    return GameService(database)

# --- Endpoint Implementations ---

@router.post(
    "/create",
    response_model=GameRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Game",
    description="Creates a new game. The title must be unique."
)
def create_game(
    game_in: Optional[GameCreate] = Body(None),
    game_service: GameService = Depends(get_game_service)
):
    """
    Creates a new game.

    - **title**, **releaseYear**, **platforms**, **genre**, **description**, **developer**: required.
    - **mainCharacters**, **enemies**, **locations**: optional.
    """
    try:
        return game_service.create(game_in=game_in or GameCreate())
    except HTTPException as e:
        logger.warning(f"HTTPException creating game: {e.status_code} - {e.detail}")
        raise e
    except Exception as e:
        logger.error(f"Error creating game: {e}", exc_info=True)
        raise internal_error()


@router.get(
    "",
    response_model=GameList,
    summary="List Games",
    description="Retrieves a paginated list of games with their main characters' names."
)
def list_games(
    pagination: Pagination = Depends(get_pagination),
    game_service: GameService = Depends(get_game_service)
):
    """
    - **page**: page number (default 1).
    - **limit**: results per page (default 10).
    """
    logger.info(f"Received request to list games (page={pagination.page}, limit={pagination.limit})")
    try:
        return game_service.get_all(pagination=pagination)
    except Exception as e:
        logger.error(f"Error trying to get games: {e}", exc_info=True)
        raise internal_error()


@router.get(
    "/{game_id}",
    response_model=GameRead,
    summary="Get Game",
    description="Retrieves a specific game by its ID."
)
def get_game(game_id: str = Path(...), game_service: GameService = Depends(get_game_service)):
    """
    Raises 400 for a malformed ID and 404 if the game is not found.
    """
    try:
        return game_service.get_by_id(game_id=game_id)
    except HTTPException as e:
        logger.warning(f"HTTPException getting game {game_id}: {e.status_code} - {e.detail}")
        raise e
    except Exception as e:
        logger.error(f"Error getting game by id {game_id}: {e}", exc_info=True)
        raise internal_error()


@router.put(
    "/update/{game_id}",
    response_model=GameRead,
    summary="Replace Game",
    description="Updates every field of an existing game. All fields, including mainCharacters, are required."
)
def update_game(
    game_id: str = Path(...),
    game_in: Optional[GameUpdate] = Body(None),
    game_service: GameService = Depends(get_game_service)
):
    try:
        return game_service.update(game_id=game_id, game_in=game_in or GameUpdate())
    except HTTPException as e:
        logger.warning(f"HTTPException updating game {game_id}: {e.status_code} - {e.detail}")
        raise e
    except Exception as e:
        logger.error(f"Error updating game {game_id}: {e}", exc_info=True)
        raise internal_error()


@router.patch(
    "/update/{game_id}",
    response_model=GameRead,
    summary="Update Game",
    description="Updates only the fields provided in the request body."
)
def patch_game(
    game_id: str = Path(...),
    game_in: Optional[GameUpdate] = Body(None),
    game_service: GameService = Depends(get_game_service)
):
    try:
        return game_service.patch(game_id=game_id, game_in=game_in or GameUpdate())
    except HTTPException as e:
        logger.warning(f"HTTPException patching game {game_id}: {e.status_code} - {e.detail}")
        raise e
    except Exception as e:
        logger.error(f"Error updating game {game_id}: {e}", exc_info=True)
        raise internal_error()


@router.delete(
    "/{game_id}",
    response_model=Message,
    status_code=status.HTTP_200_OK,
    summary="Delete Game",
    description="Deletes a game. Characters referencing it are left untouched."
)
def delete_game(game_id: str = Path(...), game_service: GameService = Depends(get_game_service)):
    try:
        game_service.delete(game_id=game_id)
        return Message(message="Game Deleted Correctly")
    except HTTPException as e:
        logger.warning(f"HTTPException deleting game {game_id}: {e.status_code} - {e.detail}")
        raise e
    except Exception as e:
        logger.error(f"Error trying to delete game {game_id}: {e}", exc_info=True)
        raise internal_error()
