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

from pydantic import BaseModel, Field
from typing import Any, List, Optional
from .common import IDModel, PageInfo

# Properties accepted when creating or updating a game.
# Every field is optional here: presence is checked by the service layer
# so that a missing field is reported as a 400 naming that field.
class GameCreate(BaseModel):
    title: Optional[str] = Field(None, description="Title of the game, unique across all games")
    releaseYear: Optional[int] = Field(None, description="Year the game was released")
    platforms: Optional[List[str]] = Field(None, description="Platforms the game was released on")
    genre: Optional[str] = None
    description: Optional[str] = None
    developer: Optional[str] = None
    mainCharacters: Optional[List[Any]] = Field(None, description="IDs of the main characters")
    enemies: Optional[List[str]] = None
    locations: Optional[List[str]] = None

# PUT and PATCH take the same body; they differ in which fields are required
GameUpdate = GameCreate

class GameBase(BaseModel):
    title: str
    releaseYear: int
    platforms: List[str] = []
    genre: str
    description: str
    developer: str
    enemies: List[str] = []
    locations: List[str] = []

# Properties returned when reading a single game (references left as IDs)
class GameRead(IDModel, GameBase):
    mainCharacters: List[str] = []

# A character reference resolved to its name only
class CharacterName(IDModel):
    name: str

# Game as shown in the paginated list, main characters populated
class GameListItem(IDModel, GameBase):
    mainCharacters: List[CharacterName] = []

# Wrapper for list response
class GameList(PageInfo):
    totalGames: int
    games: List[GameListItem] = []
