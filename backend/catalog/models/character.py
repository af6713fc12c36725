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
from .game import GameRead

# Properties accepted when creating a character
class CharacterCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = Field(None, description="Description/history of the character")
    age: Optional[int] = None
    nationality: Optional[str] = None
    # Height and weight are free text so any unit can be used ("180 cm", "6 ft")
    height: Optional[str] = None
    weight: Optional[str] = None
    occupations: Optional[List[str]] = None
    games: Optional[List[Any]] = Field(None, description="IDs of the games the character appears in")
    organizations: Optional[List[str]] = None

class CharacterBase(BaseModel):
    name: str
    description: str
    age: int
    nationality: str
    height: str
    weight: str
    occupations: List[str] = []
    organizations: List[str] = []

# Returned after creation, with every referenced game fully populated
class CharacterRead(IDModel, CharacterBase):
    games: List[GameRead] = []

# A game reference resolved to its title only
class GameTitle(IDModel):
    title: str

class CharacterListItem(IDModel, CharacterBase):
    games: List[GameTitle] = []

# Wrapper for list response
class CharacterList(PageInfo):
    totalCharacters: int
    characters: List[CharacterListItem] = []
