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

import pytest
from pathlib import Path
from unittest.mock import MagicMock
import sys

# Add the backend root to the Python path to allow imports like `from catalog.services...`
project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

from catalog.core.database import MongoDatabase


def make_cursor(documents):
    """
    Mimics a pymongo cursor for `find().skip(n).limit(m)` chains.
    The slicing is applied so tests can check the page that comes back.
    """
    cursor = MagicMock()
    state = {"skip": 0, "limit": None}

    def _skip(n):
        state["skip"] = n
        return cursor

    def _limit(n):
        state["limit"] = n
        return cursor

    def _iter():
        end = None if state["limit"] is None else state["skip"] + state["limit"]
        return iter(documents[state["skip"]:end])

    cursor.skip.side_effect = _skip
    cursor.limit.side_effect = _limit
    cursor.__iter__.side_effect = _iter
    return cursor


# Fixture providing a MongoDatabase double whose collections are MagicMocks
@pytest.fixture(scope="function")
def mock_database() -> MagicMock:
    database = MagicMock(spec=MongoDatabase)
    database.games = MagicMock(name="games")
    database.characters = MagicMock(name="characters")
    database.is_connected = True
    return database


@pytest.fixture
def cursor_factory():
    return make_cursor
