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
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch
from fastapi import status
from pymongo.errors import ServerSelectionTimeoutError

from catalog.main import app


def test_read_root():
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Welcome to Game Catalog API!"}

def test_unknown_route_uses_message_body():
    client = TestClient(app)
    response = client.get("/api/v1/consoles")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Not Found"}

@patch('catalog.main.MongoDatabase')
def test_lifespan_opens_and_closes_database(mock_database_cls: MagicMock):
    mock_database = mock_database_cls.return_value

    with TestClient(app) as client:
        mock_database.connect.assert_called_once()
        assert app.state.database is mock_database
        assert client.get("/").status_code == status.HTTP_200_OK

    mock_database.close.assert_called_once()
    assert app.state.database is None

@patch('catalog.main.MongoDatabase')
def test_lifespan_aborts_when_database_unreachable(mock_database_cls: MagicMock):
    mock_database_cls.return_value.connect.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(ServerSelectionTimeoutError):
        with TestClient(app):
            pass

def test_request_without_database_is_generic_500():
    app.state.database = None
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/v1/games")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Internal Server Error"}
