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

from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv() # Loads variables from .env file

class Settings(BaseSettings):
    PROJECT_NAME: str = "Game Catalog API"
    API_V1_STR: str = "/api/v1"

    # --- MongoDB ---
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "game_catalog"
    # Fail fast at startup instead of hanging on an unreachable server
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    GAMES_COLLECTION: str = "games"
    CHARACTERS_COLLECTION: str = "characters"

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    LOG_LEVEL: str = "INFO"

    # --- Pagination defaults for list endpoints ---
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_LIMIT: int = 10


settings = Settings()
