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

from fastapi import HTTPException, Query, Request, status
from typing import Optional
from catalog.core.config import settings
from catalog.core.database import MongoDatabase
from catalog.services.pagination import Pagination, parse_pagination

INTERNAL_ERROR = "Internal Server Error"

def internal_error() -> HTTPException:
    # Storage details (duplicate keys, connection errors) stay in the logs
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)

# --- Helper Dependencies ---

def get_database(request: Request) -> MongoDatabase:
    """
    Returns the database opened by the application lifespan.
    """
    database = getattr(request.app.state, "database", None)
    if database is None or not database.is_connected:
        raise RuntimeError("Database connection is not initialized")
    return database

def get_pagination(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Number of results per page"),
) -> Pagination:
    # Raw strings so a bad value becomes our 400, not a framework validation error
    return parse_pagination(page, limit, settings.DEFAULT_PAGE, settings.DEFAULT_PAGE_LIMIT)
