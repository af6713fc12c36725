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
from pydantic import BaseModel
from typing import Any, Sequence
from catalog.models.common import is_valid_object_id

INVALID_GAME_ID = "Invalid GameID format"

def is_blank(value: Any) -> bool:
    """
    Presence rule used by the required-field checks.

    None, False, "", 0 and NaN count as missing. Lists always count as
    present, even when empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value  # NaN != NaN
    return False

def check_required_fields(payload: BaseModel, fields: Sequence[str]) -> None:
    """Raises 400 naming the first blank field, in declared order."""
    for field in fields:
        if is_blank(getattr(payload, field, None)):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f'The field "{field}" is required'
            )

def validate_object_id(value: Any, detail: str = INVALID_GAME_ID) -> None:
    if not is_valid_object_id(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
