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

from dataclasses import dataclass
from typing import Optional
from fastapi import HTTPException, status

INVALID_PAGINATION = "Page and limit must be positive numbers"

@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

def _parse_number(raw: Optional[str], default: int) -> int:
    # Absent, empty or non-numeric values fall back to the default
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        try:
            return int(float(raw))
        except (ValueError, OverflowError):
            return default

def parse_pagination(page: Optional[str], limit: Optional[str], default_page: int = 1, default_limit: int = 10) -> Pagination:
    """
    Parses the raw ``page`` and ``limit`` query values.
    Raises 400 when either resolves to a number below 1.
    """
    parsed_page = _parse_number(page, default_page)
    parsed_limit = _parse_number(limit, default_limit)
    if parsed_page < 1 or parsed_limit < 1:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PAGINATION)
    return Pagination(page=parsed_page, limit=parsed_limit)
