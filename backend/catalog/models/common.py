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

from pydantic import BaseModel, ConfigDict, Field
from bson import ObjectId
from bson.errors import InvalidId
from typing import Any, Iterable, List

# Records are keyed by MongoDB ObjectIds. They travel over the wire as their
# 24 character hex string and are exposed under the "_id" key.

def is_valid_object_id(value: Any) -> bool:
    """True only for a 24 character hex string."""
    return isinstance(value, str) and ObjectId.is_valid(value)

def to_object_ids(values: Iterable[Any]) -> List[ObjectId]:
    # ObjectId(None) would mint a new id, so only strings are cast
    object_ids = []
    for value in values:
        if not isinstance(value, str):
            raise InvalidId(f"{value!r} is not a valid ObjectId, it must be a 24-character hex string")
        object_ids.append(ObjectId(value))
    return object_ids

def serialize_document(value: Any) -> Any:
    """Recursively converts ObjectIds in a stored document to strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value

class IDModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Identifier assigned by the database")

class Message(BaseModel):
    """ A simple message response model """
    message: str

class PageInfo(BaseModel):
    page: int
    limit: int
