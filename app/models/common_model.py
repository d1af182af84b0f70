# /app/models/common_model.py

# --- Core Imports ---
from pydantic import BaseModel, ConfigDict, StringConstraints
from typing import Annotated

# A string that is stripped and must not end up empty.
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# --- Reference Models ---
# The compact shapes used when one resource embeds a reference to another.

class AccountRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    firstName: str
    lastName: str


class ClassroomRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class SubjectRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    code: str


class MessageResponse(BaseModel):
    """Plain acknowledgement body, e.g. after a delete."""
    message: str
