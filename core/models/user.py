# core/models/user.py

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A registered library user. Immutable once created."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    name: str
    id: int
