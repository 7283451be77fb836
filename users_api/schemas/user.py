"""Pydantic schemas for the users resource."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    """User fields as sent by the client.

    Values are left untyped so that shape errors surface as the per-field
    error codes from ``core.validation`` instead of a generic body error.
    """

    model_config = ConfigDict(extra="ignore")

    username: Any = None
    email: Any = None
    password: Any = None

    def supplied_fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent, explicit nulls included."""
        return self.model_dump(exclude_unset=True)


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    password: str

    model_config = ConfigDict(from_attributes=True)
