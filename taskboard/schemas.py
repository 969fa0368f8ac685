from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UsernameRequest(BaseModel):
    """Body of /register, /signin and /admin. Extra keys (e.g. a password) are ignored."""

    username: str | None = None

    model_config = ConfigDict(extra="ignore")


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str


class TaskFields(BaseModel):
    """Writable task fields. Fields left out of a request body stay unset."""

    username: str | None = None
    title: str | None = None
    date: str | None = None
    time: str | None = None
    alarm: bool | None = None
    done: bool | None = None
    score: int | float | None = None

    # Numbers sent for text fields are stored in their string form.
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class TaskResponse(BaseModel):
    id: str = Field(alias="_id")
    username: str | None = None
    title: str | None = None
    date: str | None = None
    time: str | None = None
    alarm: bool | None = None
    done: bool | None = None
    score: int | float | None = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def convert_uuid_to_string(cls, v: Any) -> str:
        """Render the store-generated UUID as the opaque string clients see."""
        if isinstance(v, UUID):
            return str(v)
        return v

    @field_validator("score", mode="before")
    @classmethod
    def integral_score_as_int(cls, v: Any) -> Any:
        """The store keeps scores as floats; whole numbers go back out as ints."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v
