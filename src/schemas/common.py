# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model for records exchanged with the HR backend.

    The backend speaks camelCase JSON; attributes stay snake_case in Python.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class EntityRef(CamelModel):
    """A populated reference, e.g. ``{"_id": "...", "name": "..."}``."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(alias="_id")
    name: str | None = None


# Foreign keys arrive either as a bare id or as the populated document.
Ref = str | EntityRef


def resolve_id(ref: Ref | dict | None) -> str | None:
    """Return the id behind a reference, whatever shape it arrived in."""
    if ref is None:
        return None
    if isinstance(ref, str):
        return ref or None
    if isinstance(ref, EntityRef):
        return ref.id
    if isinstance(ref, dict):
        value = ref.get("_id", ref.get("id"))
        return str(value) if value else None
    # Numeric or ObjectId-like ids
    return str(ref)


def resolve_entity(ref: Ref | dict | None) -> EntityRef | None:
    """Return the populated entity, or None when only an id is known."""
    if isinstance(ref, EntityRef):
        return ref
    if isinstance(ref, dict) and resolve_id(ref):
        return EntityRef.model_validate(ref)
    return None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str

