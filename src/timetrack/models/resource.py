"""Resource model: base record for everything kept in the store."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class Resource(BaseModel):
    """Persisted record identified by ``(type, id)``.

    Fields beyond ``type`` and ``id`` are opaque to the store and kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    id: int | None = Field(default=None, ge=0)


Graph = dict[str, dict[int, Resource]]
Schemas = Mapping[str, type[Resource]]
