from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from . import ORMModel


# Rows come back as SQLite stored them: column affinity decides the types,
# and columns beyond the documented ones are passed through.
class MovieOut(ORMModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, extra="allow")

    id: Any = None
    title: Any = None
    director: Any = None
    genre: Any = None
    release_year: Any = None
    rating: Any = Field(
        None, description="e.g., 4.5 out of 5.0"
    )
    actor: Any = None
    box_office_collection: Any = None


class MovieList(ORMModel):
    movies: list[MovieOut] = Field(default_factory=list)


class MessageOut(ORMModel):
    message: str
