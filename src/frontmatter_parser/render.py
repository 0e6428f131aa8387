"""JSON rendering of decoded frontmatter."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter
from pydantic_core import PydanticSerializationError

from frontmatter_parser.errors import SerializationError

JSON_INDENT = 2


class FrontmatterEntry(BaseModel):
    """One successfully parsed file in a directory listing."""

    file: str = Field(description="Path of the source document")
    frontmatter: Any = Field(default=None, description="Decoded frontmatter value")


_VALUE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)
_ENTRIES_ADAPTER: TypeAdapter[list[FrontmatterEntry]] = TypeAdapter(list[FrontmatterEntry])


def render_value(value: Any) -> str:
    """Render a decoded frontmatter value as pretty-printed JSON."""
    try:
        return _VALUE_ADAPTER.dump_json(value, indent=JSON_INDENT).decode()
    except PydanticSerializationError as exc:
        raise SerializationError(str(exc)) from exc


def render_entries(entries: list[FrontmatterEntry]) -> str:
    """Render directory entries as a pretty-printed JSON array."""
    try:
        return _ENTRIES_ADAPTER.dump_json(entries, indent=JSON_INDENT).decode()
    except PydanticSerializationError as exc:
        raise SerializationError(str(exc)) from exc
