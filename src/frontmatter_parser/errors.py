"""Error types raised while extracting and collecting frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar


class FrontmatterError(Exception):
    """Base class for every failure reported by frontmatter-parser."""

    kind: ClassVar[str] = "frontmatter"

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class FrontmatterIOError(FrontmatterError):
    """The document could not be read (missing, permissions, encoding)."""

    kind = "io"

    def __init__(self, path: Path, cause: OSError | UnicodeDecodeError) -> None:
        super().__init__(f"Failed to read file '{path}': {cause}", path)
        self.cause = cause


class NoFrontmatterError(FrontmatterError):
    """The document has no complete ``---`` delimited block at its start."""

    kind = "no_frontmatter"

    def __init__(self, path: Path) -> None:
        super().__init__(f"No frontmatter found in '{path}'", path)


class FrontmatterYAMLError(FrontmatterError):
    """The block between the delimiters is not valid YAML."""

    kind = "yaml"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"YAML parsing error in '{path}': {message}", path)
        self.message = message


class TraversalError(FrontmatterError):
    """A directory could not be enumerated during a walk."""

    kind = "traversal"

    def __init__(self, cause: OSError) -> None:
        filename = getattr(cause, "filename", None)
        super().__init__(f"Directory error: {cause}", Path(filename) if filename else None)
        self.cause = cause


class SerializationError(FrontmatterError):
    """Decoded frontmatter could not be rendered as JSON."""

    kind = "serialization"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
