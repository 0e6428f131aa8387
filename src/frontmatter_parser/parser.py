"""YAML frontmatter extraction for markdown documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from frontmatter_parser.errors import (
    FrontmatterIOError,
    FrontmatterYAMLError,
    NoFrontmatterError,
)
from frontmatter_parser.render import render_value

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontmatterLoader(yaml.SafeLoader):
    """``SafeLoader`` that keeps unquoted dates and times as strings.

    Frontmatter values are rendered as JSON, which has no date type, so
    ``date: 2024-01-01`` decodes to ``"2024-01-01"`` instead of a
    :class:`datetime.date`.
    """


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class Frontmatter:
    """Decoded frontmatter and the file it came from."""

    path: Path
    data: Any

    def to_json(self) -> str:
        """Render ``data`` as pretty-printed JSON.

        Raises:
            SerializationError: If ``data`` holds a value JSON cannot carry.
        """
        return render_value(self.data)


@dataclass(frozen=True)
class Document:
    """A path plus its text, or ``text=None`` to read it from disk on demand."""

    path: Path
    text: str | None = None

    def read(self) -> str:
        if self.text is not None:
            return self.text
        try:
            return Path(self.path).read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FrontmatterIOError(Path(self.path), exc) from exc

    def parse(self) -> Frontmatter:
        return parse_content(self.path, self.read())


def extract_frontmatter(text: str) -> str | None:
    """Return the raw YAML between the opening and closing ``---`` lines.

    Leading whitespace before the opening delimiter is ignored. Either
    ``\\n`` or ``\\r\\n`` may end the opening line and precede the closing
    delimiter, independently of each other. The returned block is not
    trimmed.

    Returns ``None`` when the text does not open with a delimiter line or
    the block is never closed.
    """
    text = text.lstrip()

    if not text.startswith(FRONTMATTER_DELIMITER):
        return None

    rest = text[len(FRONTMATTER_DELIMITER) :]
    if rest.startswith("\n"):
        rest = rest[1:]
    elif rest.startswith("\r\n"):
        rest = rest[2:]
    else:
        return None

    end = rest.find("\n" + FRONTMATTER_DELIMITER)
    if end == -1:
        return None
    if end > 0 and rest[end - 1] == "\r":
        end -= 1

    return rest[:end]


def parse_content(path: str | Path, text: str) -> Frontmatter:
    """Extract and decode the frontmatter of *text*, attributed to *path*.

    Raises:
        NoFrontmatterError: If *text* has no complete frontmatter block.
        FrontmatterYAMLError: If the block is not valid YAML.
    """
    path = Path(path)

    raw = extract_frontmatter(text)
    if raw is None:
        raise NoFrontmatterError(path)

    try:
        data = yaml.load(raw, Loader=FrontmatterLoader)
    except yaml.YAMLError as exc:
        raise FrontmatterYAMLError(path, str(exc)) from exc

    logger.debug("Parsed frontmatter from %s", path)
    return Frontmatter(path=path, data=data)


def parse_file(path: str | Path) -> Frontmatter:
    """Read *path* as UTF-8 and parse its frontmatter.

    Raises:
        FrontmatterIOError: If the file cannot be read or decoded.
        NoFrontmatterError: If the file has no complete frontmatter block.
        FrontmatterYAMLError: If the block is not valid YAML.
    """
    return Document(Path(path)).parse()
