"""Directory traversal that parses frontmatter from every markdown file."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from frontmatter_parser.errors import FrontmatterError, TraversalError
from frontmatter_parser.parser import Frontmatter, parse_file

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})


@dataclass(frozen=True)
class Outcome:
    """Result of parsing one file during a directory run.

    Exactly one of ``frontmatter`` and ``error`` is set.
    """

    path: Path | None
    frontmatter: Frontmatter | None = None
    error: FrontmatterError | None = None

    def __post_init__(self) -> None:
        if (self.frontmatter is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of frontmatter or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Frontmatter:
        """Return the parsed frontmatter, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.frontmatter  # type: ignore[return-value]


def is_markdown_file(path: Path) -> bool:
    """Return True for ``.md`` and ``.markdown`` files, in any case."""
    return path.suffix.lower() in MARKDOWN_EXTENSIONS


def iter_markdown_files(
    root: str | Path,
    recursive: bool = False,
    onerror: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield markdown files under *root* in file system enumeration order.

    Only direct children of *root* are visited unless *recursive* is set.
    Directories that cannot be listed are passed to *onerror* and skipped.
    Symlinked directories are not followed. A *root* that is itself a
    markdown file is yielded as is.
    """
    if Path(root).is_file():
        if is_markdown_file(Path(root)):
            yield Path(root)
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
        if not recursive:
            dirnames.clear()
        for name in filenames:
            path = Path(dirpath) / name
            if not is_markdown_file(path):
                logger.debug("Skipping non-markdown entry %s", path)
                continue
            if not path.is_file():
                logger.debug("Skipping %s: not a regular file", path)
                continue
            yield path


def parse_directory(root: str | Path, recursive: bool = False) -> list[Outcome]:
    """Parse frontmatter from every markdown file under *root*.

    Never raises for individual failures: unreadable files, missing
    frontmatter, invalid YAML and unlistable directories each become a
    failed :class:`Outcome`. Outcomes follow traversal order, which is not
    sorted.
    """
    outcomes: list[Outcome] = []

    def record_traversal_error(exc: OSError) -> None:
        error = TraversalError(exc)
        logger.debug("%s", error)
        outcomes.append(Outcome(path=error.path, error=error))

    for path in iter_markdown_files(root, recursive, onerror=record_traversal_error):
        try:
            outcomes.append(Outcome(path=path, frontmatter=parse_file(path)))
        except FrontmatterError as exc:
            logger.debug("Failed to parse %s: %s", path, exc)
            outcomes.append(Outcome(path=path, error=exc))

    return outcomes
