"""Extract YAML frontmatter from markdown documents and render it as JSON.

Single file::

    from frontmatter_parser import parse_file

    fm = parse_file("post.md")
    print(fm.to_json())

Whole directory, one outcome per markdown file::

    from frontmatter_parser import parse_directory

    for outcome in parse_directory("content/", recursive=True):
        if outcome.ok:
            print(outcome.path, outcome.frontmatter.data)
        else:
            print(outcome.error)
"""

from frontmatter_parser.collector import Outcome, parse_directory
from frontmatter_parser.errors import (
    FrontmatterError,
    FrontmatterIOError,
    FrontmatterYAMLError,
    NoFrontmatterError,
    SerializationError,
    TraversalError,
)
from frontmatter_parser.parser import (
    Document,
    Frontmatter,
    extract_frontmatter,
    parse_content,
    parse_file,
)

__all__ = [
    "Document",
    "Frontmatter",
    "Outcome",
    "extract_frontmatter",
    "parse_content",
    "parse_file",
    "parse_directory",
    "FrontmatterError",
    "FrontmatterIOError",
    "NoFrontmatterError",
    "FrontmatterYAMLError",
    "TraversalError",
    "SerializationError",
]
