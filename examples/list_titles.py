"""Print the title of every post under a content directory.

Usage::

    python examples/list_titles.py content/
"""

import sys

from frontmatter_parser import parse_directory


def main(root: str) -> int:
    failures = 0
    for outcome in sorted(parse_directory(root, recursive=True), key=lambda o: str(o.path)):
        if not outcome.ok:
            print(f"skipped: {outcome.error}", file=sys.stderr)
            failures += 1
            continue
        data = outcome.frontmatter.data
        title = data.get("title", "(untitled)") if isinstance(data, dict) else "(untitled)"
        print(f"{outcome.path}: {title}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "."))
