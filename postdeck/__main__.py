"""postdeck CLI entry point.

Allows running via `python -m postdeck` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .constants import HistoryConstants
from .snapshot import PostDraft
from .version import get_version_string

USAGE = "usage: postdeck [--version] [--max-history N] [HEADLINE ...]"


def _parse_max_history(value: str) -> Optional[int]:
    try:
        size = int(value)
    except ValueError:
        return None
    if not HistoryConstants.MIN_MAX_SIZE <= size <= HistoryConstants.MAX_MAX_SIZE:
        return None
    return size


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, an optional history ceiling, then one
    # headline per post in the deck
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    max_size = None
    headlines = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--max-history":
            if i + 1 >= len(args):
                print(USAGE, file=sys.stderr)
                return 2
            max_size = _parse_max_history(args[i + 1])
            if max_size is None:
                print(f"--max-history must be between {HistoryConstants.MIN_MAX_SIZE} "
                      f"and {HistoryConstants.MAX_MAX_SIZE}", file=sys.stderr)
                return 2
            i += 2
        elif arg.startswith("-"):
            print(USAGE, file=sys.stderr)
            return 2
        else:
            headlines.append(arg)
            i += 1

    posts = [PostDraft(headline=headline) for headline in headlines] or None

    # Lazy import to avoid importing UI deps for --version
    from .textual_app import main as run_app
    run_app(max_size=max_size, posts=posts)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
