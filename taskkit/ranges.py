"""Expansion of comma separated number lists with inclusive ranges."""

from __future__ import annotations

import re
import sys

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does: 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def expand_ranges(text: str) -> list[int]:
    """Expand ``"1,3-5,7"`` into ``[1, 3, 4, 5, 7]``.

    Empty items are skipped. An item is split at its first ``-`` into an
    inclusive start and end; a range whose end is below its start is empty.
    """
    numbers: list[int] = []
    for token in filter(None, text.split(",")):
        start_text, separator, end_text = token.partition("-")
        if not separator:
            numbers.append(_atoi(token))
        else:
            numbers.extend(range(_atoi(start_text), _atoi(end_text) + 1))
    return numbers


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: ranges LIST", file=sys.stderr)
        return 1
    print("".join(f"{number} " for number in expand_ranges(args[0])))
    return 0


if __name__ == "__main__":
    sys.exit(main())