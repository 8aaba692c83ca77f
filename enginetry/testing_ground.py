"""Entry point that exercises the quick sort on a sample list."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from enginetry.datastructures import quick_sort
from enginetry.helpers import _format_value

_SAMPLE = (10, 2, 5, 6, 4, 8, 1, 2, 3, 5, 48, 4)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the sample list and print it, each value followed by a space."""
    values = [float(value) for value in _SAMPLE]
    quick_sort(values)
    sys.stdout.write("".join(f"{_format_value(value)} " for value in values))
    return 0


if __name__ == "__main__":
    sys.exit(main())