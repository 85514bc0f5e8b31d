"""Edit-distance computation for fuzzy keyword matching."""

from __future__ import annotations

import numpy as np


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Counts the minimum number of single-character insertions,
    deletions and substitutions that turn ``a`` into ``b``. No case
    folding is applied; lowercase both inputs beforehand for a
    case-insensitive comparison.

    The table has ``len(b) + 1`` rows and ``len(a) + 1`` columns;
    cell ``[i, j]`` holds the distance between the first ``j``
    characters of ``a`` and the first ``i`` characters of ``b``.

    Args:
        a: Source string.
        b: Target string.

    Returns:
        Non-negative edit distance.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    rows, cols = len(b) + 1, len(a) + 1
    table = np.zeros((rows, cols), dtype=np.int64)
    table[0, :] = np.arange(cols)
    table[:, 0] = np.arange(rows)

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[j - 1] == b[i - 1] else 1
            table[i, j] = min(
                table[i, j - 1] + 1,
                table[i - 1, j] + 1,
                table[i - 1, j - 1] + cost,
            )

    return int(table[rows - 1, cols - 1])
