"""
Suggestions — "did you mean" for actions that resolve to nothing.
"""

from __future__ import annotations

from pkgrun.core.models.script import ScriptTable

# Names at a distance strictly below this qualify.
MAX_DISTANCE = 2


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance: single-character inserts, deletes, substitutions."""
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def suggest(table: ScriptTable, attempted: str) -> str | None:
    """Closest known name to ``attempted``, or None.

    Ties on distance go to the lexicographically smallest name.
    """
    best: tuple[int, str] | None = None
    for name in table.names():
        distance = edit_distance(name, attempted)
        if distance >= MAX_DISTANCE:
            continue
        if best is None or (distance, name) < best:
            best = (distance, name)
    return best[1] if best else None
