"""
keys.py - Sort key specifications and the composite comparator

A key spec pairs a direction ("asc" / "desc") with an extractor that maps an
item to a comparable value. A list of key specs compares lexicographically:
the first key decides unless it ties, then the second, and so on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)


@dataclass(frozen=True)
class KeySpec:
    """One ``(direction, extractor)`` pair; ``extractor=None`` compares items directly."""

    direction: str = ASC
    extractor: Optional[Callable[[Any], Any]] = None

    def extract(self, item: Any) -> Any:
        if self.extractor is None:
            return item
        return self.extractor(item)

    @property
    def descending(self) -> bool:
        return self.direction == DESC


def compare_values(a: Any, b: Any) -> int:
    """Three-way compare using only ``<`` and ``>``.

    Values that are neither less nor greater (equal values, but also ``NaN``
    against anything) compare as 0. Unorderable types raise ``TypeError``.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_keys(left: Sequence[Any], right: Sequence[Any], specs: Sequence[KeySpec]) -> int:
    """Compare two pre-extracted key tuples under *specs*, first non-zero wins."""
    for l, r, spec in zip(left, right, specs):
        c = compare_values(l, r)
        if c:
            return -c if spec.descending else c
    return 0


def extract_keys(items: Sequence[Any], specs: Sequence[KeySpec]) -> List[tuple]:
    """Evaluate every extractor once per item, in input order."""
    return [tuple(spec.extract(item) for spec in specs) for item in items]
