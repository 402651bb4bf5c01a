"""
engine.py - Statistical ranking with tie handling

Assigns 1-based ranks to a sequence of items under one or more sort keys,
resolving ties the way pandas/scipy ``rankdata`` do:

    average  tied items share the mean of the positions they span
    min      tied items share the lowest position (competition ranking)
    max      tied items share the highest position
    first    ties broken by original input order
    dense    like min, but ranks advance by one per distinct value

Example:
    >>> rank([8, 6, 7, 5, 4])
    [5.0, 3.0, 4.0, 2.0, 1.0]
    >>> rank([{"a": 2}, {"a": 1}, {"a": 2}], sort_by={"desc": lambda r: r["a"]}, method="min")
    [1, 3, 1]
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from rankforge.utils.logging_helper import get_logger
from .keys import KeySpec, compare_keys, extract_keys
from .options import RankingOptions, normalize_sort_by, resolve_options

log = get_logger()

Rank = Union[int, float]


def sort_order(keys: List[tuple], specs: List[KeySpec]) -> List[int]:
    """Return item indices in sorted order; equal keys keep input order (stable)."""
    by_key = cmp_to_key(lambda i, j: compare_keys(keys[i], keys[j], specs))
    return sorted(range(len(keys)), key=by_key)


def tie_blocks(order: List[int], keys: List[tuple], specs: List[KeySpec]) -> List[Tuple[int, int]]:
    """Split a sorted order into maximal runs of keys equal to the run's first key.

    Returns ``(start, end)`` sorted positions, both inclusive.
    """
    blocks = []
    start = 0
    for pos in range(1, len(order)):
        if compare_keys(keys[order[start]], keys[order[pos]], specs) != 0:
            blocks.append((start, pos - 1))
            start = pos
    if order:
        blocks.append((start, len(order) - 1))
    return blocks


def _block_ranks(method: str, order: List[int], blocks: List[Tuple[int, int]]) -> List[Rank]:
    """Rank for every sorted position."""
    ranks: List[Rank] = [0] * len(order)
    for dense_rank, (start, end) in enumerate(blocks, 1):
        if method == "first":
            # members in original input order take start+1 .. end+1
            members = sorted(range(start, end + 1), key=lambda pos: order[pos])
            for offset, pos in enumerate(members):
                ranks[pos] = start + offset + 1
            continue
        if method == "min":
            value: Rank = start + 1
        elif method == "max":
            value = end + 1
        elif method == "dense":
            value = dense_rank
        else:
            value = (start + end) / 2 + 1
        for pos in range(start, end + 1):
            ranks[pos] = value
    return ranks


def rank(
    items: Iterable[Any],
    options: Optional[Union[RankingOptions, Mapping[str, Any]]] = None,
    *,
    sort_by: Any = None,
    method: Optional[str] = None,
    na_option: Optional[str] = None,
) -> List[Rank]:
    """
    Rank *items* and return one rank per item, in input order.

    Args:
        items: Any iterable; it is consumed once.
        options: RankingOptions or a mapping with ``sort_by``/``method``/``na_option``
        sort_by: "asc", "desc", {"asc": fn}, {"desc": fn} or a list of those
        method: "average" (default), "min", "max", "first" or "dense"
        na_option: "keep" (default), "top" or "bottom"; currently has no effect

    Returns:
        List of ranks; floats for ``average``, ints otherwise.

    Raises:
        RankingOptionError: for an invalid method, na_option or sort_by shape.
        TypeError: when extracted keys cannot be ordered against each other.
    """
    opts = resolve_options(options, sort_by=sort_by, method=method, na_option=na_option)
    specs = normalize_sort_by(opts.sort_by)
    items = list(items)

    keys = extract_keys(items, specs)
    order = sort_order(keys, specs)
    blocks = tie_blocks(order, keys, specs)
    by_position = _block_ranks(opts.method, order, blocks)

    ranks: List[Rank] = [0] * len(items)
    for pos, index in enumerate(order):
        ranks[index] = by_position[pos]

    log.debug(f"Ranked {len(items)} items with method={opts.method}: "
              f"{len(specs)} key(s), {len(blocks)} tie block(s)")
    return ranks
