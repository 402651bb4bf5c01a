"""
rerank.py - Rank a filtered subset of rows and map ranks back by position

After a table has been filtered, the visible rows are ranked among
themselves and every row of the full table receives either its new rank or
``None`` when it was filtered out.
"""

from __future__ import annotations

from operator import itemgetter
from typing import Any, Callable, List, Optional, Sequence

from rankforge.utils.logging_helper import get_logger
from .engine import Rank, rank
from .options import RankingOptions

log = get_logger()


def score_rerank_options(column: str = "score") -> RankingOptions:
    """Highest *column* first, ties share the best rank."""
    return RankingOptions(sort_by={"desc": itemgetter(column)}, method="min")


SCORE_RERANK = score_rerank_options()


def rerank_subset(total: int, indices: Sequence[int], ranks: Sequence[Rank]) -> List[Optional[Rank]]:
    """Place ``ranks[k]`` at row ``indices[k]`` of a column of length *total*."""
    if len(indices) != len(ranks):
        raise ValueError(f"Got {len(indices)} row indices for {len(ranks)} ranks")

    column: List[Optional[Rank]] = [None] * total
    seen = set()
    for index, value in zip(indices, ranks):
        if not 0 <= index < total:
            raise ValueError(f"Row index {index} out of range for {total} rows")
        if index in seen:
            raise ValueError(f"Row index {index} appears more than once")
        seen.add(index)
        column[index] = value
    return column


def rerank_rows(
    rows: Sequence[Any],
    keep: Optional[Callable[[Any], bool]] = None,
    options: Any = None,
    **overrides: Any,
) -> List[Optional[Rank]]:
    """
    Rank the rows accepted by *keep* and return a full-length rank column.

    Args:
        rows: The complete table
        keep: Predicate selecting the rows to rank (all rows when omitted)
        options: Ranking options passed through to ``rank``
        **overrides: ``sort_by`` / ``method`` / ``na_option`` overrides

    Returns:
        One entry per row: the row's rank among kept rows, or None.
    """
    indices = [i for i, row in enumerate(rows) if keep is None or keep(row)]
    subset = [rows[i] for i in indices]
    ranks = rank(subset, options, **overrides)
    log.debug(f"Re-ranked {len(subset)} of {len(rows)} rows")
    return rerank_subset(len(rows), indices, ranks)
