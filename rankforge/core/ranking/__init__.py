"""
Ranking module - Statistical ranks over arbitrary items

This module provides:
- rank(): 1-based ranks with average / min / max / first / dense ties
- Key specs and the composite multi-key comparator
- Option defaults and validation
- Re-ranking of a filtered subset of rows
"""

from .engine import rank
from .keys import KeySpec, compare_keys, compare_values
from .options import (
    DEFAULT_RANKING_OPTIONS,
    METHODS,
    NA_OPTIONS,
    RankingOptionError,
    RankingOptions,
    normalize_sort_by,
    resolve_options,
)
from .rerank import SCORE_RERANK, rerank_rows, rerank_subset, score_rerank_options

__all__ = [
    'rank',
    'KeySpec',
    'compare_keys',
    'compare_values',
    'DEFAULT_RANKING_OPTIONS',
    'METHODS',
    'NA_OPTIONS',
    'RankingOptionError',
    'RankingOptions',
    'normalize_sort_by',
    'resolve_options',
    'SCORE_RERANK',
    'rerank_rows',
    'rerank_subset',
    'score_rerank_options',
]
