"""
rankforge - statistical ranking of arbitrary items

    from rankforge import rank
    rank([8, 6, 7, 5, 4])                      # [5.0, 3.0, 4.0, 2.0, 1.0]
    rank(rows, sort_by=[{"desc": score}], method="min")
"""

from rankforge.core.ranking import (
    KeySpec,
    RankingOptionError,
    RankingOptions,
    rank,
    rerank_rows,
)

__version__ = "0.1.0"

__all__ = ['rank', 'rerank_rows', 'KeySpec', 'RankingOptions', 'RankingOptionError']
