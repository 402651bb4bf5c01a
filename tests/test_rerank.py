import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rankforge.core.ranking import SCORE_RERANK, rerank_rows, rerank_subset, score_rerank_options


def build_rows():
    return [
        {"name": "a", "score": 10, "team": "red"},
        {"name": "b", "score": 30, "team": "blue"},
        {"name": "c", "score": 20, "team": "red"},
        {"name": "d", "score": 20, "team": "red"},
        {"name": "e", "score": 5, "team": "blue"},
    ]


def test_score_rerank_over_all_rows():
    assert rerank_rows(build_rows(), options=SCORE_RERANK) == [4, 1, 2, 2, 5]


def test_filtered_rows_get_none():
    ranks = rerank_rows(build_rows(), lambda r: r["team"] == "red", SCORE_RERANK)
    assert ranks == [3, None, 1, 1, None]


def test_overrides_pass_through():
    ranks = rerank_rows(build_rows(), lambda r: r["team"] == "red", SCORE_RERANK, method="first")
    assert ranks == [3, None, 1, 2, None]


def test_nothing_kept():
    assert rerank_rows(build_rows(), lambda r: False, SCORE_RERANK) == [None] * 5


def test_custom_score_column():
    rows = [{"points": 1}, {"points": 3}, {"points": 2}]
    assert rerank_rows(rows, options=score_rerank_options("points")) == [3, 1, 2]


def test_rerank_subset_places_ranks():
    assert rerank_subset(4, [3, 0], [1, 2]) == [2, None, None, 1]
    assert rerank_subset(0, [], []) == []


@pytest.mark.parametrize("total,indices,ranks", [
    (3, [0, 1], [1]),
    (3, [3], [1]),
    (3, [-1], [1]),
    (3, [1, 1], [1, 2]),
])
def test_rerank_subset_rejects_bad_input(total, indices, ranks):
    with pytest.raises(ValueError):
        rerank_subset(total, indices, ranks)
