import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rankforge import rank
from rankforge.core.ranking import (
    DEFAULT_RANKING_OPTIONS,
    KeySpec,
    RankingOptionError,
    RankingOptions,
    compare_keys,
    compare_values,
    normalize_sort_by,
    resolve_options,
)


def ident(x):
    return x


def test_defaults():
    opts = resolve_options()
    assert opts == DEFAULT_RANKING_OPTIONS
    assert (opts.sort_by, opts.method, opts.na_option) == ("asc", "average", "keep")


def test_none_never_overrides():
    assert resolve_options(method=None, sort_by=None) == DEFAULT_RANKING_OPTIONS
    assert resolve_options({"method": None}).method == "average"


def test_mapping_options_and_camel_case_alias():
    opts = resolve_options({"sortBy": "desc", "method": "min"})
    assert opts.sort_by == "desc"
    assert opts.method == "min"
    assert rank([8, 6, 7], {"sortBy": "desc", "method": "min"}) == [1, 3, 2]


def test_keywords_override_options():
    assert rank([2, 2, 1], {"method": "min"}, method="max") == [3, 3, 1]
    assert rank([2, 2, 1], RankingOptions(method="dense")) == [2, 2, 1]


@pytest.mark.parametrize("method", ["median", "", "MIN", 3])
def test_invalid_method_fails_fast(method):
    with pytest.raises(RankingOptionError) as exc:
        rank([1, 2], method=method)
    assert "method" in str(exc.value)
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("sort_by", [
    "up",
    {},
    {"asc": 1},
    {"up": ident},
    {"asc": ident, "desc": ident},
    [],
    [{"asc": ident}, "desc"],
    42,
    KeySpec("sideways", ident),
    KeySpec("asc", "score"),
    [KeySpec("desc", 3)],
])
def test_malformed_sort_by_fails_fast(sort_by):
    with pytest.raises(RankingOptionError) as exc:
        rank([1, 2], sort_by=sort_by)
    assert "sort_by" in str(exc.value)


def test_malformed_sort_by_fails_even_for_empty_input():
    with pytest.raises(RankingOptionError):
        rank([], sort_by="sideways")


def test_unknown_option_key():
    with pytest.raises(RankingOptionError) as exc:
        rank([1], {"order": "asc"})
    assert "order" in str(exc.value)


def test_options_of_wrong_type():
    with pytest.raises(RankingOptionError):
        rank([1], ["asc"])


@pytest.mark.parametrize("na_option", ["keep", "top", "bottom"])
def test_na_option_is_accepted_and_inert(na_option):
    values = [3, 1, 3, 2]
    assert rank(values, na_option=na_option, method="min") == rank(values, method="min")


def test_invalid_na_option():
    with pytest.raises(RankingOptionError) as exc:
        rank([1], na_option="middle")
    assert "na_option" in str(exc.value)


def test_normalize_shapes():
    assert normalize_sort_by("asc") == [KeySpec("asc")]
    assert normalize_sort_by("desc") == [KeySpec("desc")]
    assert normalize_sort_by({"desc": ident}) == [KeySpec("desc", ident)]
    assert normalize_sort_by(({"asc": ident}, {"desc": ident})) == [KeySpec("asc", ident), KeySpec("desc", ident)]


def test_compare_values():
    assert compare_values(1, 2) == -1
    assert compare_values("b", "a") == 1
    assert compare_values(2.0, 2) == 0
    assert compare_values(float("nan"), 1) == 0


def test_compare_keys_short_circuits_in_order():
    specs = [KeySpec("desc"), KeySpec("asc")]
    assert compare_keys((2, 9), (1, 0), specs) == -1
    assert compare_keys((1, 0), (1, 9), specs) == -1
    assert compare_keys((1, 5), (1, 5), specs) == 0
