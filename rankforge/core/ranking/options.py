"""
options.py - Ranking options: defaults, validation and normalization

This module handles:
- The default options merged in at every call (sort ascending, average ties)
- Validation of ``method`` and ``na_option`` values
- Normalizing every accepted ``sort_by`` shape into a list of KeySpec
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Union

from .keys import ASC, DESC, DIRECTIONS, KeySpec

METHODS = ("average", "min", "max", "first", "dense")
# na_option is accepted for interface compatibility; it has no effect on ranks.
NA_OPTIONS = ("keep", "top", "bottom")

SortBy = Union[str, Mapping[str, Any], KeySpec, list, tuple]


class RankingOptionError(ValueError):
    """Raised for an unrecognized method / na_option or a malformed sort_by."""

    def __init__(self, option: str, value: Any, expected: str):
        self.option = option
        self.value = value
        super().__init__(f"Invalid {option}: {value!r} (expected {expected})")


@dataclass(frozen=True)
class RankingOptions:
    sort_by: Any = ASC
    method: str = "average"
    na_option: str = "keep"


DEFAULT_RANKING_OPTIONS = RankingOptions()

_ALIASES = {"sortBy": "sort_by", "naOption": "na_option"}


def _from_mapping(options: Mapping[str, Any]) -> dict:
    fields = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in ("sort_by", "method", "na_option"):
            raise RankingOptionError("option", key, "one of sort_by, method, na_option")
        fields[name] = value
    return fields


def resolve_options(
    options: Optional[Union[RankingOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> RankingOptions:
    """Merge *options* and keyword *overrides* over the defaults, then validate.

    ``None`` never overrides a value, so ``rank(xs, method=None)`` keeps the
    default method.
    """
    if options is None:
        merged = DEFAULT_RANKING_OPTIONS
    elif isinstance(options, RankingOptions):
        merged = options
    elif isinstance(options, Mapping):
        fields = {k: v for k, v in _from_mapping(options).items() if v is not None}
        merged = replace(DEFAULT_RANKING_OPTIONS, **fields)
    else:
        raise RankingOptionError("options", options, "a RankingOptions or a mapping")

    merged = replace(merged, **{k: v for k, v in overrides.items() if v is not None})
    validate_method(merged.method)
    validate_na_option(merged.na_option)
    normalize_sort_by(merged.sort_by)
    return merged


def validate_method(method: Any) -> str:
    if method not in METHODS:
        raise RankingOptionError("method", method, " | ".join(METHODS))
    return method


def validate_na_option(na_option: Any) -> str:
    if na_option not in NA_OPTIONS:
        raise RankingOptionError("na_option", na_option, " | ".join(NA_OPTIONS))
    return na_option


def _spec_from_mapping(spec: Mapping[str, Any]) -> KeySpec:
    if len(spec) != 1:
        raise RankingOptionError("sort_by", spec, "a single {'asc': fn} or {'desc': fn}")
    (direction, extractor), = spec.items()
    if direction not in DIRECTIONS:
        raise RankingOptionError("sort_by", spec, "a single {'asc': fn} or {'desc': fn}")
    if not callable(extractor):
        raise RankingOptionError("sort_by", spec, f"a callable extractor under '{direction}'")
    return KeySpec(direction, extractor)


def _spec_from_entry(entry: Any) -> KeySpec:
    if isinstance(entry, KeySpec):
        if entry.direction not in DIRECTIONS:
            raise RankingOptionError("sort_by", entry, "direction 'asc' or 'desc'")
        if entry.extractor is not None and not callable(entry.extractor):
            raise RankingOptionError("sort_by", entry, "a callable extractor or None")
        return entry
    if isinstance(entry, Mapping):
        return _spec_from_mapping(entry)
    raise RankingOptionError("sort_by", entry, "a key spec mapping or KeySpec")


def normalize_sort_by(sort_by: SortBy) -> List[KeySpec]:
    """Turn any accepted ``sort_by`` shape into a non-empty list of KeySpec.

    Accepted shapes:
        "asc" / "desc"                    compare items directly
        {"asc": fn} / {"desc": fn}        a single key
        KeySpec(...)                      a single key
        [spec, spec, ...]                 composite key, first spec dominant
    """
    if sort_by is None or sort_by == ASC:
        return [KeySpec(ASC)]
    if sort_by == DESC:
        return [KeySpec(DESC)]
    if isinstance(sort_by, str):
        raise RankingOptionError("sort_by", sort_by, "'asc', 'desc', a key spec or a list of key specs")
    if isinstance(sort_by, (list, tuple)):
        if not sort_by:
            raise RankingOptionError("sort_by", sort_by, "at least one key spec")
        return [_spec_from_entry(entry) for entry in sort_by]
    return [_spec_from_entry(sort_by)]
