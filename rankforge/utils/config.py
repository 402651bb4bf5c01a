#!/usr/bin/env python
"""
config.py – named ranking profiles stored in YAML.

A profile file looks like:

    defaults:
      method: average
    profiles:
      score:
        sort_by:
          - desc: score
          - asc: name
        method: min

Column names in ``sort_by`` become ``itemgetter`` extractors, so profiles
rank dict rows such as those returned by ``load_rows``. A bare ``asc`` or
``desc`` keeps direct comparison of the items.
"""

from __future__ import annotations

from operator import itemgetter
from pathlib import Path
from typing import Any, Dict, List

import yaml

from rankforge.core.ranking.keys import ASC, DESC, DIRECTIONS, KeySpec
from rankforge.core.ranking.options import RankingOptions, resolve_options
from rankforge.utils.io_helpers import read_utf8
from rankforge.utils.logging_helper import get_logger
from rankforge.utils.paths import DEFAULT_PROFILE_PATH

log = get_logger()


class ProfileError(ValueError):
    """Raised when a profile file or entry is malformed or missing."""


def parse_sort_spec(spec: str) -> List[KeySpec]:
    """Parse ``"-score,name"`` into key specs.

    A ``-`` prefix or a ``:desc`` suffix means descending; ``score:desc`` is
    the form to use on a command line, where ``-score`` looks like a flag.
    """
    specs = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        column, sep, suffix = part.rpartition(":")
        if sep and suffix.strip() in DIRECTIONS:
            direction, column = suffix.strip(), column.strip()
        elif part.startswith("-"):
            direction, column = DESC, part[1:].strip()
        else:
            direction, column = ASC, part.lstrip("+").strip()
        if not column:
            raise ProfileError(f"Empty column name in sort spec {spec!r}")
        specs.append(KeySpec(direction, itemgetter(column)))
    if not specs:
        raise ProfileError(f"No columns in sort spec {spec!r}")
    return specs


def _keys_from_entry(entry: Any, profile: str) -> List[KeySpec]:
    if isinstance(entry, str):
        return parse_sort_spec(entry)
    if isinstance(entry, dict) and len(entry) == 1:
        (direction, column), = entry.items()
        if direction in DIRECTIONS and isinstance(column, str):
            return [KeySpec(direction, itemgetter(column))]
    raise ProfileError(f"Profile '{profile}': bad sort_by entry {entry!r}")


def _sort_by_from_config(value: Any, profile: str) -> Any:
    if value is None or value in DIRECTIONS:
        return value
    if isinstance(value, list):
        return [spec for entry in value for spec in _keys_from_entry(entry, profile)]
    return _keys_from_entry(value, profile)


def load_profiles(path: Path | str | None = None) -> Dict[str, RankingOptions]:
    """Load every profile in *path* (default: config/rankings.yaml) as RankingOptions."""
    path = Path(path) if path is not None else DEFAULT_PROFILE_PATH
    if not path.exists():
        raise ProfileError(f"Profile file not found: {path}")

    data = yaml.safe_load(read_utf8(path)) or {}
    if not isinstance(data, dict):
        raise ProfileError(f"Expected a mapping at the top of {path}")

    defaults = data.get("defaults") or {}
    profiles = data.get("profiles") or {}
    if not isinstance(defaults, dict) or not isinstance(profiles, dict):
        raise ProfileError(f"'defaults' and 'profiles' must be mappings in {path}")

    loaded = {}
    for name, entry in profiles.items():
        if entry is not None and not isinstance(entry, dict):
            raise ProfileError(f"Profile '{name}' in {path} must be a mapping")
        entry = {**defaults, **(entry or {})}
        try:
            loaded[name] = resolve_options(
                sort_by=_sort_by_from_config(entry.get("sort_by"), name),
                method=entry.get("method"),
                na_option=entry.get("na_option"),
            )
        except ValueError as e:
            raise ProfileError(f"Profile '{name}' in {path}: {e}") from e

    log.debug(f"Loaded {len(loaded)} ranking profiles from {path}")
    return loaded


def get_profile(name: str, path: Path | str | None = None) -> RankingOptions:
    profiles = load_profiles(path)
    if name not in profiles:
        known = ", ".join(sorted(profiles)) or "none"
        raise ProfileError(f"Unknown profile '{name}' (available: {known})")
    return profiles[name]
