"""
table_loaders.py - Reading and writing row tables

This module handles:
- Loading rows (dicts) from CSV, JSON and YAML files
- Converting numeric-looking CSV cells so they rank as numbers. Blank cells
  stay "" and do not order against numbers; the CLI reports such columns
- Writing ranked rows back out in the same formats
"""

import csv
import io
import json
import pathlib
from typing import Any, Dict, List

import yaml

from rankforge.utils.io_helpers import read_utf8, write_utf8
from rankforge.utils.logging_helper import get_logger

log = get_logger()

Row = Dict[str, Any]

CSV_SUFFIXES = (".csv",)
JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def coerce_cell(value: str) -> Any:
    """Return *value* as int or float when it looks numeric, else unchanged."""
    if value is None:
        return None
    text = value.strip()
    if text == "":
        return text
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def _rows_from_document(data: Any, path: pathlib.Path) -> List[Row]:
    # accept a bare list or {"rows": [...]}
    if isinstance(data, dict) and "rows" in data:
        data = data["rows"]
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of rows in {path}, got {type(data).__name__}")

    rows = []
    for i, row in enumerate(data):
        if not isinstance(row, dict):
            log.warning(f"Skipping row {i} in {path}: not a mapping ({row!r})")
            continue
        rows.append(row)
    return rows


def load_rows(path: pathlib.Path) -> List[Row]:
    """Load a table file into a list of dict rows, choosing the parser by suffix."""
    path = pathlib.Path(path)
    if not path.exists():
        raise ValueError(f"Table file not found: {path}")

    suffix = path.suffix.lower()
    text = read_utf8(path)
    if suffix in CSV_SUFFIXES:
        reader = csv.DictReader(io.StringIO(text))
        rows = [{k: coerce_cell(v) for k, v in row.items()} for row in reader]
    elif suffix in JSON_SUFFIXES:
        rows = _rows_from_document(json.loads(text), path)
    elif suffix in YAML_SUFFIXES:
        rows = _rows_from_document(yaml.safe_load(text) or [], path)
    else:
        raise ValueError(f"Unsupported table format: {path.suffix or path.name}")

    log.debug(f"Loaded {len(rows)} rows from {path}")
    return rows


def dump_rows(path: pathlib.Path, rows: List[Row]) -> None:
    """Write rows to *path*; the format follows the suffix as in load_rows."""
    path = pathlib.Path(path)
    suffix = path.suffix.lower()
    if suffix in CSV_SUFFIXES:
        fieldnames: List[str] = []
        for row in rows:
            fieldnames.extend(k for k in row if k not in fieldnames)
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=fieldnames, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
        text = buf.getvalue()
    elif suffix in JSON_SUFFIXES:
        text = json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
    elif suffix in YAML_SUFFIXES:
        text = yaml.safe_dump(rows, sort_keys=False, allow_unicode=True)
    else:
        raise ValueError(f"Unsupported table format: {path.suffix or path.name}")

    write_utf8(path, text)
    log.info(f"Wrote {len(rows)} rows to {path}")
