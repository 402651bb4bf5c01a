#!/usr/bin/env python
"""
rank_table.py – Rank the rows of a CSV / JSON / YAML table

Usage:
    rankforge data/scores.csv --by -score,name --method min
    rankforge data/scores.csv --by score:desc,name --method first
    rankforge data/scores.csv --profile score --config config/rankings.yaml
    rankforge data/scores.json --by -score --where team=red --output outputs/red.csv

Rows excluded by --where keep an empty rank, the way a filtered grid is
re-ranked.
"""

import argparse
import pathlib
import sys
from dataclasses import replace
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from rankforge.core.ranking import METHODS, NA_OPTIONS, RankingOptions, rerank_rows
from rankforge.core.table_loaders import dump_rows, load_rows
from rankforge.utils.config import get_profile, parse_sort_spec
from rankforge.utils.io_helpers import ensure_utf8_windows
from rankforge.utils.logging_helper import get_logger

console = Console()
log = get_logger()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rankforge", description="Rank the rows of a table file")
    ap.add_argument("input", type=pathlib.Path, help="CSV, JSON or YAML table")
    ap.add_argument("--by", help="Sort columns, comma separated; prefix '-' or suffix ':desc' for descending (e.g. -score,name)")
    ap.add_argument("--method", choices=METHODS, help="Tie method (default: average)")
    ap.add_argument("--na-option", choices=NA_OPTIONS, help="Accepted for compatibility; has no effect")
    ap.add_argument("--profile", help="Named profile from the YAML config")
    ap.add_argument("--config", type=pathlib.Path, help="Profile file (default: config/rankings.yaml)")
    ap.add_argument("--where", action="append", default=[], metavar="COLUMN=VALUE",
                    help="Only rank rows whose COLUMN equals VALUE (repeatable)")
    ap.add_argument("--rank-column", default="rank", help="Name of the rank column (default: rank)")
    ap.add_argument("--output", type=pathlib.Path, help="Write ranked rows here (format by suffix)")
    ap.add_argument("--limit", type=int, default=50, help="Rows to print (0 = all)")
    ap.add_argument("--quiet", action="store_true", help="Do not print the ranked table")
    return ap


def join_option_values(argv: List[str], options=("--by",)) -> List[str]:
    """Turn ['--by', '-score'] into ['--by=-score'] so a leading '-' is not read as a flag."""
    joined = []
    it = iter(argv)
    for arg in it:
        value = next(it, None) if arg in options else None
        joined.append(arg if value is None else f"{arg}={value}")
    return joined


def parse_where(clauses: List[str]) -> Dict[str, str]:
    """Turn ['team=red'] into {'team': 'red'}."""
    filters = {}
    for clause in clauses:
        column, sep, value = clause.partition("=")
        if not sep or not column.strip():
            raise ValueError(f"Invalid --where clause {clause!r}, expected COLUMN=VALUE")
        filters[column.strip()] = value.strip()
    return filters


def resolve_cli_options(args: argparse.Namespace) -> RankingOptions:
    """Profile first, then --by / --method / --na-option on top."""
    options = get_profile(args.profile, args.config) if args.profile else RankingOptions()
    overrides: Dict[str, Any] = {}
    if args.by:
        overrides["sort_by"] = parse_sort_spec(args.by)
    if args.method:
        overrides["method"] = args.method
    if args.na_option:
        overrides["na_option"] = args.na_option
    if "sort_by" not in overrides and not args.profile:
        raise ValueError("Nothing to rank by: pass --by or --profile")
    return replace(options, **overrides)


def format_rank(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_table(rows: List[Dict[str, Any]], rank_column: str, limit: int) -> Table:
    """Build a rich table of *rows* ordered by rank, unranked rows last."""
    ordered = sorted(rows, key=lambda r: (r[rank_column] is None, r[rank_column] or 0))
    if limit:
        ordered = ordered[:limit]

    columns = [rank_column]
    for row in rows:
        columns.extend(k for k in row if k not in columns)

    table = Table(box=box.SIMPLE_HEAVY, show_lines=False)
    for column in columns:
        table.add_column(column, justify="right" if column == rank_column else "left",
                         style="bold cyan" if column == rank_column else None)
    for row in ordered:
        table.add_row(*[format_rank(row.get(c)) if c == rank_column else str(row.get(c, ""))
                        for c in columns])
    return table


def run(args: argparse.Namespace) -> List[Dict[str, Any]]:
    rows = load_rows(args.input)
    options = resolve_cli_options(args)
    filters = parse_where(args.where)

    def keep(row: Dict[str, Any]) -> bool:
        return all(str(row.get(column, "")) == value for column, value in filters.items())

    try:
        ranks = rerank_rows(rows, keep if filters else None, options)
    except KeyError as e:
        raise ValueError(f"Unknown column {e.args[0]!r} in {args.input}") from e
    except TypeError as e:
        # blank CSV cells load as "" and do not order against numbers
        raise ValueError(f"Cannot order the sort column values ({e}); check for blank or mixed-type cells") from e
    ranked = [{**row, args.rank_column: r} for row, r in zip(rows, ranks)]
    ranked_count = sum(r is not None for r in ranks)
    log.info(f"Ranked {ranked_count} of {len(rows)} rows from {args.input} (method={options.method})")

    if not args.quiet:
        console.print(render_table(ranked, args.rank_column, args.limit))
    if args.output:
        dump_rows(args.output, ranked)
        console.print(f"[green]✓ Saved ranked rows to {args.output}[/]")
    return ranked


def main(argv: Optional[List[str]] = None) -> int:
    ensure_utf8_windows()
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(join_option_values(argv))
    try:
        run(args)
    except (ValueError, OSError) as e:
        log.error(str(e))
        console.print(f"[red]Error: {e}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
