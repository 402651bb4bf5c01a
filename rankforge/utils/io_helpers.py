#!/usr/bin/env python
"""
io_helpers.py – tiny utilities for BOM-safe UTF-8 reading / writing.

Table files exported from spreadsheets frequently start with a UTF-8 BOM,
which would otherwise end up glued to the first CSV header. All project code
should import these instead of calling Path.read_text().
"""

from pathlib import Path
import sys, os

BOM = b"\xef\xbb\xbf"

# ── public API ─────────────────────────────────────────────────────────────
def read_utf8(path: Path) -> str:
    """
    Return file contents as str, decoded UTF-8, stripping BOM if present.
    Uses strict error-handling so encoding problems surface as UnicodeDecodeError.
    """
    raw = Path(path).read_bytes()
    if raw.startswith(BOM):
        raw = raw[len(BOM):]
    return raw.decode("utf-8")

def write_utf8(path: Path, text: str) -> None:
    """Write text as UTF-8 (no BOM), creating parent folders as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps csv-module line endings intact on Windows
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)

def ensure_utf8_windows() -> None:
    """Force UTF-8 on Windows terminals so Unicode output is readable."""
    if sys.platform == "win32":
        if sys.stdout.encoding != "utf-8":
            sys.stdout.reconfigure(encoding="utf-8")
        if sys.stderr.encoding != "utf-8":
            sys.stderr.reconfigure(encoding="utf-8")
        os.environ["PYTHONIOENCODING"] = "utf-8"
