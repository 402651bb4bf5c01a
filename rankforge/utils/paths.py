#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # RANKFORGE_ROOT / RANKFORGE_PROFILES may live in .env

# Try to get root from environment variable first
ROOT = os.environ.get('RANKFORGE_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    # Fallback: look for a marker file (like .git or pyproject.toml) in parent directories
    current = Path.cwd().resolve()
    for candidate in (current, *current.parents):
        if any((candidate / marker).exists() for marker in ['.git', 'pyproject.toml', 'README.md']):
            ROOT = candidate
            break
    else:
        ROOT = current

CONFIG_DIR  = ROOT / "config"
LOG_DIR     = ROOT / "logs"

DEFAULT_PROFILE_PATH = Path(os.environ.get('RANKFORGE_PROFILES', CONFIG_DIR / "rankings.yaml"))
