"""
Utils module - Shared utilities for rankforge

This module provides common utilities used across the project:
- logging_helper: Consistent logging setup
- io_helpers: BOM-safe UTF-8 file I/O
- paths: Common path definitions
- config: Named ranking profiles loaded from YAML
"""
