"""
Core module - Business logic for rankforge

This module contains the core functionality organized by domain:
- ranking: rank engine, key specs, options, re-ranking
- table_loaders: reading and writing row tables (CSV / JSON / YAML)
"""
