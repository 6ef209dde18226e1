"""
Core utilities shared across the pet catalog.

This package hosts configuration helpers (env vars, content authority,
database URL) and the loguru setup used by the app and the scripts.
"""
