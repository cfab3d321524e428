# src/rev/__init__.py — v1
"""Content-hash renaming and sourcemap reconciliation."""
