# src/pipeline/__init__.py — v1
"""Stage contract and stream runner."""
