# src/manifest/__init__.py — v1
"""Manifest accumulation, merging and stages."""
