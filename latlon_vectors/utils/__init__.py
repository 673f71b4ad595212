"""Presentation helpers (degree conversion, DMS formatting)."""
