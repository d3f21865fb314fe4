"""Edvia: reading-level text simplification with a rule-based fallback."""

__version__ = "1.0.0"
