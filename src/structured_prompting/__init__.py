"""Structured prompting: strict JSON-schema requests and validated responses."""

__version__ = "0.1.0"
