"""Command-line interface package for the schema checks."""

from .app import CheckReport, build_parser, main, render_table, run

__all__ = [
    "CheckReport",
    "build_parser",
    "main",
    "render_table",
    "run",
]
