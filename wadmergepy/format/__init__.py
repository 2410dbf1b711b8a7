"""Canonical rendering and formatting."""

from wadmergepy.format.render import render_document, render_line, render_symbol
from wadmergepy.format.runner import run_format

__all__ = [
    "render_document",
    "render_line",
    "render_symbol",
    "run_format",
]
