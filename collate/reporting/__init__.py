"""Output document rendering."""

from collate.reporting.renderer import render_document, render_excerpt

__all__ = ["render_document", "render_excerpt"]
