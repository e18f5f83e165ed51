"""Renderers."""

from .console import journal_to_json, render_journal

__all__ = ["journal_to_json", "render_journal"]
