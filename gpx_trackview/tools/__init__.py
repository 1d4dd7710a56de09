"""Utility entry points for supplementary GPX track view tooling."""

from .summarize_gpx import summarize

__all__ = ["summarize"]
