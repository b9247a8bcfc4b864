"""Visualization module."""

from .tables import frequency_table, display_frequencies, display_comparison

__all__ = [
    "frequency_table",
    "display_frequencies",
    "display_comparison",
]
