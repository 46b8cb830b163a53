"""Rendering of generation results."""

from .formatter import format_fixture_listing, format_generation_result

__all__ = ["format_fixture_listing", "format_generation_result"]
