"""Fixture discovery, naming, and package rewriting."""

from .classifier import has_box_method, iter_fixtures
from .errors import FixtureDirectoryError, FixtureReadError
from .models import Fixture
from .naming import (
    NameRegistry,
    escape_for_java_identifier,
    escape_string_characters,
    package_name_for,
)
from .rewriter import change_package

__all__ = [
    "has_box_method",
    "iter_fixtures",
    "FixtureDirectoryError",
    "FixtureReadError",
    "Fixture",
    "NameRegistry",
    "escape_for_java_identifier",
    "escape_string_characters",
    "package_name_for",
    "change_package",
]
