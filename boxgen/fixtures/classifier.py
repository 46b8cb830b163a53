"""Find the fixture files that can run as box tests."""

import logging
from pathlib import Path
from typing import Iterator

from ..config.models import FixtureSettings
from .errors import FixtureDirectoryError, FixtureReadError
from .models import Fixture

logger = logging.getLogger(__name__)


def has_box_method(text: str, marker: str = "fun box()") -> bool:
    """Check whether fixture text declares the box entry point."""
    return marker in text


def list_root(root: Path, sort: bool = False) -> list[Path]:
    """List a top-level fixture directory.

    Raises:
        FixtureDirectoryError: If the directory is missing, unreadable, or empty.
    """
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise FixtureDirectoryError(
            f"Folder with testData is empty: {root.absolute()}", str(root)
        ) from e

    if not entries:
        raise FixtureDirectoryError(
            f"Folder with testData is empty: {root.absolute()}", str(root)
        )
    return sorted(entries) if sort else entries


def iter_fixtures(root: str | Path, settings: FixtureSettings) -> Iterator[Fixture]:
    """Yield the box fixtures below a root, depth first.

    Entries are visited in directory-listing order unless
    ``settings.sort_fixtures`` is set.

    Args:
        root: A top-level fixture directory.
        settings: Extension, marker, and exclusion settings.

    Raises:
        FixtureDirectoryError: If the root has nothing to list.
    """
    root = Path(root)
    yield from _iter_entries(list_root(root, settings.sort_fixtures), settings)


def _iter_entries(entries: list[Path], settings: FixtureSettings) -> Iterator[Fixture]:
    for entry in entries:
        if entry.name in settings.excluded_files:
            continue

        if entry.is_dir():
            try:
                children = list(entry.iterdir())
            except OSError:
                logger.warning("Skipping unreadable directory %s", entry)
                continue
            if settings.sort_fixtures:
                children.sort()
            yield from _iter_entries(children, settings)
        elif entry.suffix != f".{settings.extension}":
            continue
        else:
            try:
                text = entry.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise FixtureReadError(f"Cannot read fixture {entry}: {e}", str(entry)) from e
            if has_box_method(text, settings.box_marker):
                yield Fixture(path=entry, text=text)
