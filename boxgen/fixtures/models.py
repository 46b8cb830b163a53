"""Data models for fixture discovery."""

from dataclasses import dataclass
from pathlib import Path

from ..compiler.base import RuntimeProfile
from .naming import package_name_for


@dataclass(frozen=True)
class Fixture:
    """A fixture file accepted for box testing."""

    path: Path  # as traversed, relative when the root is relative
    text: str

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def package_name(self) -> str:
        return package_name_for(self.path)

    def profile(self, full_jdk_marker: str) -> RuntimeProfile:
        """Runtime profile, chosen by the fixture's canonical path."""
        if full_jdk_marker in str(self.path.resolve()):
            return RuntimeProfile.FULL_JDK
        return RuntimeProfile.MOCK_JDK
