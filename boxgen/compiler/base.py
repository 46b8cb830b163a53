"""Contract between the generator and an external compiler."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class RuntimeProfile(str, Enum):
    """Runtime a fixture is compiled against."""

    MOCK_JDK = "mock_jdk"
    FULL_JDK = "full_jdk"


@dataclass(frozen=True)
class SourceUnit:
    """A fixture parsed into a compilation environment."""

    name: str  # file name, e.g. Simple.kt
    text: str
    profile: RuntimeProfile


@dataclass(frozen=True)
class OutputFile:
    """A compiled artifact, relative to the output directory."""

    relative_path: str  # e.g. pkg/SimpleKt.class
    content: bytes


@dataclass
class CompilationEnvironment(ABC):
    """Holds the project that parsed fixtures belong to.

    An environment accumulates state across parses, so batchers throw it
    away after each compilation and ask the compiler for a fresh one.
    """

    profile: RuntimeProfile
    project: list[SourceUnit] = field(default_factory=list)

    def parse(self, name: str, text: str) -> SourceUnit:
        """Parse fixture text into this environment's project."""
        unit = SourceUnit(name=name, text=text, profile=self.profile)
        self.project.append(unit)
        return unit

    @abstractmethod
    def compile(self, units: list[SourceUnit]) -> list[OutputFile]:
        """Compile the given units together as one batch."""


class Compiler(ABC):
    """Factory for compilation environments."""

    @abstractmethod
    def create_environment(self, profile: RuntimeProfile) -> CompilationEnvironment:
        """Create a fresh environment for a runtime profile."""


def write_all_to(outputs: list[OutputFile], directory: Path) -> None:
    """Write compiled artifacts below a directory, creating subdirectories."""
    for output in outputs:
        target = directory / output.relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(output.content)
    logger.debug("Wrote %d artifacts to %s", len(outputs), directory)
