"""Data models for a generation run."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .compiler.base import RuntimeProfile


class GenerationPhase(Enum):
    """Where a generation run currently is."""

    IDLE = "idle"
    PREPARING = "preparing"
    GENERATING = "generating"  # classifying, compiling, and emitting
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class GeneratedTest:
    """A test method emitted for one fixture."""

    name: str  # method suffix, e.g. Simple -> testSimple
    fixture_path: Path
    package_name: str
    profile: RuntimeProfile

    @property
    def method_name(self) -> str:
        return f"test{self.name}"


@dataclass
class GroupStats:
    """Compilation counters for one runtime profile."""

    flushes: int = 0
    compiled: int = 0
    artifacts: int = 0


@dataclass
class GenerationResult:
    """Result of a generation run."""

    tests: list[GeneratedTest] = field(default_factory=list)
    source_path: Path | None = None
    groups: dict[RuntimeProfile, GroupStats] = field(default_factory=dict)

    @property
    def total_tests(self) -> int:
        return len(self.tests)

    @property
    def total_artifacts(self) -> int:
        return sum(g.artifacts for g in self.groups.values())

    def tests_for(self, profile: RuntimeProfile) -> list[GeneratedTest]:
        """Tests whose fixtures compiled against the given profile."""
        return [t for t in self.tests if t.profile == profile]
