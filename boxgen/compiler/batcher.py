"""Batch fixtures per runtime profile and flush them through the compiler.

Compiling every fixture in one giant batch keeps all of them, and the
compiler state built while parsing them, in memory at once. Instead each
profile accumulates a bounded batch that is compiled, written to disk and
dropped together with its environment.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .base import CompilationEnvironment, Compiler, RuntimeProfile, SourceUnit, write_all_to
from .errors import CompilationError, OutputDirectoryError

logger = logging.getLogger(__name__)

DEFAULT_FLUSH_THRESHOLD = 300


@dataclass(frozen=True)
class BatchPolicy:
    """Decides when a group has accumulated enough fixtures to compile."""

    threshold: int = DEFAULT_FLUSH_THRESHOLD

    def should_flush(self, pending_count: int) -> bool:
        return pending_count >= self.threshold


class FixtureGroup:
    """Pending fixtures and the compilation environment for one profile."""

    def __init__(
        self,
        profile: RuntimeProfile,
        compiler: Compiler,
        output_dir: Path,
        policy: BatchPolicy | None = None,
    ):
        self.profile = profile
        self.compiler = compiler
        self.output_dir = Path(output_dir)
        self.policy = policy or BatchPolicy()
        self.pending: list[SourceUnit] = []
        self.environment: CompilationEnvironment = compiler.create_environment(profile)
        self.flush_count = 0
        self.compiled_count = 0
        self.artifact_count = 0

    def add(self, name: str, text: str) -> SourceUnit:
        """Parse fixture text into the current environment and queue it."""
        unit = self.environment.parse(name, text)
        self.pending.append(unit)
        self.maybe_flush()
        return unit

    def maybe_flush(self) -> bool:
        """Flush if the batch policy says so. Returns whether it flushed."""
        if self.policy.should_flush(len(self.pending)):
            self.flush()
            return True
        return False

    def flush(self) -> None:
        """Compile pending fixtures, write the artifacts, and reset state."""
        if not self.pending:
            return

        logger.info("Generating %d files...", len(self.pending))
        try:
            outputs = self.environment.compile(self.pending)
        except CompilationError:
            raise
        except Exception as e:
            raise CompilationError(
                f"Failed to compile {len(self.pending)} {self.profile.value} fixtures: {e}",
                profile=self.profile,
            ) from e

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(
                f"Cannot create directory for compiled files: {self.output_dir}",
                str(self.output_dir),
            ) from e
        try:
            write_all_to(outputs, self.output_dir)
        except OSError as e:
            raise OutputDirectoryError(
                f"Cannot write compiled files to {self.output_dir}: {e}",
                str(self.output_dir),
            ) from e

        self.flush_count += 1
        self.compiled_count += len(self.pending)
        self.artifact_count += len(outputs)
        self.pending = []
        self.environment = self.compiler.create_environment(self.profile)


class FixtureBatcher:
    """Routes fixtures into one group per runtime profile."""

    def __init__(
        self,
        compiler: Compiler,
        output_dir: Path,
        policy: BatchPolicy | None = None,
    ):
        self.groups: dict[RuntimeProfile, FixtureGroup] = {
            profile: FixtureGroup(profile, compiler, output_dir, policy)
            for profile in RuntimeProfile
        }

    def group(self, profile: RuntimeProfile) -> FixtureGroup:
        return self.groups[profile]

    def add(self, profile: RuntimeProfile, name: str, text: str) -> SourceUnit:
        """Queue fixture text in the group for its profile."""
        return self.groups[profile].add(name, text)

    def maybe_flush(self) -> None:
        """Flush every group the batch policy considers full."""
        for profile in (RuntimeProfile.FULL_JDK, RuntimeProfile.MOCK_JDK):
            self.groups[profile].maybe_flush()

    def flush_all(self) -> None:
        """Flush both groups unconditionally, full JDK first."""
        for profile in (RuntimeProfile.FULL_JDK, RuntimeProfile.MOCK_JDK):
            self.groups[profile].flush()
