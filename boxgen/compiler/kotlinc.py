"""Compilation through the kotlinc command-line compiler."""

import logging
import os
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .base import CompilationEnvironment, Compiler, OutputFile, RuntimeProfile, SourceUnit
from .errors import CompilationError

if TYPE_CHECKING:
    from ..config.models import CompilerSettings

logger = logging.getLogger(__name__)


@dataclass
class KotlincEnvironment(CompilationEnvironment):
    """Environment that compiles its batch with one kotlinc invocation."""

    executable: str = "kotlinc"
    classpath: list[Path] = field(default_factory=list)
    extra_args: list[str] = field(default_factory=list)
    timeout: float | None = None
    module_name: str | None = None  # names META-INF/<module>.kotlin_module

    def build_command(self, sources: list[Path], destination: Path) -> list[str]:
        """Build the kotlinc command line for a batch."""
        command = [self.executable, *(str(s) for s in sources), "-d", str(destination)]
        if self.module_name:
            command += ["-module-name", self.module_name]
        if self.classpath:
            command += ["-classpath", os.pathsep.join(str(p) for p in self.classpath)]
        command += self.extra_args
        return command

    def compile(self, units: list[SourceUnit]) -> list[OutputFile]:
        with tempfile.TemporaryDirectory(prefix="boxgen-") as tmp:
            tmp_path = Path(tmp)
            sources = _write_sources(units, tmp_path / "src")
            destination = tmp_path / "out"
            destination.mkdir()

            command = self.build_command(sources, destination)
            logger.debug("Running %s on %d sources", self.executable, len(sources))
            try:
                completed = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except FileNotFoundError as e:
                raise CompilationError(
                    f"Compiler executable not found: {self.executable}",
                    profile=self.profile,
                ) from e
            except subprocess.TimeoutExpired as e:
                raise CompilationError(
                    f"Compilation of {len(units)} files timed out after {self.timeout}s",
                    profile=self.profile,
                ) from e

            if completed.returncode != 0:
                raise CompilationError(
                    f"kotlinc exited with code {completed.returncode} "
                    f"while compiling {len(units)} files",
                    profile=self.profile,
                    stderr=completed.stderr,
                )

            return _collect_outputs(destination)


def _write_sources(units: list[SourceUnit], directory: Path) -> list[Path]:
    """Write each unit into its own numbered subdirectory."""
    paths = []
    for index, unit in enumerate(units):
        unit_dir = directory / str(index)
        unit_dir.mkdir(parents=True)
        path = unit_dir / unit.name
        path.write_text(unit.text, encoding="utf-8")
        paths.append(path)
    return paths


def _collect_outputs(directory: Path) -> list[OutputFile]:
    return [
        OutputFile(
            relative_path=path.relative_to(directory).as_posix(),
            content=path.read_bytes(),
        )
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    ]


class KotlincCompiler(Compiler):
    """Creates kotlinc environments configured per runtime profile."""

    def __init__(self, settings: "CompilerSettings"):
        self.settings = settings
        self._created = 0

    def create_environment(self, profile: RuntimeProfile) -> KotlincEnvironment:
        profile_settings = self.settings.for_profile(profile)
        self._created += 1
        return KotlincEnvironment(
            profile=profile,
            executable=self.settings.executable,
            classpath=list(profile_settings.classpath),
            extra_args=list(profile_settings.extra_args),
            timeout=self.settings.timeout,
            module_name=f"boxgen_{profile.value}_{self._created}",
        )
