"""Shared fixtures for tests."""

import re
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from boxgen.compiler.base import (
    CompilationEnvironment,
    Compiler,
    OutputFile,
    RuntimeProfile,
    SourceUnit,
)
from boxgen.config.models import GeneratorConfig

BOX_SOURCE = """fun box(): String {
    return "OK"
}
"""

LICENSE_TEXT = "/*\n * Licensed under the Apache License, Version 2.0\n */\n\n"

_PACKAGE = re.compile(r"^package\s+([^\s;]+)", re.MULTILINE)


@dataclass
class FakeEnvironment(CompilationEnvironment):
    """Environment that turns each unit into one fake class file."""

    compiler: "FakeCompiler | None" = field(default=None, repr=False, compare=False)

    def compile(self, units: list[SourceUnit]) -> list[OutputFile]:
        assert self.compiler is not None
        if self.compiler.fail_with is not None:
            raise self.compiler.fail_with
        self.compiler.batches.append((self.profile, [u.name for u in units]))
        outputs = []
        for unit in units:
            match = _PACKAGE.search(unit.text)
            package_dir = match.group(1).replace(".", "/") if match else ""
            class_name = unit.name.rsplit(".", 1)[0] + "Kt.class"
            outputs.append(
                OutputFile(
                    relative_path=f"{package_dir}/{class_name}".lstrip("/"),
                    content=unit.text.encode("utf-8"),
                )
            )
        return outputs


@dataclass
class FakeCompiler(Compiler):
    """In-memory compiler that records every compiled batch."""

    batches: list[tuple[RuntimeProfile, list[str]]] = field(default_factory=list)
    environments: list[FakeEnvironment] = field(default_factory=list)
    fail_with: Exception | None = None

    def create_environment(self, profile: RuntimeProfile) -> FakeEnvironment:
        environment = FakeEnvironment(profile=profile, compiler=self)
        self.environments.append(environment)
        return environment


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    """Return a fresh fake compiler."""
    return FakeCompiler()


@pytest.fixture
def box_source() -> str:
    """Return the text of a minimal box fixture."""
    return BOX_SOURCE


def write_fixture(path: Path, text: str = BOX_SOURCE) -> Path:
    """Write a fixture file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path) -> Path:
    """Lay out a project with fixture roots, a license, and a runtime jar.

    box/ holds Simple.kt, nested/Inner.kt and a non-box helper;
    boxWithStdlib/ holds Collections.kt.
    """
    write_fixture(tmp_path / "testData" / "box" / "Simple.kt")
    write_fixture(tmp_path / "testData" / "box" / "nested" / "Inner.kt")
    write_fixture(tmp_path / "testData" / "box" / "helper.kt", "fun helper() = 1\n")
    write_fixture(tmp_path / "testData" / "box" / "notes.txt", "fun box()")
    write_fixture(tmp_path / "testData" / "boxWithStdlib" / "Collections.kt")

    (tmp_path / "license").mkdir()
    (tmp_path / "license" / "LICENSE.txt").write_text(LICENSE_TEXT)

    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "kotlin-runtime.jar").write_bytes(b"PK\x03\x04runtime")
    return tmp_path


@pytest.fixture
def workspace_config(workspace) -> GeneratorConfig:
    """Return a configuration pointing at the workspace."""
    return config_for(workspace)


def config_for(root: Path, **fixture_overrides) -> GeneratorConfig:
    """Build a configuration rooted at a directory."""
    fixtures = {
        "roots": [root / "testData" / "box", root / "testData" / "boxWithStdlib"],
        "sort_fixtures": True,
    }
    fixtures.update(fixture_overrides)
    return GeneratorConfig.model_validate(
        {
            "paths": {
                "runtime_jar": root / "dist" / "kotlin-runtime.jar",
                "libs_folder": root / "android" / "libs",
                "tested_module_libs_folder": root / "android" / "tested" / "libs",
                "src_folder": root / "android" / "src",
                "compiled_output": root / "android" / "libs" / "compiled",
                "license_file": root / "license" / "LICENSE.txt",
            },
            "fixtures": fixtures,
        }
    )


@pytest.fixture
def make_config():
    """Return the config_for helper."""
    return config_for


@pytest.fixture
def make_fixture():
    """Return the write_fixture helper."""
    return write_fixture
