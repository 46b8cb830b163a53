"""Main box test generation orchestrator."""

import logging
import shutil
from pathlib import Path

from .compiler.base import Compiler
from .compiler.batcher import BatchPolicy, FixtureBatcher
from .compiler.kotlinc import KotlincCompiler
from .config.loader import load_config
from .config.models import GeneratorConfig
from .emitter.emitter import BoxTestEmitter
from .fixtures.classifier import iter_fixtures
from .fixtures.models import Fixture
from .fixtures.naming import NameRegistry
from .fixtures.rewriter import change_package
from .models import GeneratedTest, GenerationPhase, GenerationResult, GroupStats

logger = logging.getLogger(__name__)


class RuntimeJarError(Exception):
    """Raised when the runtime jar cannot be copied into the module."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class BoxTestGenerator:
    """Compiles box fixtures and generates the test class that runs them.

    A run prepares the module's library folders, then walks every fixture
    root once, compiling accepted fixtures in batches and emitting one test
    method per fixture. Failures abort the run; output written before the
    failure is left in place.
    """

    def __init__(self, config: GeneratorConfig, compiler: Compiler | None = None):
        self.config = config
        self.compiler = compiler or KotlincCompiler(config.compiler)
        self.phase = GenerationPhase.IDLE

    def generate(self) -> GenerationResult:
        """Run the whole pipeline.

        Returns:
            GenerationResult describing the emitted tests and compiled batches.
        """
        try:
            self.phase = GenerationPhase.PREPARING
            self.prepare_module()

            self.phase = GenerationPhase.GENERATING
            result = self.generate_and_save()
        except Exception:
            self.phase = GenerationPhase.ABORTED
            raise

        self.phase = GenerationPhase.DONE
        return result

    def prepare_module(self) -> None:
        """Copy the runtime jar and make sure the library folders exist."""
        paths = self.config.paths

        logger.info("Copying %s in android module...", paths.runtime_jar_name)
        if not paths.runtime_jar.is_file():
            raise RuntimeJarError(
                f"Runtime jar not found: {paths.runtime_jar}", str(paths.runtime_jar)
            )
        target = paths.libs_folder / paths.runtime_jar_name
        try:
            paths.libs_folder.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(paths.runtime_jar, target)
        except OSError as e:
            raise RuntimeJarError(
                f"Cannot copy runtime jar to {target}: {e}", str(target)
            ) from e

        logger.info('Check "libs" folder in tested android module...')
        try:
            paths.tested_module_libs_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RuntimeJarError(
                f"Cannot create libs folder {paths.tested_module_libs_folder}: {e}",
                str(paths.tested_module_libs_folder),
            ) from e

    def generate_and_save(self) -> GenerationResult:
        """Compile every fixture and write the generated test class."""
        logger.info("Generating test files...")
        emitter = BoxTestEmitter(self.config.generated_class, self.config.paths.license_file)
        emitter.begin()

        batcher = FixtureBatcher(
            self.compiler,
            self.config.paths.compiled_output,
            BatchPolicy(self.config.batching.flush_threshold),
        )
        names = NameRegistry()
        result = GenerationResult()

        for root in self.config.fixtures.roots:
            batcher.maybe_flush()
            for fixture in iter_fixtures(root, self.config.fixtures):
                result.tests.append(self._process_fixture(fixture, emitter, batcher, names))

        batcher.flush_all()

        emitter.finish()
        result.source_path = emitter.write(self.config.paths.src_folder)
        result.groups = {
            profile: GroupStats(
                flushes=group.flush_count,
                compiled=group.compiled_count,
                artifacts=group.artifact_count,
            )
            for profile, group in batcher.groups.items()
        }
        return result

    def _process_fixture(
        self,
        fixture: Fixture,
        emitter: BoxTestEmitter,
        batcher: FixtureBatcher,
        names: NameRegistry,
    ) -> GeneratedTest:
        test_name = names.generate_test_name(fixture.file_name)
        profile = fixture.profile(self.config.fixtures.full_jdk_marker)
        text = change_package(fixture.package_name, fixture.text)

        batcher.add(profile, fixture.file_name, text)
        emitter.add_test_method(test_name, fixture.path)

        return GeneratedTest(
            name=test_name,
            fixture_path=fixture.path,
            package_name=fixture.package_name,
            profile=profile,
        )


def collect_fixtures(config: GeneratorConfig) -> list[GeneratedTest]:
    """Classify and name fixtures without compiling or writing anything."""
    names = NameRegistry()
    tests = []
    for root in config.fixtures.roots:
        for fixture in iter_fixtures(root, config.fixtures):
            tests.append(
                GeneratedTest(
                    name=names.generate_test_name(fixture.file_name),
                    fixture_path=fixture.path,
                    package_name=fixture.package_name,
                    profile=fixture.profile(config.fixtures.full_jdk_marker),
                )
            )
    return tests


def generate(config: GeneratorConfig, compiler: Compiler | None = None) -> GenerationResult:
    """Run a generation with the given configuration."""
    return BoxTestGenerator(config, compiler).generate()


def generate_from_file(
    path: str | Path, compiler: Compiler | None = None
) -> GenerationResult:
    """Generate from a YAML configuration file.

    Convenience wrapper that loads the configuration first.
    """
    return generate(load_config(path), compiler)
