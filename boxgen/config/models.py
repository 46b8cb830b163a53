"""Pydantic models for generator configuration."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from ..compiler.base import RuntimeProfile


class PathSettings(BaseModel):
    """Locations read and written by a generation run."""

    runtime_jar: Path = Path("dist/kotlinc/lib/kotlin-runtime.jar")
    runtime_jar_name: str = "kotlin-runtime.jar"
    libs_folder: Path = Path("android-tests-tmp/libs")
    tested_module_libs_folder: Path = Path("android-tests-tmp/tested-module/libs")
    src_folder: Path = Path("android-tests-tmp/src")
    compiled_output: Path = Path("android-tests-tmp/libs/codegen-test-output")
    license_file: Path = Path("license/LICENSE.txt")


class FixtureSettings(BaseModel):
    """Where fixtures live and how they are recognized."""

    roots: list[Path] = Field(
        default_factory=lambda: [
            Path("compiler/testData/codegen/box"),
            Path("compiler/testData/codegen/boxWithStdlib"),
        ]
    )
    extension: str = "kt"
    box_marker: str = "fun box()"
    full_jdk_marker: str = "boxWithStdlib"
    excluded_files: set[str] = Field(default_factory=set)
    sort_fixtures: bool = False

    @field_validator("roots", "excluded_files", mode="before")
    @classmethod
    def normalize_single_value(cls, value):
        """Accept a bare string where a list is expected."""
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("extension")
    @classmethod
    def strip_leading_dot(cls, value: str) -> str:
        return value.lstrip(".")


class GeneratedClassSettings(BaseModel):
    """Shape of the generated test class."""

    package: str = "org.jetbrains.kotlin.android.tests"
    name: str = "CodegenTestCaseOnAndroid"
    base_package: str = "org.jetbrains.kotlin.android.tests"
    base_name: str = "AbstractCodegenTestCaseOnAndroid"
    generator_name: str = "boxgen"
    helper_method: str = "invokeBoxMethod"
    expected_result: str = "OK"


class BatchSettings(BaseModel):
    """Compilation batching."""

    flush_threshold: int = Field(default=300, ge=1)


class ProfileSettings(BaseModel):
    """Compiler arguments for one runtime profile.

    Both profiles compile against the JDK kotlinc runs on unless told
    otherwise. To compile against a mock JDK, put its jars on the classpath
    and add ``-no-jdk`` to extra_args.
    """

    classpath: list[Path] = Field(default_factory=list)
    extra_args: list[str] = Field(default_factory=list)


def _default_profiles() -> dict[RuntimeProfile, ProfileSettings]:
    return {
        RuntimeProfile.MOCK_JDK: ProfileSettings(),
        RuntimeProfile.FULL_JDK: ProfileSettings(),
    }


class CompilerSettings(BaseModel):
    """Settings for the external kotlinc compiler."""

    executable: str = "kotlinc"
    timeout: float | None = None
    profiles: dict[RuntimeProfile, ProfileSettings] = Field(
        default_factory=_default_profiles
    )

    @model_validator(mode="after")
    def fill_missing_profiles(self) -> "CompilerSettings":
        """Make sure every runtime profile has settings."""
        for profile, settings in _default_profiles().items():
            self.profiles.setdefault(profile, settings)
        return self

    def for_profile(self, profile: RuntimeProfile) -> ProfileSettings:
        """Get the settings for a runtime profile."""
        return self.profiles[profile]


class GeneratorConfig(BaseModel):
    """Root model for a boxgen configuration file."""

    paths: PathSettings = Field(default_factory=PathSettings)
    fixtures: FixtureSettings = Field(default_factory=FixtureSettings)
    generated_class: GeneratedClassSettings = Field(
        default_factory=GeneratedClassSettings
    )
    batching: BatchSettings = Field(default_factory=BatchSettings)
    compiler: CompilerSettings = Field(default_factory=CompilerSettings)
