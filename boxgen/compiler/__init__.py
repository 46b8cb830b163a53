"""Compilation of fixtures through an external compiler."""

from .base import (
    CompilationEnvironment,
    Compiler,
    OutputFile,
    RuntimeProfile,
    SourceUnit,
    write_all_to,
)
from .batcher import BatchPolicy, FixtureBatcher, FixtureGroup
from .errors import CompilationError, CompilerError, OutputDirectoryError
from .kotlinc import KotlincCompiler, KotlincEnvironment

__all__ = [
    "CompilationEnvironment",
    "Compiler",
    "OutputFile",
    "RuntimeProfile",
    "SourceUnit",
    "write_all_to",
    "BatchPolicy",
    "FixtureBatcher",
    "FixtureGroup",
    "CompilationError",
    "CompilerError",
    "OutputDirectoryError",
    "KotlincCompiler",
    "KotlincEnvironment",
]
