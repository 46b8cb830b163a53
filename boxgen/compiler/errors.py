"""Exception classes for compilation."""

from .base import RuntimeProfile


class CompilerError(Exception):
    """Base exception for compilation failures."""

    pass


class CompilationError(CompilerError):
    """Raised when a batch of fixtures fails to compile."""

    def __init__(
        self,
        message: str,
        profile: RuntimeProfile | None = None,
        stderr: str | None = None,
    ):
        self.profile = profile
        self.stderr = stderr
        super().__init__(message)


class OutputDirectoryError(CompilerError):
    """Raised when the directory for compiled files cannot be created."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
