"""Exceptions raised while emitting the generated test class."""


class LicenseFileError(Exception):
    """Raised when the license header file cannot be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SourceWriteError(Exception):
    """Raised when the generated test class cannot be written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
