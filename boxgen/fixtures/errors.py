"""Fixture discovery exceptions."""


class FixtureDirectoryError(Exception):
    """Raised when a fixture root is missing or has nothing to list."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class FixtureReadError(Exception):
    """Raised when a fixture file cannot be read as UTF-8 text."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
