"""Generated test-source emission."""

from .emitter import BoxTestEmitter
from .errors import LicenseFileError, SourceWriteError
from .printer import Printer

__all__ = ["BoxTestEmitter", "LicenseFileError", "Printer", "SourceWriteError"]
