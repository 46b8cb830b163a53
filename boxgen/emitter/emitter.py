"""Emit the generated Java test class."""

import logging
from pathlib import Path

from ..config.models import GeneratedClassSettings
from ..fixtures.naming import escape_string_characters
from .errors import LicenseFileError, SourceWriteError
from .printer import Printer

logger = logging.getLogger(__name__)


class BoxTestEmitter:
    """Builds the source of the generated test class, one method per fixture.

    The class is assembled in memory and written once, after every
    fixture has been processed.
    """

    def __init__(self, settings: GeneratedClassSettings, license_file: str | Path):
        self.settings = settings
        self.license_file = Path(license_file)
        self.printer = Printer()
        self.test_names: list[str] = []
        self._written = False

    def begin(self) -> None:
        """Emit the license header, imports, and class declaration.

        Raises:
            LicenseFileError: If the license file cannot be read.
        """
        s = self.settings
        p = self.printer

        p.print(self._load_license())
        p.println(f"package {s.package};")
        p.println()
        p.println("import ", s.base_package, ".", s.base_name, ";")
        p.println()
        p.println(
            f"/* This class is generated by {s.generator_name}. DO NOT MODIFY MANUALLY */"
        )
        p.println("public class ", s.name, " extends ", s.base_name, " {")
        p.push_indent()

    def add_test_method(self, test_name: str, fixture_path: str | Path) -> None:
        """Emit a test method that runs the box method of one fixture."""
        s = self.settings
        p = self.printer
        path_literal = escape_string_characters(str(fixture_path))

        p.println(f"public void test{test_name}() throws Exception {{")
        p.push_indent()
        p.println(f'{s.helper_method}("{path_literal}", "{s.expected_result}");')
        p.pop_indent()
        p.println("}")
        p.println()
        self.test_names.append(test_name)

    def finish(self) -> None:
        """Close the class body."""
        self.printer.pop_indent()
        self.printer.println("}")

    @property
    def source(self) -> str:
        return self.printer.text

    def output_path(self, src_root: str | Path) -> Path:
        """Location of the generated file below a source root."""
        package_dir = Path(*self.settings.package.split("."))
        return Path(src_root) / package_dir / f"{self.settings.name}.java"

    def write(self, src_root: str | Path) -> Path:
        """Write the generated source below src_root.

        Returns:
            The path of the written file.
        """
        if self._written:
            raise RuntimeError("Generated test class has already been written")

        path = self.output_path(src_root)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.source, encoding="utf-8", newline="")
        except OSError as e:
            raise SourceWriteError(
                f"Cannot write generated test class {path}: {e}", str(path)
            ) from e
        self._written = True
        logger.info("Wrote %d test methods to %s", len(self.test_names), path)
        return path

    def _load_license(self) -> str:
        try:
            return self.license_file.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LicenseFileError(
                f"Cannot read license file: {self.license_file}", str(self.license_file)
            ) from e
