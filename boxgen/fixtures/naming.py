"""Names and string literals derived from fixture paths."""

import re
from pathlib import Path

_PACKAGE_UNSAFE = re.compile(r"[\\/\-.]")
_NOT_IDENTIFIER_PART = re.compile(r"[^\w$]")

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}


def package_name_for(path: str | Path) -> str:
    """Derive a package name from a fixture path.

    Path separators, dashes and dots become underscores, so
    ``box/classes/inner-1.kt`` maps to ``box_classes_inner_1_kt``.
    """
    return _PACKAGE_UNSAFE.sub("_", str(path))


def escape_for_java_identifier(name: str) -> str:
    """Replace characters that cannot appear in a Java identifier."""
    return _NOT_IDENTIFIER_PART.sub("_", name)


def escape_string_characters(text: str) -> str:
    """Escape text for embedding in a Java string literal."""
    escaped = []
    for char in text:
        if char in _STRING_ESCAPES:
            escaped.append(_STRING_ESCAPES[char])
        elif ord(char) < 0x20:
            escaped.append(f"\\u{ord(char):04x}")
        else:
            escaped.append(char)
    return "".join(escaped)


def _capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def _name_without_extension(file_name: str) -> str:
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot else file_name


class NameRegistry:
    """Test method names generated so far in one run."""

    def __init__(self):
        self._names: set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def generate_test_name(self, file_name: str) -> str:
        """Turn a fixture file name into a unique test method suffix.

        ``simple.kt`` becomes ``Simple``; a second ``simple.kt`` elsewhere in
        the tree becomes ``Simple_0``, a third ``Simple_0_1``.
        """
        result = escape_for_java_identifier(
            _name_without_extension(_capitalize(file_name))
        )

        i = 0
        while result in self._names:
            result += f"_{i}"
            i += 1
        self._names.add(result)
        return result
