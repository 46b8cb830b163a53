"""Indentation-aware text printer."""

INDENT_UNIT = "    "


class Printer:
    """Accumulates source text with a block indentation level."""

    def __init__(self, indent_unit: str = INDENT_UNIT):
        self._parts: list[str] = []
        self._indent_unit = indent_unit
        self._indent = ""

    def print(self, *objects: object) -> "Printer":
        """Print the current indentation followed by the objects."""
        self._parts.append(self._indent)
        return self.print_with_no_indent(*objects)

    def print_with_no_indent(self, *objects: object) -> "Printer":
        self._parts.extend(str(o) for o in objects)
        return self

    def println(self, *objects: object) -> "Printer":
        """Print an indented line. With no objects, print an empty line."""
        if objects:
            self.print(*objects)
        self._parts.append("\n")
        return self

    def push_indent(self) -> "Printer":
        self._indent += self._indent_unit
        return self

    def pop_indent(self) -> "Printer":
        if not self._indent:
            raise ValueError("No indentation to pop")
        self._indent = self._indent[: -len(self._indent_unit)]
        return self

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.text
