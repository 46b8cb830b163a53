"""Move fixtures into their own packages."""

import re

# Line-leading package header; the name runs up to whitespace or ';'.
PACKAGE_PATTERN = re.compile(r"^([ \t]*package[ \t]+)[^\s;]+", re.MULTILINE)


def change_package(package_name: str, text: str) -> str:
    """Point every package declaration in the text at package_name.

    Text without a declaration gets one prepended, so that fixtures which
    declare the same top-level names compile side by side.

    Args:
        package_name: The package the fixture should live in.
        text: The fixture source.

    Returns:
        The rewritten source.
    """
    if PACKAGE_PATTERN.search(text):
        return PACKAGE_PATTERN.sub(
            lambda m: m.group(1) + package_name, text
        )
    return f"package {package_name};\n{text}"
