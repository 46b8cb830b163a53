"""Output formatting for generation results."""

import json
from typing import Literal

from ..compiler.base import RuntimeProfile
from ..models import GeneratedTest, GenerationResult


def format_generation_result(
    result: GenerationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a generation result for output.

    Args:
        result: The generation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_result_json(result)
    return _format_result_text(result)


def format_fixture_listing(
    tests: list[GeneratedTest],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format the fixtures a run would turn into tests."""
    if format == "json":
        return json.dumps([_test_to_dict(t) for t in tests], indent=2)

    lines = [
        f"{t.method_name}  [{t.profile.value}]  {t.fixture_path}" for t in tests
    ]
    lines.append("")
    lines.append(f"{len(tests)} fixture(s)")
    return "\n".join(lines)


def _format_result_text(result: GenerationResult) -> str:
    lines: list[str] = []

    lines.append("COMPILED:")
    for profile in RuntimeProfile:
        stats = result.groups.get(profile)
        if stats is None:
            continue
        lines.append(
            f"  {profile.value}: {stats.compiled} fixture(s) in "
            f"{stats.flushes} batch(es), {stats.artifacts} artifact(s)"
        )

    lines.append("")
    lines.append(f"Generated {result.total_tests} tests in {result.source_path}")
    return "\n".join(lines)


def _format_result_json(result: GenerationResult) -> str:
    data = {
        "source_path": str(result.source_path) if result.source_path else None,
        "test_count": result.total_tests,
        "artifact_count": result.total_artifacts,
        "groups": {
            profile.value: {
                "flushes": stats.flushes,
                "compiled": stats.compiled,
                "artifacts": stats.artifacts,
            }
            for profile, stats in result.groups.items()
        },
        "tests": [_test_to_dict(t) for t in result.tests],
    }
    return json.dumps(data, indent=2)


def _test_to_dict(test: GeneratedTest) -> dict:
    return {
        "method": test.method_name,
        "fixture": str(test.fixture_path),
        "package": test.package_name,
        "profile": test.profile.value,
    }
