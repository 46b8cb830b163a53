"""Command-line interface for boxgen."""

import logging
import sys

import click

from .compiler.errors import CompilationError, OutputDirectoryError
from .config.errors import ConfigLoadError, ConfigValidationError
from .config.loader import load_config
from .emitter.errors import LicenseFileError, SourceWriteError
from .fixtures.errors import FixtureDirectoryError, FixtureReadError
from .output.formatter import format_fixture_listing, format_generation_result


def _load_config_or_exit(config_file: str):
    try:
        return load_config(config_file)
    except ConfigLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except ConfigValidationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(package_name="boxgen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress")
def main(verbose: bool):
    """boxgen: generate box tests from compiler test fixtures."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


@main.command()
@click.argument("config_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def generate(config_file: str, output_format: str):
    """Compile fixtures and write the generated test class.

    CONFIG_FILE is the path to a YAML configuration file.

    Exit codes:
      0 - Success
      1 - Compilation failed
      2 - Configuration or file system error
    """
    from .generator import BoxTestGenerator, RuntimeJarError

    config = _load_config_or_exit(config_file)
    generator = BoxTestGenerator(config)

    try:
        result = generator.generate()
    except CompilationError as e:
        click.echo(f"Compilation failed: {e}", err=True)
        if e.stderr:
            click.echo(e.stderr, err=True)
        sys.exit(1)
    except (
        FixtureDirectoryError,
        FixtureReadError,
        LicenseFileError,
        OutputDirectoryError,
        RuntimeJarError,
        SourceWriteError,
    ) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(format_generation_result(result, output_format))  # type: ignore
    sys.exit(0)


@main.command("list-fixtures")
@click.argument("config_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def list_fixtures(config_file: str, output_format: str):
    """List the fixtures that would become tests, without compiling.

    CONFIG_FILE is the path to a YAML configuration file.
    """
    from .generator import collect_fixtures

    config = _load_config_or_exit(config_file)
    try:
        tests = collect_fixtures(config)
    except (FixtureDirectoryError, FixtureReadError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(format_fixture_listing(tests, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
