"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from expectation_matchers.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from expectation_matchers.value_checking import (
    CheckExecutionError,
    CheckRequest,
    execute_value_check,
)


class CliError(Exception):
    """Custom CLI error."""


class ValueCheckFailed(Exception):
    """At least one checked value did not satisfy its expectation."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="expectation-matchers")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Membership expectation checker."""
    if verbose:
        handler = _enable_debug_logging()
        ctx.call_on_close(lambda: _disable_debug_logging(handler))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the allowed-values YAML template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder allowed-values YAML file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--allowed",
    "allowed_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the allowed-values YAML file",
)
@click.option(
    "--set",
    "set_name",
    required=False,
    help="Name of the allowed set to check against",
)
@click.option(
    "--negate",
    is_flag=True,
    default=False,
    help="Expect the values NOT to be one of the allowed values.",
)
@click.argument("values", nargs=-1, required=True)
def check(allowed_path: str, set_name: str | None, negate: bool, values: tuple[str, ...]) -> None:
    """Check that every VALUE is one of the allowed values."""
    try:
        outcome = execute_value_check(
            CheckRequest(
                allowed_path=allowed_path,
                raw_values=tuple(values),
                set_name=set_name,
                negate=negate,
            )
        )
    except CheckExecutionError as exc:
        raise CliError(str(exc)) from exc
    for result in outcome.results:
        if result.passed:
            click.echo(f"ok: {result.raw_value}")
        else:
            click.echo(f"failed: {result.raw_value}: {result.message}", err=True)
    if not outcome.all_passed:
        raise ValueCheckFailed()


def _enable_debug_logging() -> logging.Handler:
    package_logger = logging.getLogger("expectation_matchers")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def _disable_debug_logging(handler: logging.Handler) -> None:
    package_logger = logging.getLogger("expectation_matchers")
    package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except ValueCheckFailed:
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
