"""stringext command line interface."""

from __future__ import annotations

import sys
import traceback
from pathlib import Path

import click

from stringext import __version__
from stringext.config import StringExtConfig
from stringext.errors import StringExtError
from stringext.normalize.numbers import NumericParser, ParserConfig


def handle_error(error: Exception, debug: bool) -> None:
    """Handle errors with structured output.

    Args:
        error: The exception that occurred
        debug: Whether to show full traceback
    """
    if debug:
        traceback.print_exc()
    else:
        click.echo(f"Error: {error}", err=True)
    sys.exit(1)


# Lets negative values such as -1234 through as VALUE instead of unknown options.
NUMERIC_CONTEXT = {'ignore_unknown_options': True}


def _format(value: int | float | None) -> str:
    return "null" if value is None else str(value)


@click.group()
@click.version_option(version=__version__, prog_name="stringext")
@click.option('--config', '-c', type=click.Path(exists=True, path_type=Path), help='YAML config file')
@click.option('--debug', is_flag=True, help='Enable debug mode (show full tracebacks)')
@click.pass_context
def cli(ctx: click.Context, config: Path | None, debug: bool):
    """stringext - lenient number parsing and password hashing."""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    try:
        settings = StringExtConfig.from_file(config) if config else StringExtConfig.from_env()
    except (ValueError, OSError) as e:
        handle_error(e, debug)

    settings.configure_logging()
    ctx.obj['config'] = settings


@cli.command('parse-int', context_settings=NUMERIC_CONTEXT)
@click.argument('value')
@click.option('--default', '-d', type=int, default=None, help='Value returned when parsing fails')
@click.option('--nullable', is_flag=True, help='Print null for blank input instead of failing')
@click.pass_context
def parse_int_cmd(ctx: click.Context, value: str, default: int | None, nullable: bool):
    """Parse VALUE as an integer."""
    parser = ctx.obj['config'].build_parser()
    try:
        if nullable:
            result = parser.parse_nullable_int(value, default)
        else:
            result = parser.parse_int(value, default)
    except StringExtError as e:
        handle_error(e, ctx.obj['debug'])

    click.echo(_format(result))


@cli.command('parse-double', context_settings=NUMERIC_CONTEXT)
@click.argument('value')
@click.option('--default', '-d', type=float, default=None, help='Value returned when parsing fails')
@click.option('--nullable', is_flag=True, help='Print null for blank input instead of failing')
@click.option('--separator', '-s', type=str, default=None, help='Decimal separator (overrides config)')
@click.pass_context
def parse_double_cmd(
    ctx: click.Context,
    value: str,
    default: float | None,
    nullable: bool,
    separator: str | None,
):
    """Parse VALUE as a floating-point number."""
    config: StringExtConfig = ctx.obj['config']
    try:
        if separator is not None:
            parser = NumericParser(ParserConfig(decimal_separator=separator, noise=config.parser.noise))
        else:
            parser = config.build_parser()

        if nullable:
            result = parser.parse_nullable_double(value, default)
        else:
            result = parser.parse_double(value, default)
    except (StringExtError, ValueError) as e:
        handle_error(e, ctx.obj['debug'])

    click.echo(_format(result))


@cli.command('hash-password')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--iterations', '-n', type=click.IntRange(min=1), default=None,
              help='PBKDF2 iterations (overrides config)')
@click.pass_context
def hash_password_cmd(ctx: click.Context, password: str, iterations: int | None):
    """Hash a password and print the encoded result."""
    hasher = ctx.obj['config'].build_hasher()
    click.echo(hasher.hash(password, iterations))


@cli.command('verify-password')
@click.argument('encoded')
@click.option('--password', prompt=True, hide_input=True)
@click.option('--iterations', '-n', type=click.IntRange(min=1), default=None,
              help='PBKDF2 iterations (overrides config)')
@click.pass_context
def verify_password_cmd(ctx: click.Context, encoded: str, password: str, iterations: int | None):
    """Verify a password against ENCODED.

    Exits 0 on match and 2 on mismatch.
    """
    hasher = ctx.obj['config'].build_hasher()
    try:
        matched = hasher.verify(encoded, password, iterations)
    except StringExtError as e:
        handle_error(e, ctx.obj['debug'])

    if matched:
        click.echo("OK")
        return

    click.echo("MISMATCH", err=True)
    sys.exit(2)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == '__main__':
    main()
