"""
samlex - SAM Token Dump Command-Line Interface
==============================================

This module implements the command-line interface for the SAM scanner.
It prints the tokens of a source file one per line, in the order the
scanner produces them, ending with EOF.

Usage Examples
--------------
Dump all tokens:
    $ samlex hello.sam
    token_type:(var) line..1
    token_type:(Identifier(x)) line..1
    ...
    token_type:(EOF) line..2

Count tokens only:
    $ samlex --count hello.sam

Latin-1 source with scanner debug logging:
    $ samlex -v --encoding latin-1 hello.sam
"""

import logging
from pathlib import Path

import click

from samlang import __version__
from samlang.cli.errors import handle_cli_exception
from samlang.lexer import Scanner, ScannerOptions


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token_line(token) -> str:
    """Format one token the way the dump prints it."""
    return f"token_type:({token.display()}) line..{token.line}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the source file",
)
@click.option(
    "-c", "--count",
    is_flag=True,
    help="Print only the number of tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (scanner debug logging)",
)
@click.version_option(version=__version__, prog_name="samlex")
def main(
    input_file: Path,
    encoding: str,
    count: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a SAM source file.

    INPUT_FILE is the SAM source file (.sam) to scan.

    \b
    Examples:
        samlex hello.sam             # One line per token
        samlex --count hello.sam     # Token count only
        samlex -v hello.sam          # With debug logging

    Scanning stops at the first lexical error, which is reported with
    its line and column. Exit status is 1 for lexical and read errors
    and 2 for missing or empty files.
    """
    setup_logging(verbose)
    options = ScannerOptions(encoding=encoding)

    try:
        logger.debug(f"Scanning {input_file}")

        with Scanner.open(input_file, options) as scanner:
            for token in scanner.tokenize():
                if not count:
                    click.echo(format_token_line(token))

            if count:
                click.echo(
                    f"{scanner.token_count} tokens (EOF at line {scanner.line_number})"
                )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Read")


if __name__ == "__main__":
    main()
