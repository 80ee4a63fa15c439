"""
adascan - Mini-Ada Scanner Command-Line Interface
=================================================

This module implements the command-line interface for the Mini-Ada
scanner. It reads a source file and prints its token stream, one token
per line, ending with the EOF token.

Usage Examples
--------------
Print tokens:
    $ adascan program.ada
    (line 1): procedure : procedure
    (line 1): identifier : Main
    ...

JSON output to a file:
    $ adascan program.ada --format json -o tokens.json

Stop at the first lexical error (the tokens before it are still printed):
    $ adascan --strict program.ada

Exit Codes
----------
0 - Success, no error tokens
1 - The source contained lexical errors
2 - Invalid arguments or unreadable input
3 - Internal error
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from miniada import __version__
from miniada.cli.errors import ExitCode, handle_cli_exception
from miniada.config import ScanOptions
from miniada.errors import ErrorCollector, ScanError, error_from_token
from miniada.scanner import tokenize_file
from miniada.tokens import Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def render_tokens(tokens: list[Token], output_format: str) -> str:
    """Render a token list as text lines or a JSON array."""
    if output_format == "json":
        return json.dumps([token.to_dict() for token in tokens], indent=2)
    return "\n".join(str(token) for token in tokens)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Stop at the first lexical error (tokens before it are still printed)",
)
@click.option(
    "--start-line",
    type=click.IntRange(min=1),
    default=None,
    help="Line number of the first input line (default: 1)",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="adascan")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: str,
    strict: bool,
    start_line: Optional[int],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Scan Mini-Ada source code and print its tokens.

    INPUT_FILE is the Mini-Ada source file to scan.

    Each token is printed as "(line N): class : lexeme". Lexical errors
    are printed as tokens of class "error" and also reported on stderr.

    \b
    Examples:
        adascan prog.ada                  # Tokens to stdout
        adascan prog.ada -o prog.tok      # Tokens to a file
        adascan prog.ada -f json          # JSON array
        adascan --strict prog.ada         # Stop at first error

    Defaults can also be set with MINIADA_START_LINE, MINIADA_STRICT
    and MINIADA_ENCODING.
    """
    setup_logging(verbose)

    tokens = []
    collector = ErrorCollector()
    strict_error = None

    try:
        options = ScanOptions.from_env(
            start_line=start_line,
            strict=strict or None,
            encoding=encoding,
            filename=str(input_file),
        )
        logger.debug(f"Scanning {input_file} (encoding {options.encoding})")

        try:
            for token in tokenize_file(input_file, options):
                tokens.append(token)
                if token.is_error:
                    collector.add(error_from_token(token, options.filename))
        except ScanError as e:
            # Strict mode: keep the tokens scanned so far
            strict_error = e

        rendered = render_tokens(tokens, output_format.lower())
        if output is None:
            click.echo(rendered)
        else:
            output.write_text(rendered + "\n", encoding="utf-8")
            logger.debug(f"Wrote {len(tokens)} tokens to {output}")

    except Exception as e:
        handle_cli_exception(e, verbose, "Scan")

    if strict_error is not None:
        handle_cli_exception(strict_error, verbose, "Scan")

    if collector.has_errors():
        click.echo(collector.report(), err=True)
        sys.exit(ExitCode.BUILD_ERROR)


if __name__ == "__main__":
    main()
