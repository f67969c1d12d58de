import logging
import sys
from typing import Optional, TextIO

import click

from lox.errors import ScanError
from lox.helper import format_error
from lox.tokenize import Scanner

EX_DATAERR = 65


def run(source: str, output: TextIO) -> bool:
    try:
        tokens = Scanner.from_source(source).scan_tokens()
    except ScanError as e:
        for error in e.errors:
            click.echo(format_error(source, error), err=True, nl=False)
        return False
    for token in tokens:
        click.echo(str(token), file=output)
    return True


def run_prompt(stdin: TextIO, output: TextIO) -> None:
    while True:
        click.echo("> ", nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            return
        run(line, output)


@click.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("-v", "--verbose", is_flag=True, help="Log scanner activity.")
def main(script: Optional[str], output: TextIO, verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s"
        )
    if script is None:
        run_prompt(sys.stdin, output)
        return
    try:
        with open(script, "r", encoding="utf-8") as fp:
            source = fp.read()
    except UnicodeDecodeError as e:
        raise click.FileError(script, hint=f"not valid UTF-8 ({e.reason})")
    if not run(source, output):
        sys.exit(EX_DATAERR)


if __name__ == "__main__":
    main()
