import logging

import typer

from lox.errors import ScanError
from lox.helper import format_error
from lox.main import EX_DATAERR
from lox.tokenize import Scanner

app = typer.Typer()


def format_row(line: str, kind: str, lexeme: str, literal: str) -> str:
    return f"{line:>4}  {kind:<13} {lexeme:<16} {literal}".rstrip()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    source: str,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scanner activity."),
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s"
        )
    try:
        tokens = Scanner.from_source(source).scan_tokens()
    except ScanError as e:
        for error in e.errors:
            typer.echo(format_error(source, error), err=True, nl=False)
        raise typer.Exit(code=EX_DATAERR)
    typer.echo(format_row("line", "kind", "lexeme", "literal"))
    for token in tokens:
        literal = "" if token.literal is None else repr(token.literal)
        typer.echo(format_row(str(token.line), token.kind.name, token.lexeme, literal))


if __name__ == "__main__":
    app()
