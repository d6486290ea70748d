"""CLI for minigrep."""

import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from minigrep import __version__

app = typer.Typer(
    name="minigrep",
    help="Print every line of a file that contains a query.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"minigrep {__version__}")
        raise typer.Exit()


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    query: Annotated[str | None, typer.Argument(help="Text to search for")] = None,
    file_path: Annotated[str | None, typer.Argument(help="File to search")] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Print every line of FILE_PATH that contains QUERY.

    Matching is case-sensitive unless IGNORE_CASE is set in the environment.
    """
    from minigrep.config import build_config
    from minigrep.exceptions import MinigrepError
    from minigrep.searcher import run

    args = [sys.argv[0]] + [arg for arg in (query, file_path) if arg is not None]

    try:
        config = build_config(args)
        run(config)
    except MinigrepError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
