import asyncio
import os
from typing import Annotated

import typer

from .config import Config
from .lib.fs import FileType
from .lib.logger import set_debug
from .search import find_up, find_up_sync

app = typer.Typer(
    help="Find a file or directory by walking up parent directories.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


@app.command()
def run(
    name: Annotated[str, typer.Argument(help="File or directory name (or absolute path) to find.")],
    cwd: Annotated[
        str | None,
        typer.Option("--cwd", "-C", help="Directory or file URL to start from. Defaults to the current directory."),
    ] = None,
    type: Annotated[
        FileType | None,
        typer.Option("--type", "-t", help="Kind of entry to match."),
    ] = None,
    stop_at: Annotated[
        str | None,
        typer.Option("--stop-at", "-s", help="Stop before searching this directory."),
    ] = None,
    use_async: Annotated[bool, typer.Option("--async", help="Probe through the asyncio event loop.")] = False,
    debug: Annotated[
        bool | None,
        typer.Option("--debug/--no-debug", "-d/-D", help="Enable or disable debug logging for this run."),
    ] = None,
) -> None:
    """Print the nearest matching path, or exit with status 1 if there is none."""
    config = Config.load_or_default()
    if debug is not None:
        config.debug_mode = debug
    set_debug(config.debug_mode)

    start = cwd if cwd is not None else os.getcwd()
    kind = type if type is not None else config.type
    boundary = stop_at if stop_at is not None else config.stop_at

    try:
        if use_async:
            found = asyncio.run(find_up(name, cwd=start, type=kind, stop_at=boundary))
        else:
            found = find_up_sync(name, cwd=start, type=kind, stop_at=boundary)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e

    if found is None:
        raise typer.Exit(code=1)
    typer.echo(str(found))


def main():
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
