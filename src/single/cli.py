import logging
import re
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Iterable, Iterator, NoReturn

import typer
from rich.console import Console
from rich.text import Text

from single.extract import classify
from single.outcome import Error, Ok

log = logging.root

app = typer.Typer(
    no_args_is_help=True,
    rich_markup_mode="markdown",
)

InputPath = Annotated[
    Path,
    typer.Argument(
        help="The file to read, or `-` for stdin.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        writable=False,
        allow_dash=True,
    ),
]

Default = Annotated[
    str | None,
    typer.Option(
        "-d",
        "--default",
        help="Print this instead of failing when there is not exactly one line.",
    ),
]

SkipBlank = Annotated[
    bool,
    typer.Option(
        "-b",
        "--skip-blank",
        help="Ignore whitespace-only lines.",
    ),
]


@contextmanager
def open_lines(path: Path) -> Iterator[Iterator[str]]:
    try:
        if path == Path("-"):
            yield (line.rstrip("\n") for line in sys.stdin)
        else:
            with path.open(encoding="utf-8") as f:
                yield (line.rstrip("\n") for line in f)
    except UnicodeDecodeError as e:
        log.debug("Failed to decode %s", path, exc_info=True)
        fail(f"{path} is not valid UTF-8: {e.reason}")


def fail(message: str) -> NoReturn:
    Console(stderr=True).print(
        Text.assemble(("error: ", "bold red"), message), soft_wrap=True
    )
    raise typer.Exit(1)


def emit(lines: Iterable[str], default: str | None) -> None:
    outcome = classify(lines)
    log.debug("Classified input: %r", outcome)

    match outcome:
        case Ok(line):
            typer.echo(line)
        case Error() if default is not None:
            typer.echo(default)
        case Error() as error:
            fail(error)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log debug messages."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write log messages to this file instead of stderr.",
            dir_okay=False,
            writable=True,
        ),
    ] = None,
):
    """Print the only line of the input, failing if there are none or several."""
    logging.basicConfig(
        filename=log_file,
        filemode="w",
        level=logging.DEBUG if verbose else logging.WARNING,
        force=True,
    )


@app.command()
def line(
    path: InputPath = Path("-"),
    default: Default = None,
    skip_blank: SkipBlank = False,
):
    """Print the only line of a file."""
    with open_lines(path) as lines:
        if skip_blank:
            lines = (line for line in lines if line.strip())
        emit(lines, default)


@app.command()
def grep(
    pattern: Annotated[
        str,
        typer.Argument(help="A regular expression the line must contain a match for."),
    ],
    path: InputPath = Path("-"),
    default: Default = None,
    skip_blank: SkipBlank = False,
):
    """Print the only line of a file matching `PATTERN`."""
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise typer.BadParameter(str(e), param_hint="PATTERN") from e

    with open_lines(path) as lines:
        emit(
            (
                line
                for line in lines
                if regex.search(line)
                if not skip_blank or line.strip()
            ),
            default,
        )
