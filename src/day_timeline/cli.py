"""Command-line interface for the activity timeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from .config import TimelineSettings
from .logfile import append_entry
from .models import Report
from .parser import ParseError, parse_lines
from .server_runner import run_server
from .paths import get_log_path
from .timeline import build_report, load_report

app = typer.Typer(help="Log what you are doing and see where the day went.")

logger = logging.getLogger(__name__)


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _load(log_path: Optional[Path], input_path: Optional[str] = None) -> Report:
    try:
        if input_path == "-":
            stdin = typer.get_text_stream("stdin", encoding="utf-8", errors="replace")
            return build_report(parse_lines(stdin))
        if input_path:
            return load_report(Path(input_path))
        return load_report(log_path or get_log_path())
    except ParseError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        logger.error("Failed to read activity log: %s", exc)
        raise typer.Exit(code=1) from exc


@app.command()
def view(
    log_path: Optional[Path] = typer.Option(
        None,
        "--log",
        path_type=Path,
        help="Location of the activity log file.",
    ),
    input_path: Optional[str] = typer.Option(
        None,
        "--input",
        help="Read the log from this file instead, or '-' for standard input.",
    ),
) -> None:
    """Print the day-by-day timeline."""
    from .reporting import TimelinePrinter

    TimelinePrinter(_load(log_path, input_path)).print_days()


@app.command()
def totals(
    log_path: Optional[Path] = typer.Option(
        None,
        "--log",
        path_type=Path,
        help="Location of the activity log file.",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, help="Only show the largest N activities."
    ),
) -> None:
    """Print the total time spent per activity."""
    from .reporting import TimelinePrinter

    TimelinePrinter(_load(log_path)).print_totals(limit)


@app.command()
def log(
    name: List[str] = typer.Argument(
        None, help="What you are starting now. Leave empty to log a break."
    ),
    log_path: Optional[Path] = typer.Option(
        None,
        "--log",
        path_type=Path,
        help="Location of the activity log file.",
    ),
) -> None:
    """Append an entry stamped with the current time."""
    try:
        event = append_entry(log_path or get_log_path(), " ".join(name or []))
    except OSError as exc:
        logger.error("Failed to write activity log: %s", exc)
        raise typer.Exit(code=1) from exc
    typer.echo(f"{event.start.strftime('%Y-%m-%d %H:%M:%S')} {event.name or '(nothing)'}")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the viewer."),
    port: int = typer.Option(
        8765, "--port", min=1, max=65535, help="TCP port for the viewer."
    ),
    log_path: Optional[Path] = typer.Option(
        None, "--log", path_type=Path, help="Location of the activity log file."
    ),
    static_dir: Optional[Path] = typer.Option(
        None,
        "--static-dir",
        path_type=Path,
        help="Directory holding index.html and its assets.",
    ),
    open_browser: bool = typer.Option(
        True,
        "--open-browser/--no-open-browser",
        help="Automatically launch the viewer in your default browser.",
    ),
) -> None:
    """Start the local timeline viewer."""
    settings = TimelineSettings.from_options(
        host=host,
        port=port,
        log_path=log_path,
        static_dir=static_dir,
    )
    run_server(settings=settings, open_browser=open_browser)
