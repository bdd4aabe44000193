"""
CLI Main - Typer-based command-line interface.

Usage:
    dataops demo
    dataops sort 5 3 8 4 9 1 2 --trace
    dataops search 4 1 2 3 4 5 8 9
    dataops search --sort -- -2 9 -2 6
    dataops serve

Negative values must follow a ``--`` separator.
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from dataops.config import DataOpsError, configure_logging, get_settings
from dataops.domains.operations import DataOperation, DataOperationAdapter
from dataops.domains.searching import BinarySearcher
from dataops.domains.sorting import QuickSorter

app = typer.Typer(
    name="dataops",
    help="dataops - In-place integer sorting and searching",
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Log level"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or get_settings().log_level)


def _format(values: list[int]) -> str:
    return " ".join(str(v) for v in values)


def _fail(error: DataOpsError) -> NoReturn:
    console.print(f"[red]Error:[/red] {error.message}")
    raise typer.Exit(2)


def _report_search(key: int, index: int) -> None:
    if index >= 0:
        console.print(f"Element {key} found at index {index}")
    else:
        console.print(f"Element {key} not found")


@app.command()
def demo(
    key: int | None = typer.Option(None, "--key", "-k", help="Key to look up after sorting"),
) -> None:
    """Sort the configured sample and search it."""
    settings = get_settings()
    data = list(settings.sample_data)
    key = settings.sample_key if key is None else key

    op: DataOperation = DataOperationAdapter()

    try:
        console.print(f"[bold]Before:[/bold] {_format(data)}")
        op.sort(data)
        console.print(f"[bold]After:[/bold] {_format(data)}")
        _report_search(key, op.search(data, key))
    except DataOpsError as e:
        _fail(e)


@app.command()
def sort(
    values: list[int] = typer.Argument(..., help="Integers to sort"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show work counters"),
) -> None:
    """Sort integers ascending."""
    data = list(values)

    try:
        if trace:
            result = QuickSorter().sort_traced(data)
        else:
            DataOperationAdapter().sort(data)
    except DataOpsError as e:
        _fail(e)

    console.print(_format(data))

    if trace:
        table = Table(title="Sort Trace")
        table.add_column("Counter", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Length", str(result.length))
        table.add_row("Comparisons", str(result.comparisons))
        table.add_row("Swaps", str(result.swaps))
        table.add_row("Partitions", str(result.partitions))
        table.add_row("Max Depth", str(result.max_depth))

        console.print(table)


@app.command()
def search(
    key: int = typer.Argument(..., help="Value to look up"),
    values: list[int] = typer.Argument(..., help="Integers, sorted ascending"),
    sort_first: bool = typer.Option(False, "--sort", "-s", help="Sort the values before searching"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show probed indices"),
) -> None:
    """Binary-search integers that are already sorted ascending."""
    data = list(values)
    op = DataOperationAdapter()

    try:
        if sort_first:
            op.sort(data)
            console.print(f"[dim]Sorted: {_format(data)}[/dim]")

        if trace:
            result = BinarySearcher().search_traced(data, key)
            index = result.index
            console.print(f"[dim]Probes: {_format(result.probes)}[/dim]")
        else:
            index = op.search(data, key)
    except DataOpsError as e:
        _fail(e)

    _report_search(key, index)
    if index < 0:
        raise typer.Exit(1)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = settings.api_host if host is None else host
    port = settings.api_port if port is None else port

    console.print("\n[green]Starting dataops API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "dataops.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from dataops import __version__

    console.print(f"dataops v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
