# numbergate/main.py
"""
NumberGate Entry Point

Commands:
- serve: run the API server
- number: print the current time-derived number
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from numbergate import __version__
from numbergate.config.settings import get_settings
from numbergate.core.clock import SystemClock, isoformat_utc
from numbergate.core.constants import API_PREFIX, FORMULA
from numbergate.core.generator import take_sample

console = Console()

app = typer.Typer(
    name="numbergate",
    help="NumberGate - Time-Based Number Backend API",
    add_completion=False,
    rich_markup_mode="rich",
)


def display_banner(host: str, port: int) -> None:
    """Display the startup banner."""
    sample = take_sample(SystemClock())
    body = (
        f"[bold white]{get_settings().app.name}[/bold white]  [dim]v{__version__}[/dim]\n"
        f"Listening on [cyan]{host}:{port}[/cyan]\n"
        f"Current time-based number: [bold magenta]{sample.number}[/bold magenta]\n"
        f"API endpoints available at [cyan]http://localhost:{port}{API_PREFIX}/[/cyan]"
    )
    console.print(Panel(body, border_style="bold cyan"))
    console.print()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Interface to bind (default from settings)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on (default from settings)"),
    log_level: str = typer.Option("info", "--log-level", "-l", help="uvicorn log level"),
) -> None:
    """Run the API server until interrupted."""
    from numbergate.api.server import start_server

    settings = get_settings()
    host = host or settings.api.host
    port = port or settings.api.port

    display_banner(host, port)
    asyncio.run(start_server(host=host, port=port, log_level=log_level))


@app.command()
def number() -> None:
    """Print the current time-derived number and its components."""
    sample = take_sample(SystemClock())

    table = Table(title=FORMULA, show_header=True, header_style="bold cyan")
    table.add_column("hour", justify="right")
    table.add_column("minute", justify="right")
    table.add_column("second", justify="right")
    table.add_column("number", justify="right", style="bold magenta")
    table.add_row(str(sample.hour), str(sample.minute), str(sample.second), str(sample.number))

    console.print(table)
    console.print(f"[dim]{isoformat_utc(sample.taken_at)}[/dim]")


if __name__ == "__main__":
    app()
