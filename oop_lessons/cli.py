"""CLI for OOP Lessons.

Lists the demonstrations and runs any of them by name.
"""

import structlog
import typer
from rich.console import Console
from rich.table import Table

from oop_lessons.catalog import DEMOS, demo_names, get_demo
from oop_lessons.config import get_settings
from oop_lessons.logging_config import setup_logging

app = typer.Typer(
    name="oop-lessons",
    help="Introductory object-oriented programming examples",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    settings = get_settings()
    level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=level, json_format=settings.json_logs)


@app.command("list")
def list_demos() -> None:
    """List the available demonstrations."""
    table = Table(title="Demonstrations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Topic", style="magenta")
    table.add_column("Description")

    for demo in DEMOS:
        table.add_row(demo.name, demo.topic, demo.description)

    console.print(table)


@app.command()
def run(
    name: str = typer.Argument(..., help="Demonstration to run (see 'list')"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Run one demonstration."""
    configure_logging(verbose)

    try:
        demo = get_demo(name)
    except KeyError:
        console.print(f"[red]Error:[/red] Unknown demonstration: {name}", markup=True)
        console.print(f"Available: {', '.join(demo_names())}", markup=False)
        raise typer.Exit(1)

    logger.debug("demo_started", demo=demo.name, topic=demo.topic)
    demo.run()


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
