"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..chat import ChatSession
from ..ui.routes import NOT_FOUND, ROUTES
from .providers import get_generation_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="edupath",
    help="EduPath study shell with an exam-prep assistant for JEE, NEET and BTech",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def run(
    route: str = typer.Option(
        "/",
        "--route",
        "-r",
        help="Page to open at startup (see 'edupath routes')"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the EduPath terminal shell."""
    async def _run():
        from ..ui import run_textual_tui

        client = get_generation_client(console)
        await run_textual_tui(client=client, initial_path=route, log_level=log_level)
        console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question for the study assistant"),
):
    """Ask the study assistant a single question."""
    async def _ask():
        async with get_generation_client(console) as client:
            session = ChatSession(client)
            reply = await session.ask(question)

        if reply is None:
            console.print("[red]Error: no reply (empty question or local failure)[/red]")
            raise typer.Exit(code=1)

        console.print(Panel(question, title="You", border_style="yellow"))
        console.print(Panel(reply, title="EduPath Assistant", border_style="green"))

    asyncio.run(_ask())


@app.command()
def routes():
    """List the navigable pages."""
    table = Table(title="Routes")
    table.add_column("Path", style="cyan")
    table.add_column("Page", style="green")
    table.add_column("Title")

    for route in ROUTES:
        table.add_row(route.path, route.page_id, route.title)
    table.add_row(f"{NOT_FOUND.path} (any other)", NOT_FOUND.page_id, NOT_FOUND.title)

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
