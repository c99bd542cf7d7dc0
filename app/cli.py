"""
Command line entry point: run the API or reseed the database.
"""

# Standard library imports
import asyncio

# Third-party imports
import typer
import uvicorn
from rich.console import Console

# Local application imports
from app.core.config import HOST, PORT
from app.core.database import ensure_indexes, get_database
from app.core.logging_config import setup_logging
from app.repositories.cards import CardRepository
from app.repositories.learnings import LearningRepository
from app.repositories.sets import SetRepository
from app.repositories.user_sets import UserSetRepository
from app.services.seed_service import SeedService


console = Console()

app = typer.Typer(
    name="flashcards",
    help="Flashcards API server and admin tasks.",
    add_completion=False,
)


async def _run_seed() -> dict:
    database = get_database()
    await ensure_indexes(database)
    service = SeedService(
        SetRepository(database),
        CardRepository(database),
        UserSetRepository(database),
        LearningRepository(database),
    )
    return await service.seed_database()


@app.command()
def serve(
    host: str = typer.Option(HOST, help="Interface to bind."),
    port: int = typer.Option(PORT, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
):
    """Run the API with uvicorn."""
    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


@app.command()
def seed(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
):
    """Wipe sets, cards, favorites and learnings, then load the seed catalog."""
    setup_logging()
    if not yes:
        typer.confirm("This deletes every set, card, favorite and learning. Continue?", abort=True)

    try:
        result = asyncio.run(_run_seed())
    except Exception as e:
        console.print(f"[bold red]Seeding failed: {e}[/bold red]")
        console.print("The database may be partially loaded; run the seed again.")
        raise typer.Exit(code=1)

    console.print(
        f"[green]Database initialized: {result['sets']} sets, {result['cards']} cards.[/green]"
    )


def main():
    app()


if __name__ == "__main__":
    main()
