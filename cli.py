import asyncio
from typing import Optional

import typer
import uvicorn

from src.core.config import settings
from src.core.database import Database

app = typer.Typer(help="Management commands for the emoji feed API.")


# ---------------------------
# Helpers
# ---------------------------
async def _create_tables(database_url: str) -> None:
    database = Database(database_url)
    try:
        await database.create_all()
    finally:
        await database.disconnect()


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db(
    database_url: Optional[str] = typer.Option(
        None, "--database-url", "-d", help="Async SQLAlchemy URL, defaults to ASYNC_DATABASE_URL"
    )
):
    """Create the database tables."""
    url = database_url or settings.ASYNC_DATABASE_URL
    asyncio.run(_create_tables(url))
    print(f"✅ Tables created on {url}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the API with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()

    """
# Create the tables on the configured database
python cli.py init-db

# Or on another one
python cli.py init-db -d "sqlite+aiosqlite:///other.db"

# Start the API
python cli.py serve --port 8000 --reload
    """
