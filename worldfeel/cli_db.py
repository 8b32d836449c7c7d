"""Command-line interface for worldfeel database maintenance."""

import asyncio
import logging
import random
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional

import typer
from typing_extensions import Annotated

from worldfeel.config.settings import settings
from worldfeel.core.emotion_table import EMOTIONS
from worldfeel.core.expiry import purge_expired
from worldfeel.core.identity import new_device_token, resolve_identity
from worldfeel.core.record_store import SubmissionStore
from worldfeel.utils.db_health import check_db_connection
from worldfeel.utils.db_session import get_async_engine, get_db_session_context_manager

app = typer.Typer(help="worldfeel Database Management Commands")
logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 20


def setup_logging(log_level: str = "INFO") -> None:
    """Set up basic logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()]
    )


def random_address(rng: random.Random) -> str:
    return ".".join(str(octet) for octet in (
        rng.randint(1, 223), rng.randint(0, 254), rng.randint(0, 254), rng.randint(0, 254),
    ))


async def seed_submissions(
    store: SubmissionStore,
    count: int,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Insert `count` random submissions spread over the last retention period.

    Each row gets a random canonical emotion, a hashed random address and a
    fresh device token. Rows whose identity collides with an active one are
    skipped, so the return value can be lower than `count`.
    """
    now = now or datetime.now(timezone.utc)
    rng = rng or random.Random()
    retention = timedelta(hours=settings.RETENTION_HOURS)
    words = list(EMOTIONS)

    inserted = 0
    for _ in range(count):
        created_at = now - timedelta(seconds=rng.randrange(int(retention.total_seconds())))
        record = await store.insert(
            word=rng.choice(words),
            identity_hash=resolve_identity(random_address(rng), created_at.date()),
            device_token=new_device_token(),
            created_at=created_at,
            expires_at=created_at + retention,
        )
        if record is not None:
            inserted += 1
    return inserted


def refuse_in_production() -> None:
    if settings.ENVIRONMENT.lower() == "production":
        logger.error("Refusing to modify the database in the production environment")
        sys.exit(1)


async def _seed(count: int) -> int:
    try:
        async with get_db_session_context_manager() as session:
            return await seed_submissions(SubmissionStore(session), count)
    finally:
        await get_async_engine().dispose()


async def _clear() -> int:
    try:
        async with get_db_session_context_manager() as session:
            return await SubmissionStore(session).delete_all()
    finally:
        await get_async_engine().dispose()


async def _purge() -> int:
    try:
        return await purge_expired()
    finally:
        await get_async_engine().dispose()


async def _check() -> bool:
    try:
        return await check_db_connection()
    finally:
        await get_async_engine().dispose()


@app.command("check")
def check(
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
) -> None:
    """Test the database connection."""
    setup_logging(loglevel)
    logger.info("Connecting to PostgreSQL at %s:%s", settings.DB_HOST, settings.DB_PORT)
    if not asyncio.run(_check()):
        logger.error("Connection failed! Check database credentials and connectivity.")
        sys.exit(1)
    logger.info("✓ Connected to PostgreSQL successfully")


@app.command("seed")
def seed(
    count: Annotated[int, typer.Argument(min=1, help="Number of submissions to insert")] = DEFAULT_SEED_COUNT,
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
) -> None:
    """Insert random submissions for local development."""
    setup_logging(loglevel)
    refuse_in_production()
    inserted = asyncio.run(_seed(count))
    typer.echo(f"Seeded submissions: {inserted}")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", help="Confirm deletion of every submission")] = False,
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
) -> None:
    """Delete every submission, active or expired."""
    setup_logging(loglevel)
    refuse_in_production()
    if not yes:
        logger.error("Refusing to clear the database without --yes")
        sys.exit(1)
    deleted = asyncio.run(_clear())
    typer.echo(f"Cleared submissions: {deleted}")


@app.command("purge-expired")
def purge(
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
) -> None:
    """Run one expiry sweep now."""
    setup_logging(loglevel)
    removed = asyncio.run(_purge())
    typer.echo(f"Purged expired submissions: {removed}")


if __name__ == "__main__":
    app()
