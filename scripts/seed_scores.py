"""
Leaderboard seeding script for CinchDB databases.

Implements deterministic pseudo-random score generation, optional CSV export
in the service's own row format, and sequential upload through the client.
"""

from __future__ import annotations

import asyncio
import random
import sys
import time
from pathlib import Path
from typing import List

import typer

from cinchdb.client import CinchClient
from cinchdb.config import get_settings
from cinchdb.domain.models import Database, Record
from cinchdb.utils.logging import configure_logging

app = typer.Typer(help="Generate synthetic leaderboard rows and upload them to CinchDB.")

PLAYER_NAMES = ["ada", "grace", "linus", "margaret", "dennis", "barbara", "ken", "radia"]


def _generate_scores(rows: int, seed: int) -> List[Record]:
    rng = random.Random(seed)
    records: List[Record] = []
    for _ in range(rows):
        name = rng.choice(PLAYER_NAMES)
        score = rng.randint(0, 100_000)
        records.append(Record.from_values(name, str(score)))
    return records


def _write_csv(records: List[Record], csv_path: Path) -> None:
    """Write rows without header or quoting, the way the service returns them."""
    with csv_path.open("w", encoding="utf-8") as f:
        for record in records:
            fields = [value or "" for value in record.columns] + [record.record_id]
            f.write(",".join(fields) + "\n")


async def _upload(database: Database, records: List[Record]) -> None:
    async with CinchClient() as client:
        await client.add_records(database, *records)


@app.command()
def main(
    rows: int = typer.Option(
        20,
        "--rows",
        "-r",
        help="Number of scores to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional CSV output path for the generated rows.",
    ),
    key: str | None = typer.Option(
        None,
        "--key",
        "-k",
        help="Database key (default: CINCHDB_KEY).",
    ),
    no_upload: bool = typer.Option(
        False,
        "--no-upload",
        help="Only generate rows; skip uploading.",
    ),
) -> None:
    """
    Generate synthetic scores and optionally insert them one request per row.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    records = _generate_scores(rows, seed)
    typer.echo(f"Generated {rows:,} scores (seed={seed})")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        _write_csv(records, output)
        typer.echo(f"Wrote {output}")

    if no_upload:
        typer.echo("Skipping upload (no-upload flag set).")
        return

    database_key = key or settings.database_key
    if not database_key:
        typer.echo("No database key given. Pass --key or set CINCHDB_KEY.", err=True)
        raise typer.Exit(code=2)

    start = time.perf_counter()
    asyncio.run(_upload(Database(key=database_key), records))
    duration = time.perf_counter() - start
    typer.echo(f"Uploaded {rows:,} rows in {duration:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
