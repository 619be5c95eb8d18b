from __future__ import annotations

import asyncio
import json
import re
import sys
from typing import Awaitable, Callable, List, Optional, TypeVar

import typer

from cinchdb.client import CinchClient
from cinchdb.config import get_settings
from cinchdb.domain.enums import COLUMN_COUNT, Column, Evaluator, evaluator_token
from cinchdb.domain.models import Condition, Database, Record
from cinchdb.errors import QueryValidationError, TransportError
from cinchdb.reporter import print_records
from cinchdb.utils.logging import configure_logging

app = typer.Typer(help="CinchDB command line client.")

T = TypeVar("T")

_OPERATORS = {evaluator_token(e): e for e in Evaluator if e is not Evaluator.NONE}
# Longest operators first so ">=" is not read as ">".
_CONDITION_RE = re.compile(r"^\s*(col\d+)\s*(!=|>=|<=|=|>|<)(.*)$", re.IGNORECASE)

KeyOption = typer.Option(None, "--key", "-k", help="Database key (default: CINCHDB_KEY).")
WhereOption = typer.Option(
    None,
    "--where",
    "-w",
    help="Condition such as 'col1=alice' or 'col2>=10'. Repeat to AND conditions.",
)


def _column(token: str) -> Column:
    try:
        return Column.from_token(token)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def parse_condition(expression: str) -> Condition:
    """Parse `col{n}{op}{value}` into a Condition."""
    match = _CONDITION_RE.match(expression)
    if not match:
        raise typer.BadParameter(f"Cannot parse condition '{expression}'")
    column_name, operator, value = match.groups()
    return Condition(column=_column(column_name), evaluator=_OPERATORS[operator], value=value)


def _database(key: Optional[str]) -> Database:
    resolved = key or get_settings().database_key
    if not resolved:
        typer.echo("No database key given. Pass --key or set CINCHDB_KEY.", err=True)
        raise typer.Exit(code=2)
    return Database(key=resolved)


def _run(action: str, operation: Callable[[CinchClient], Awaitable[T]]) -> T:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    async def _main() -> T:
        async with CinchClient() as client:
            return await operation(client)

    try:
        return asyncio.run(_main())
    except TransportError:
        typer.echo(f"Connection issue. Unable to {action}.", err=True)
        raise typer.Exit(code=1)
    except QueryValidationError as exc:
        typer.echo(f"Invalid request: {exc}", err=True)
        raise typer.Exit(code=2)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    key = settings.database_key
    masked = f"{key[:4]}…" if key else "<unset>"
    typer.echo(
        f"service={settings.base_url} key={masked} timeout={settings.http_timeout_seconds}s "
        f"limit={settings.default_limit} encode_values={settings.encode_values}"
    )


@app.command("generate-key")
def generate_key() -> None:
    """
    Create a new remote database and print its key.
    """
    key = _run("create a new database", lambda client: client.generate_database_key())
    typer.echo(key)


@app.command("list")
def list_records(
    key: Optional[str] = KeyOption,
    where: Optional[List[str]] = WhereOption,
    order_by: Optional[str] = typer.Option(
        None, "--order-by", "-o", help="Sort column, e.g. col2."
    ),
    then_by: Optional[str] = typer.Option(None, "--then-by", help="Secondary sort column."),
    descending: bool = typer.Option(False, "--desc", help="Sort descending."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum rows to return."),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON."),
) -> None:
    """
    Retrieve records, optionally filtered, ordered and limited on the server.
    """
    database = _database(key)
    if then_by and not order_by:
        raise typer.BadParameter("--then-by requires --order-by", param_hint="--then-by")
    conditions = [parse_condition(w) for w in where or []]
    primary = _column(order_by) if order_by else None
    secondary = _column(then_by) if then_by else Column.NONE

    async def _retrieve(client: CinchClient) -> List[Record]:
        if not conditions and primary is None and limit is None:
            return await client.get_all_records(database)
        query = client.retrieve(database, limit=limit)
        for condition in conditions:
            query.add_condition(condition.column, condition.evaluator, condition.value)
        if primary is not None:
            query.set_order(not descending, primary, secondary)
        return await query.execute()

    records = _run("retrieve database records", _retrieve)
    if as_json:
        typer.echo(json.dumps([r.model_dump() for r in records], indent=2))
    else:
        print_records(records, database)


@app.command()
def add(
    values: List[str] = typer.Argument(..., help="Up to ten column values."),
    key: Optional[str] = KeyOption,
) -> None:
    """
    Insert one record.
    """
    if len(values) > COLUMN_COUNT:
        raise typer.BadParameter(f"At most {COLUMN_COUNT} values are allowed")
    database = _database(key)
    _run("add the record", lambda client: client.add_record(database, *values))
    typer.echo("Saved database record.")


@app.command()
def update(
    record_id: str = typer.Argument(..., help="Identifier of the record to overwrite."),
    values: List[str] = typer.Argument(..., help="New values for columns 1..10."),
    key: Optional[str] = KeyOption,
) -> None:
    """
    Overwrite all columns of one record. Columns not given become empty.
    """
    if len(values) > COLUMN_COUNT:
        raise typer.BadParameter(f"At most {COLUMN_COUNT} values are allowed")
    database = _database(key)
    record = Record(columns=list(values), record_id=record_id)
    _run("update the record", lambda client: client.update_records(database, record))
    typer.echo("Saved database record.")


@app.command()
def delete(
    record_ids: List[str] = typer.Argument(..., help="Identifiers of the records to delete."),
    key: Optional[str] = KeyOption,
) -> None:
    """
    Delete records by identifier.
    """
    database = _database(key)
    records = [Record(record_id=record_id) for record_id in record_ids]
    _run("delete the records", lambda client: client.delete_records(database, *records))
    typer.echo(f"Deleted {len(records)} database record(s).")


@app.command("delete-where")
def delete_where(
    where: Optional[List[str]] = WhereOption,
    key: Optional[str] = KeyOption,
) -> None:
    """
    Delete every record matching the conditions. Refused without conditions.
    """
    database = _database(key)
    conditions = [parse_condition(w) for w in where or []]

    async def _delete(client: CinchClient) -> bool:
        query = client.delete(database)
        for condition in conditions:
            query.add_condition(condition.column, condition.evaluator, condition.value)
        return await query.execute()

    if not _run("delete the records", _delete):
        typer.echo("Refused: a delete needs at least one --where condition. Use 'clear' instead.")
        raise typer.Exit(code=1)
    typer.echo("Deleted matching records.")


@app.command()
def clear(
    key: Optional[str] = KeyOption,
    yes: bool = typer.Option(False, "--yes", help="Confirm deleting every record."),
) -> None:
    """
    Delete ALL records in the database.
    """
    database = _database(key)
    if not yes:
        typer.confirm("Delete every record in this database?", abort=True)
    _run("clear database records", lambda client: client.clear_all_records(database))
    typer.echo("Successfully cleared database.")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
