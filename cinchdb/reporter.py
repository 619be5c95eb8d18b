from __future__ import annotations

from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from cinchdb.domain.enums import SCHEMA, Column
from cinchdb.domain.models import Database, Record


def sort_records(records: Sequence[Record], column: Column, ascending: bool = True) -> List[Record]:
    """
    Sort records client-side by the text of one column.

    Unlike server-side ordering this compares strings, so "10" sorts before "9".
    Missing values sort as empty strings.
    """
    return sorted(records, key=lambda r: r.get(column) or "", reverse=not ascending)


def build_table(
    records: Sequence[Record],
    database: Database,
    sort_column: Optional[Column] = None,
    ascending: bool = True,
) -> Table:
    """
    Render records as a rich table.

    Only the database's visible columns are shown, titled with its headers.
    The sorted column header carries an arrow, like the editor view.
    """
    columns = SCHEMA[: database.visible_columns]
    table = Table(
        title=f"CinchDB Records ({len(records)})",
        box=box.ROUNDED,
    )
    table.add_column("ID", style="dim", no_wrap=True)
    for column in columns:
        header = database.header(column)
        if column is sort_column:
            header = f"{header} {'↑' if ascending else '↓'}"
        table.add_column(header, style="cyan" if column is sort_column else None)

    rows = records
    if sort_column is not None and sort_column is not Column.NONE:
        rows = sort_records(records, sort_column, ascending)

    for record in rows:
        record_id = record.record_id or "[yellow]new[/yellow]"
        table.add_row(record_id, *(record.get(c) or "" for c in columns))
    return table


def print_records(
    records: Sequence[Record],
    database: Database,
    sort_column: Optional[Column] = None,
    ascending: bool = True,
    console: Optional[Console] = None,
) -> None:
    console = console or Console()

    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return

    console.print(build_table(records, database, sort_column, ascending))
