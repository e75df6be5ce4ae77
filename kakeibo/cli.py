"""Typer CLI interface for Kakeibo."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from kakeibo.config import DEFAULT_API_URL, EXPORT_FILENAME, category_emoji
from kakeibo.exceptions import LedgerError
from kakeibo.models.enums import EntryKind
from kakeibo.models.reports import LedgerSnapshot
from kakeibo.reports.summary import format_yen

app = typer.Typer(
    name="kakeibo",
    help="Kakeibo — household ledger: totals, category breakdown and CSV export.",
)

FileOption = typer.Option(
    None,
    "--file",
    "-f",
    help="Saved transaction listing (JSON). Fetches from the service when omitted.",
)
ApiUrlOption = typer.Option(DEFAULT_API_URL, "--api-url", envvar="KAKEIBO_API_URL", help="Ledger service base URL")
UsernameOption = typer.Option(None, "--username", "-u", envvar="KAKEIBO_USERNAME", help="Login user name")
PasswordOption = typer.Option(None, "--password", envvar="KAKEIBO_PASSWORD", help="Login password")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Kakeibo — household ledger: totals, category breakdown and CSV export."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _client(api_url: str, username: str | None, password: str | None):
    """Create a service client, logging in when credentials are given."""
    from kakeibo.client import LedgerServiceClient

    client = LedgerServiceClient(base_url=api_url)
    if username:
        client.login(username, password or "")
    return client


def _load_snapshot(
    file: Path | None,
    api_url: str,
    username: str | None,
    password: str | None,
) -> LedgerSnapshot:
    """Load raw entries from a file or the service and build a snapshot."""
    from kakeibo.engines.refresh import LedgerRefresher
    from kakeibo.ingestion.snapshot import SnapshotAdapter

    try:
        if file is not None:
            adapter = SnapshotAdapter()
            entries = adapter.parse(file)
            for warning in adapter.validate(entries):
                typer.echo(f"Warning: {warning}", err=True)
        else:
            entries = _client(api_url, username, password).list_entries()
        return LedgerRefresher().refresh(entries)
    except (LedgerError, FileNotFoundError) as exc:
        _fail(str(exc))


@app.command(name="list")
def list_entries(
    file: Path | None = FileOption,
    api_url: str = ApiUrlOption,
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Show all entries with their resolved kind."""
    snapshot = _load_snapshot(file, api_url, username, password)
    console = Console()

    table = Table(title="取引一覧")
    table.add_column("ID", justify="right")
    table.add_column("日付")
    table.add_column("カテゴリ")
    table.add_column("種別")
    table.add_column("金額", justify="right")
    table.add_column("メモ")
    for entry in snapshot.entries:
        income = entry.kind == EntryKind.INCOME
        table.add_row(
            str(entry.id),
            entry.date.isoformat(),
            f"{category_emoji(entry.category, entry.kind.value)} {entry.category or ''}",
            "収入" if income else "支出",
            f"[green]+¥{entry.amount:,}[/green]" if income else f"[red]-¥{entry.amount:,}[/red]",
            entry.note or "",
        )
    console.print(table)

    totals = snapshot.summary
    console.print(
        f"収入 {format_yen(totals.total_income)}  支出 {format_yen(totals.total_expense)}  残高 {format_yen(totals.balance)}"
    )


@app.command()
def summary(
    file: Path | None = FileOption,
    api_url: str = ApiUrlOption,
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Print totals, balance and the expense breakdown."""
    from kakeibo.reports.summary import SummaryReportGenerator

    snapshot = _load_snapshot(file, api_url, username, password)
    typer.echo(SummaryReportGenerator().render(snapshot))


@app.command()
def export(
    file: Path | None = FileOption,
    output: Path = typer.Option(Path(EXPORT_FILENAME), "--output", "-o", help="Destination CSV file"),
    api_url: str = ApiUrlOption,
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Export all entries to CSV."""
    from kakeibo.reports.csv_export import CsvExporter

    snapshot = _load_snapshot(file, api_url, username, password)
    payload = CsvExporter().to_payload(snapshot.entries)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload.content)
    typer.echo(f"Exported {len(snapshot.entries)} entries to {output}")


@app.command()
def add(
    category: str = typer.Argument(..., help="Category label, e.g. 食費 or 給与"),
    amount: int = typer.Argument(..., help="Amount in yen"),
    kind: str = typer.Option("expense", "--kind", "-k", help="income or expense"),
    entry_date: str | None = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD), defaults to today"),
    note: str | None = typer.Option(None, "--note", "-n", help="Free-text note"),
    api_url: str = ApiUrlOption,
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Record a new income or expense entry."""
    from kakeibo.models.entry import NewEntry

    try:
        entry_kind = EntryKind(kind.strip().lower())
    except ValueError:
        _fail(f"Invalid kind '{kind}'. Valid: income, expense")

    fields: dict = {"category": category, "amount": amount, "note": note, "kind": entry_kind}
    if entry_date:
        fields["date"] = entry_date
    try:
        new_entry = NewEntry(**fields)
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())
        _fail(problems)

    try:
        created = _client(api_url, username, password).create_entry(new_entry)
    except LedgerError as exc:
        _fail(str(exc))

    suffix = f" (id {created.id})" if created is not None else ""
    typer.echo(f"Added {new_entry.kind.value} {new_entry.category} ¥{new_entry.amount:,} on {new_entry.date}{suffix}")


@app.command()
def delete(
    entry_id: int = typer.Argument(..., help="ID of the entry to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    api_url: str = ApiUrlOption,
    username: str | None = UsernameOption,
    password: str | None = PasswordOption,
) -> None:
    """Delete an entry by ID."""
    if not yes:
        typer.confirm(f"Delete entry {entry_id}?", abort=True)
    try:
        _client(api_url, username, password).delete_entry(entry_id)
    except LedgerError as exc:
        _fail(str(exc))
    typer.echo(f"Deleted entry {entry_id}")
