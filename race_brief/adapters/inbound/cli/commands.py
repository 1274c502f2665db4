"""CLI interface for the race brief pipeline."""

import json
import os
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ....config import settings, setup_logging
from ....core.domain import SeasonResult
from ....core.services import serialize_report
from ...common.exception_handler import format_exception_json, log_exception

app = typer.Typer(
    name="race-brief",
    help="Next F1 race brief: schedule, circuit history and past results",
    add_completion=False,
)

console = Console(force_terminal=True, legacy_windows=False)

# Determine if we're in debug mode (shows full stack traces)
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    setup_logging(settings.log_level, log_file=settings.log_file, json_format=settings.log_json)


def handle_cli_error(exc: Exception) -> None:
    """Display an error with its code, or the full JSON details in debug mode.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_type = error_data["error"]["type"]
    error_msg = error_data["error"]["message"]
    error_code = error_data["error"].get("code", "UNKNOWN")
    location = error_data.get("location", {})

    console.print(f"\n[red]Error [{error_code}]:[/] {error_msg}")
    console.print(f"[dim]Type: {error_type}[/]")

    if location:
        loc_str = f"{location.get('file', '?')}:{location.get('line', '?')} in {location.get('method', '?')}"
        console.print(f"[dim]Location: {loc_str}[/]")

    console.print("[dim]Set DEBUG=true for full details[/]")


def _print_history(title: str, seasons: list[SeasonResult]) -> None:
    table = Table(title=title)
    for column in ("Season", "Winner", "Constructor", "Finished", "SC", "Red", "Overtakes"):
        table.add_column(column)

    def fmt(value: int | None) -> str:
        return "-" if value is None else str(value)

    for season in seasons:
        table.add_row(
            str(season.season),
            season.winner,
            season.constructor,
            str(season.cars_finished),
            fmt(season.safety_cars),
            fmt(season.red_flags),
            fmt(season.overtakes),
        )
    console.print(table)


@app.command()
def run(
    publish: bool = typer.Option(True, help="Write and upload the document after building it"),
) -> None:
    """Build the next race report and publish it."""
    from ....composition.container import get_publish_service, get_report_service

    try:
        if publish:
            with console.status("[bold green]Building and publishing report...[/]"):
                report = get_publish_service().run()
        else:
            with console.status("[bold green]Building report...[/]"):
                report = get_report_service().produce_report()
    except Exception as exc:
        log_exception(exc)
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print_json(serialize_report(report))
    if publish:
        console.print(f"[green]Published {settings.blob_name}[/]")


@app.command("next-race")
def next_race() -> None:
    """Show the upcoming race and its weekend format."""
    from ....composition.container import get_next_race_service

    service = get_next_race_service()
    try:
        schedule = service.resolve_next_race()
        weekend_format = service.classify_weekend(schedule.season, schedule.round)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold]{schedule.race_name}[/] ({schedule.season}, round {schedule.round})\n"
            f"{schedule.circuit_name}, {schedule.location.locality}, {schedule.location.country}\n"
            f"Format: {weekend_format.value}",
            title="Next race",
            border_style="red",
        )
    )
    for label, start in schedule.sessions.items():
        console.print(f"  {label:<18} {start}")


@app.command()
def history(
    circuit_id: str = typer.Argument(..., help="Circuit identifier, e.g. monza"),
    year: Optional[int] = typer.Option(None, help="Treat this as the current year"),
) -> None:
    """Show past results at a circuit."""
    from ....composition.container import get_backfill_service

    with console.status(f"[bold green]Backfilling {circuit_id}...[/]"):
        seasons = get_backfill_service().backfill(circuit_id, current_year=year)

    if not seasons:
        console.print(f"[yellow]No results found for '{circuit_id}'[/]")
        return

    _print_history(f"{circuit_id} history", seasons)


@app.command()
def status() -> None:
    """Show which integrations are configured."""
    console.print("[bold]Race brief status[/]\n")

    checks = [
        (bool(settings.google_api_key), "Gemini circuit history", "GOOGLE_API_KEY"),
        (bool(settings.overtake_sheet_csv_url), "Overtake spreadsheet", "OVERTAKE_SHEET_CSV_URL"),
        (bool(settings.aws_s3_bucket), "S3 publishing", "AWS_S3_BUCKET"),
        (
            bool(settings.telegram_bot_token and settings.telegram_chat_id),
            "Telegram notifications",
            "TELEGRAM_BOT_TOKEN / TELEGRAM_CHAT_ID",
        ),
    ]
    for configured, name, env_var in checks:
        if configured:
            console.print(f"✅ {name} configured")
        else:
            console.print(f"❌ {name} disabled (set {env_var} in .env)")

    console.print(f"\nLocal output: {settings.output_path}")
    console.print(f"History window: {settings.history_window} seasons")
