from __future__ import annotations

import json
from typing import Any, Dict, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from moesif_seed.domain.models import BatchResult


def _console(console: Optional[Console]) -> Console:
    return console or Console()


def _as_json(data: Any) -> Syntax:
    return Syntax(json.dumps(data, indent=2, default=str), "json", theme="ansi_dark")


def print_generation_summary(
    events: Sequence[Dict[str, Any]], path: str, console: Optional[Console] = None
) -> None:
    """
    Summarize a freshly written events file: count, location, and time range.
    """
    console = _console(console)
    console.print(f"[green]Successfully generated {len(events)} events[/green]")
    console.print(f"Saved to: {escape(str(path))}")
    if events:
        first = events[0]["request"]["time"]
        last = events[-1]["request"]["time"]
        console.print(f"Time range: {first} to {last}")


def print_dry_run(
    records: Sequence[Any], batch_type: str, console: Optional[Console] = None
) -> None:
    console = _console(console)
    console.print("\n[yellow]DRY RUN MODE - No data will be posted[/yellow]")
    if records:
        console.print("\nSample event:")
        console.print(_as_json(records[0]))
    console.print(f"\nWould post {len(records)} events to Moesif {batch_type} endpoint")


def print_batch_result(
    result: BatchResult, record_count: int, console: Optional[Console] = None
) -> None:
    """
    Render the outcome of a batch post.

    Successes show the HTTP status and response body; failures show the error,
    the status when the API answered, and any error body it returned.
    """
    console = _console(console)
    if result.success:
        console.print(f"[green]Successfully posted {record_count} events[/green]")
        console.print(f"Status: {result.status}")
        if result.data:
            console.print("Response:")
            console.print(_as_json(result.data))
        return

    console.print("[red]Failed to post events[/red]")
    console.print(f"   Error: {escape(result.error)}")
    if result.status is not None:
        console.print(f"   Status: {result.status}")
    if result.code:
        console.print(f"   Code: {escape(result.code)}")
    if result.data:
        console.print("   Details:")
        console.print(_as_json(result.data))


def print_info(
    app_id_set: bool,
    api_url: str,
    endpoints: Dict[str, str],
    sample_event: Dict[str, Any],
    console: Optional[Console] = None,
) -> None:
    """
    Render effective configuration, endpoint URLs, and a sample payload.
    """
    console = _console(console)

    config_table = Table(title="moesif-seed configuration", box=box.ROUNDED)
    config_table.add_column("Setting", style="cyan", no_wrap=True)
    config_table.add_column("Value", style="magenta")
    config_table.add_row("MOESIF_APP_ID", "[green]Set[/green]" if app_id_set else "[red]Not set[/red]")
    config_table.add_row("MOESIF_API_URL", escape(api_url))
    console.print(config_table)

    endpoint_table = Table(title="Endpoints", box=box.ROUNDED)
    endpoint_table.add_column("Type", style="cyan", no_wrap=True)
    endpoint_table.add_column("URL", style="green")
    for batch_type, url in endpoints.items():
        endpoint_table.add_row(batch_type.capitalize(), escape(url))
    console.print(endpoint_table)

    console.print("\nSample application_created event structure:")
    console.print(_as_json(sample_event))
