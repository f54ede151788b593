from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from moesif_seed.config import get_settings
from moesif_seed.generator import EventGenerator
from moesif_seed.infrastructure.moesif_client import (
    BatchType,
    ConfigurationError,
    MoesifClient,
    batch_endpoint,
)
from moesif_seed.reporter import (
    print_batch_result,
    print_dry_run,
    print_generation_summary,
    print_info,
)
from moesif_seed.storage import EventFileError, read_events, write_events
from moesif_seed.utils.logging import configure_logging

app = typer.Typer(help="Generate and post randomized Moesif test data.")


def _fail(*lines: str) -> NoReturn:
    for line in lines:
        typer.echo(line, err=True)
    raise typer.Exit(code=1)


@app.command()
def generate(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-c",
        help="Number of events to generate (default from settings).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default from settings).",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Specific template ID to use for every event.",
    ),
    days: Optional[int] = typer.Option(
        None,
        "--days",
        help="Look-back window in days for random event times.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="RNG seed for reproducible random choices.",
    ),
) -> None:
    """
    Generate randomized application_created events into a JSON file.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    total = settings.default_count if count is None else count
    if total <= 0:
        _fail("Error: Count must be a positive number")
    lookback_days = settings.lookback_days if days is None else days
    if lookback_days < 0:
        _fail("Error: Days must not be negative")

    try:
        generator = EventGenerator(lookback_days=lookback_days, seed=seed)
    except ValueError as exc:
        _fail(f"Error: {exc}")

    typer.echo(f"Generating {total} application_created events...")
    if template:
        typer.echo(f"   Using template: {template}")

    batch = generator.generate_batch(total, template_id=template)
    events = [event.model_dump(mode="json") for event in batch]

    try:
        path = write_events(output or settings.default_output, events)
    except OSError as exc:
        _fail(f"Error generating events: {exc}")

    print_generation_summary(events, str(path))


@app.command()
def post(
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Input file path (default from settings).",
    ),
    batch_type: BatchType = typer.Option(
        BatchType.ACTIONS,
        "--type",
        "-t",
        case_sensitive=False,
        help="Data type to post.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-d",
        help="Show what would be posted without posting.",
    ),
) -> None:
    """
    Post events from a JSON file to a Moesif batch endpoint.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    source = (file or Path(settings.default_output)).resolve()
    typer.echo(f"Reading events from: {source}")
    try:
        records = read_events(source)
    except EventFileError as exc:
        _fail(f"Error: {exc}")

    typer.echo(f"Found {len(records)} events in file")

    if dry_run:
        print_dry_run(records, batch_type.value)
        return

    if not settings.has_app_id:
        _fail(
            "Error: MOESIF_APP_ID environment variable is not set",
            "   Please create a .env file with your Moesif Application ID",
            "   Example: MOESIF_APP_ID=your_app_id_here",
        )

    try:
        client = MoesifClient(
            settings.moesif_app_id,
            settings.moesif_api_url,
            timeout=settings.request_timeout_seconds,
        )
    except ConfigurationError as exc:
        _fail(f"Error: {exc}")

    typer.echo(f"Connecting to: {client.base_url}")
    typer.echo(f"Posting {len(records)} events to Moesif...")
    result = client.post_batch(batch_type, records)

    print_batch_result(result, len(records))
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration, endpoints, and a sample payload.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    try:
        generator = EventGenerator(lookback_days=settings.lookback_days)
    except ValueError as exc:
        _fail(f"Error: EVENT_LOOKBACK_DAYS is invalid: {exc}")
    sample = generator.generate_event(template_id="nextjs-application")
    print_info(
        app_id_set=settings.has_app_id,
        api_url=settings.moesif_api_url,
        endpoints={
            batch_type.value: batch_endpoint(settings.moesif_api_url, batch_type)
            for batch_type in BatchType
        },
        sample_event=sample.model_dump(mode="json"),
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
