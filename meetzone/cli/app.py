"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import MeetzoneError, ProposalError
from ..domain.formatters import LineFormatter
from ..services.proposal import MeetingProposalService, RawCandidate
from .base import configure_logging

app = typer.Typer(
    name="meetzone",
    help="Propose a meeting time and see it in every participant's timezone",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)


def _resolve_base(config: AppConfig, base: Optional[str]) -> Tuple[str, str]:
    """
    Resolve the base city option to (label, zone).

    Falls back to the configured base city when no option is given.
    """
    if base is None:
        city = config.get_base_city()
        return city.label, city.zone

    participant = config.resolve_participant(base)
    return participant.label, participant.zone


def _collect_candidates(
    config: AppConfig,
    date: Optional[str],
    start: str,
    end: str,
) -> List[RawCandidate]:
    """Use the command-line slot if a date is given, else the configured ones."""
    if date is not None:
        return [(date, start, end)]
    return [candidate.as_tuple() for candidate in config.candidates]


@app.command()
def propose(
    participants: Annotated[Optional[List[str]], typer.Argument(help="City names or IANA zones (e.g. 'Tokyo Asia/Dubai'). Defaults to the configured participants.")] = None,
    base: Annotated[Optional[str], typer.Option("--base", "-b", help="City (or IANA zone) the times are written in")] = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Meeting date (YYYY-MM-DD). Without it, candidates come from the config file.")] = None,
    start: Annotated[str, typer.Option("--start", help="Start time (HH:mm)")] = "09:00",
    end: Annotated[str, typer.Option("--end", help="End time (HH:mm)")] = "10:00",
    use_24h: Annotated[Optional[bool], typer.Option("--24h/--12h", help="Clock format. Defaults to the config setting.")] = None,
    labels: Annotated[bool, typer.Option("--labels", help="Prefix each time with its city name.")] = False,
    table: Annotated[bool, typer.Option("--table", help="Print an aligned table instead of one line per candidate.")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Print copy-pasteable meeting times for every participant.

    Examples:

        # One slot, written in Tokyo time
        meetzone propose "New York" London --base Tokyo --date 2026-01-19 --start 20:00 --end 21:00

        # Aligned table, 24-hour clock
        meetzone propose Asia/Dubai Sydney --date 2026-07-01 --start 09:00 --end 10:00 --table

        # All candidates from config.yaml
        meetzone propose --config config.yaml
    """
    configure_logging(logging.DEBUG if verbose else logging.INFO)

    try:
        config = load_config(config_file)
        base_label, base_zone = _resolve_base(config, base)
        participant_list = config.resolve_participants(participants or config.participants)
        candidates = _collect_candidates(config, date, start, end)
        if not candidates:
            console.print("[yellow]No candidates given. Use --date or add candidates to the config file.[/yellow]")
            raise typer.Exit(1)
        clock_24h = config.use_24h if use_24h is None else use_24h

        service = MeetingProposalService(
            line_formatter=LineFormatter(config.build_abbreviation_resolver()),
        )

        if table:
            output = service.render_tables(
                base_zone=base_zone,
                candidates=candidates,
                participants=participant_list,
            )
        else:
            output = service.render_lines(
                base_zone=base_zone,
                base_label=base_label,
                candidates=candidates,
                participants=participant_list,
                use_24h=clock_24h,
                show_labels=labels,
            )
    except ProposalError as e:
        for message in e.errors:
            console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        raise typer.Exit(1)
    except (MeetzoneError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.debug("Rendered %d candidate(s) for %s", len(candidates), base_label)
    console.print(output, markup=False, highlight=False, soft_wrap=True)


@app.command()
def cities(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured cities.
    """
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(
        title="Configured cities",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("City", style="bold yellow")
    table.add_column("Timezone", style="dim")
    table.add_column("Aliases")

    for city in config.cities:
        table.add_row(
            city.label,
            city.zone,
            ", ".join(city.aliases)
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]meetzone[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
