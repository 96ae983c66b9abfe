"""CLI entry point for the raffle assistant."""

import logging
import random
from pathlib import Path
from typing import Annotated, Optional

import typer

from raffle_assistant.config import DEFAULT_CONFIG
from raffle_assistant.data_loader import load_participants_from_csv
from raffle_assistant.engine import ConflictError
from raffle_assistant.output import print_raffle_summary, write_export
from raffle_assistant.session import add_participant, assign_randoms, new_state

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

app = typer.Typer(
    help="Assign raffle spots: fixed picks first, randoms drawn from what is left"
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command()
def main(
    csv_file: Annotated[
        Path,
        typer.Argument(
            help="Participants CSV (columns: name, fixed, random)"
        ),
    ],
    total_spots: Annotated[
        int,
        typer.Option("-n", "--total-spots", min=1, help="Number of spots in the raffle"),
    ] = DEFAULT_CONFIG.default_total_spots,
    seed: Annotated[
        Optional[int],
        typer.Option("-s", "--seed", help="Random seed for a reproducible draw"),
    ] = None,
    assign: Annotated[
        bool,
        typer.Option(
            "--assign/--no-assign",
            help="Draw random spots; with --no-assign only fixed picks are shown",
        ),
    ] = True,
    output: Annotated[
        Optional[Path], typer.Option("-o", "--output", help="Export the spot list to CSV")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Show debug logging")
    ] = False,
) -> None:
    """Run the raffle assistant."""
    _configure_logging(verbose)

    if not csv_file.exists():
        typer.echo(f"Error: File not found: {csv_file}", err=True)
        raise typer.Exit(1)

    try:
        entries = load_participants_from_csv(csv_file)
        state = new_state(total_spots)
        for name, fixed_text, random_count in entries:
            state = add_participant(state, name, fixed_text, random_count)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    exit_code = 0
    if assign:
        try:
            state = assign_randoms(state, random.Random(seed))
        except ConflictError as e:
            typer.echo(f"Error: {e}", err=True)
            exit_code = 1

    print_raffle_summary(state)

    if output:
        write_export(state, output)
        typer.echo(f"\nSpot list exported to: {output}")

    if exit_code:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
