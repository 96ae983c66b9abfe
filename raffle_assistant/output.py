"""Output formatting and export for raffle results."""

from pathlib import Path

from raffle_assistant.config import DEFAULT_CONFIG
from raffle_assistant.session import RaffleState, claims, current_mapping, random_spots_for
from raffle_assistant.spots import format_spot_list

CSV_HEADER = "Spot #,Name"


def _quote(name: str) -> str:
    if not name:
        return ""
    return '"' + name.replace('"', '""') + '"'


def to_csv(rows: list[tuple[int, str]]) -> str:
    """Render (spot, name) rows as CSV text.

    Non-empty names are always quoted with embedded quotes doubled; an empty
    name becomes an empty field. Lines are joined with ``\\n`` and there is
    no trailing newline.
    """
    lines = [f"{spot},{_quote(name)}" for spot, name in rows]
    return "\n".join([CSV_HEADER, *lines])


def export_rows(state: RaffleState) -> list[tuple[int, str]]:
    """One (spot, name) row per spot, ascending, from the current mapping."""
    mapping = current_mapping(state)
    return [(spot, mapping.get(spot, "")) for spot in range(1, state.total_spots + 1)]


def export_csv(state: RaffleState) -> str:
    return to_csv(export_rows(state))


def export_filename(total_spots: int) -> str:
    return DEFAULT_CONFIG.export_filename_template.format(total=total_spots)


def write_export(state: RaffleState, filepath: Path | str) -> None:
    """Write the current mapping as CSV to ``filepath``."""
    try:
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            f.write(export_csv(state))
    except OSError as e:
        raise OSError(f"Failed to write export to '{filepath}': {e}") from e


def print_raffle_summary(state: RaffleState) -> None:
    """Pretty-print participants, conflicts and the spot mapping."""
    result = claims(state)
    mapping = current_mapping(state)
    status = "Assigned" if state.is_assigned else "Fixed picks only"

    print(f"\n=== Raffle: {state.total_spots} spots ({status}) ===\n")
    print(f"Participants: {len(state.participants)}")
    print(f"Filled: {len(mapping)}")
    print(f"Unfilled: {state.total_spots - len(mapping)}")

    if result.conflicts:
        print("\n⚠️  Conflicts detected:")
        for c in result.conflicts:
            print(f"  - Spot {c.spot}: first by {c.first}, later also chosen by {c.later}")

    print("\n=== Participants ===")
    for i, p in enumerate(state.participants, start=1):
        fixed = format_spot_list(p.fixed_spots) or "—"
        line = f"{i}. {p.name} | fixed: {fixed} | randoms: {p.random_count}"
        drawn = random_spots_for(state, p.id)
        if drawn:
            line += f" ({format_spot_list(drawn)})"
        print(line)

    print("\n=== Spots ===")
    for spot in range(1, state.total_spots + 1):
        name = mapping.get(spot)
        if name:
            print(f"{spot}: {name}")
