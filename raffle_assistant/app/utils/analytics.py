"""Tables and summaries derived from the raffle state."""

from collections import Counter

import pandas as pd
import streamlit as st

from raffle_assistant.session import (
    RaffleState,
    claims,
    current_mapping,
    random_spots_for,
    spot_sources,
)
from raffle_assistant.spots import format_spot_list
from raffle_assistant.types import SpotSource


def build_participants_frame(state: RaffleState) -> pd.DataFrame:
    """One row per participant: position, name, fixed spots and randoms."""
    rows = []
    for i, p in enumerate(state.participants, start=1):
        randoms = str(p.random_count)
        drawn = random_spots_for(state, p.id)
        if drawn:
            randoms += f" ({format_spot_list(drawn)})"
        rows.append(
            {
                "#": i,
                "Name": p.name,
                "Fixed spots": format_spot_list(p.fixed_spots) or "—",
                "Randoms": randoms,
            }
        )
    return pd.DataFrame(rows, columns=["#", "Name", "Fixed spots", "Randoms"])


def build_preview_frame(state: RaffleState) -> pd.DataFrame:
    """One row per spot with the current name and where it came from."""
    mapping = current_mapping(state)
    sources = spot_sources(state)
    return pd.DataFrame(
        [
            (spot, mapping.get(spot, ""), sources[spot].value)
            for spot in range(1, state.total_spots + 1)
        ],
        columns=["Spot #", "Name", "Source"],
    )


@st.cache_data
def calculate_fill_summary(sources: dict[int, SpotSource]) -> dict[str, int]:
    """Count spots per source (fixed, random, empty)."""
    counts = Counter(source.value for source in sources.values())
    return {source.value: counts.get(source.value, 0) for source in SpotSource}


def calculate_spots_per_participant(state: RaffleState) -> pd.DataFrame:
    """Fixed and random spots held by each name in the current mapping."""
    fixed_claims = claims(state).claims
    fixed: Counter[str] = Counter(fixed_claims.values())
    drawn: Counter[str] = Counter(
        name for spot, name in current_mapping(state).items() if spot not in fixed_claims
    )

    # Keep names in insertion order, once each
    names = list(dict.fromkeys(p.name for p in state.participants))
    df = pd.DataFrame(
        [(name, fixed[name], drawn[name]) for name in names],
        columns=["Participant", "Fixed", "Random"],
    )
    df["Total"] = df["Fixed"] + df["Random"]
    return df.sort_values("Total", ascending=False, kind="stable").reset_index(drop=True)
