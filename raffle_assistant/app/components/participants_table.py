"""Participants table and raffle actions UI component."""

import random

import streamlit as st

from raffle_assistant.app.utils.analytics import build_participants_frame
from raffle_assistant.engine import ConflictError
from raffle_assistant.output import export_csv, export_filename
from raffle_assistant.session import (
    RaffleState,
    assign_randoms,
    claims,
    remove_participant,
    reset_randoms,
)


def render_participants(state: RaffleState, seed: int = 0) -> RaffleState:
    """Render the participants list with assign, export and reset actions."""
    result = claims(state)

    col_title, col_assign, col_export, col_reset = st.columns([3, 1, 1, 1])

    with col_title:
        st.header(f"👥 Participants ({len(state.participants)})")

    with col_assign:
        assign_clicked = st.button(
            "Assign randoms", type="primary", disabled=not result.is_valid
        )

    with col_export:
        st.download_button(
            label="Export CSV",
            data=export_csv(state),
            file_name=export_filename(state.total_spots),
            mime="text/csv",
        )

    with col_reset:
        reset_clicked = st.button("Reset randoms")

    if not result.is_valid:
        lines = "\n".join(
            f"- Spot {c.spot}: first by **{c.first}**, later also chosen by **{c.later}**"
            for c in result.conflicts
        )
        st.error(
            "**Conflicts detected:** Two or more people chose the same fixed spot. "
            f"Please edit the entries below.\n\n{lines}"
        )

    if assign_clicked:
        rng = random.Random(seed) if seed > 0 else random.Random()
        try:
            state = assign_randoms(state, rng)
        except ConflictError:
            st.error("Conflicts detected. Please resolve before assigning randoms.")

    if reset_clicked:
        state = reset_randoms(state)

    if not state.participants:
        st.info("No participants yet. Add someone above.")
        return state

    df = build_participants_frame(state)
    header = st.columns([1, 3, 3, 3, 1])
    for col, label in zip(header, [*df.columns, ""]):
        col.markdown(f"**{label}**")

    for participant, row in zip(state.participants, df.itertuples(index=False)):
        cols = st.columns([1, 3, 3, 3, 1])
        for col, cell in zip(cols, row):
            col.write(cell)
        if cols[-1].button("Remove", key=f"remove_{participant.id}"):
            state = remove_participant(state, participant.id)

    return state
