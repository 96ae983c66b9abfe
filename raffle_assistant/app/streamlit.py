"""Streamlit app for the Raffle Assistant."""

import tempfile

import streamlit as st

from raffle_assistant.app.components.participant_form import render_participant_form
from raffle_assistant.app.components.participants_table import render_participants
from raffle_assistant.app.components.preview import render_preview
from raffle_assistant.config import DEFAULT_CONFIG
from raffle_assistant.data_loader import load_participants_from_csv
from raffle_assistant.session import add_participant, new_state, set_total_spots


def _on_total_spots_change() -> None:
    st.session_state.raffle = set_total_spots(
        st.session_state.raffle, int(st.session_state.total_spots_input)
    )


def _render_import(state):
    """Import participants from an uploaded CSV once per file."""
    uploaded_file = st.file_uploader(
        "Import participants CSV",
        type="csv",
        help="Columns: name, fixed (e.g. 1,3,5-8), random (count).",
    )
    if uploaded_file is None or st.session_state.imported_file_id == uploaded_file.file_id:
        return state

    # Save to temp file for load_participants_from_csv
    with tempfile.NamedTemporaryFile(delete=False, suffix=".csv", mode="wb") as tmp:
        tmp.write(uploaded_file.getvalue())
        tmp_path = tmp.name

    st.session_state.imported_file_id = uploaded_file.file_id
    try:
        entries = load_participants_from_csv(tmp_path)
        imported = state
        for name, fixed_text, random_count in entries:
            imported = add_participant(imported, name, fixed_text, random_count)
    except ValueError as e:
        st.error(f"Error loading CSV: {e}")
        return state

    st.toast(f"Imported {len(entries)} participants")
    return imported


def main():
    st.set_page_config(
        page_title=DEFAULT_CONFIG.page_title,
        page_icon=DEFAULT_CONFIG.page_icon,
        layout="wide",
    )

    # Initialize session state
    if "raffle" not in st.session_state:
        st.session_state.raffle = new_state(DEFAULT_CONFIG.default_total_spots)
    if "imported_file_id" not in st.session_state:
        st.session_state.imported_file_id = None

    st.title(f"{DEFAULT_CONFIG.page_icon} {DEFAULT_CONFIG.page_title}")
    st.markdown(
        "Fixed picks are shown right away. Randoms only appear when you click "
        "**Assign randoms**. Use **Reset randoms** to clear them. Randoms are "
        "assigned randomly among the available spots."
    )

    # --- Settings ---
    with st.sidebar:
        st.header("⚙️ Settings")
        st.number_input(
            "Total spots",
            min_value=1,
            value=DEFAULT_CONFIG.default_total_spots,
            step=1,
            key="total_spots_input",
            on_change=_on_total_spots_change,
        )
        seed = st.number_input(
            "Random Seed",
            min_value=0,
            max_value=999999,
            value=0,
            help="Set to 0 for a fresh draw each time, or a positive number for a reproducible draw.",
        )
        state = _render_import(st.session_state.raffle)

    # --- Render Components ---
    state = render_participant_form(state)
    state = render_participants(state, seed=int(seed))

    # Re-render from the top so every section reflects the new snapshot
    if state is not st.session_state.raffle:
        st.session_state.raffle = state
        st.rerun()

    render_preview(state)


if __name__ == "__main__":
    main()
