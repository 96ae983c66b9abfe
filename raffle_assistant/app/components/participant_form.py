"""Add Participant UI component."""

import streamlit as st

from raffle_assistant.session import RaffleState, add_participant
from raffle_assistant.spots import parse_spot_expression

NAME_KEY = "participant_name"
FIXED_KEY = "participant_fixed"
RANDOM_KEY = "participant_random"


def _clear_form() -> None:
    # Widgets come back with their defaults on the next run
    for key in (NAME_KEY, FIXED_KEY, RANDOM_KEY):
        st.session_state.pop(key, None)


def render_participant_form(state: RaffleState) -> RaffleState:
    """Render the add-participant form and return the (possibly) updated state.

    Inputs are kept when the entry is rejected and cleared once it is added.
    """
    st.header("➕ Add participant")

    with st.form("add_participant"):
        col1, col2, col3 = st.columns([1, 2, 1])

        with col1:
            name = st.text_input("Name", placeholder="e.g., Jane Doe", key=NAME_KEY)

        with col2:
            fixed_text = st.text_input(
                "Fixed spots (comma/range)",
                placeholder="e.g., 1,3,5-8",
                help="Spots this participant reserves. Numbers and ranges separated by commas or spaces.",
                key=FIXED_KEY,
            )

        with col3:
            random_count = st.number_input(
                "Random spots", min_value=0, value=0, step=1, key=RANDOM_KEY
            )

        submitted = st.form_submit_button("+ Add participant", type="primary")

    if not submitted:
        return state

    try:
        new_state = add_participant(state, name, fixed_text, int(random_count))
    except ValueError as e:
        st.warning(str(e))
        return state

    parsed = parse_spot_expression(fixed_text, state.total_spots)
    ignored = [*parsed.skipped, *parsed.out_of_range]
    if ignored:
        st.toast(f"Ignored fixed spot entries: {', '.join(ignored)}")

    _clear_form()
    return new_state
