"""Assignment Preview UI component."""

import pandas as pd
import streamlit as st

from raffle_assistant.app.utils.analytics import (
    build_preview_frame,
    calculate_fill_summary,
    calculate_spots_per_participant,
)
from raffle_assistant.app.utils.visualizations import (
    create_fill_pie_chart,
    create_spots_per_participant_chart,
)
from raffle_assistant.config import DEFAULT_CONFIG
from raffle_assistant.session import RaffleState, spot_sources, unfilled_count
from raffle_assistant.types import SpotSource


def _highlight_fixed(row: pd.Series) -> list[str]:
    style = "color: #1d4ed8" if row["Source"] == SpotSource.FIXED.value else ""
    return [style] * len(row)


def render_preview(state: RaffleState) -> None:
    """Render the spot-by-spot preview with fill charts."""
    col_title, col_unfilled = st.columns([3, 1])
    with col_title:
        st.header("🎟️ Assignment preview")
    with col_unfilled:
        st.metric("Unfilled", unfilled_count(state))

    preview_df = build_preview_frame(state)
    st.dataframe(
        preview_df.style.apply(_highlight_fixed, axis=1),
        use_container_width=True,
        height=DEFAULT_CONFIG.preview_height,
        hide_index=True,
    )
    st.caption(
        "Blue names are fixed picks. Randoms only appear after clicking "
        "**Assign randoms**. Use **Reset randoms** to clear them."
    )

    if not state.participants:
        return

    col1, col2 = st.columns([2, 1])

    with col1:
        spots_df = calculate_spots_per_participant(state)
        fig = create_spots_per_participant_chart(spots_df)
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        fill_counts = calculate_fill_summary(spot_sources(state))
        fig = create_fill_pie_chart(fill_counts)
        st.plotly_chart(fig, use_container_width=True)
