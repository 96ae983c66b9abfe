"""Visualization functions for creating Plotly charts."""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

SOURCE_COLORS = {"Fixed": "#1d4ed8", "Random": "#111827", "Empty": "#d1d5db"}


@st.cache_data
def create_fill_pie_chart(fill_counts: dict[str, int]) -> go.Figure:
    """Create a pie chart of fixed, random and empty spots."""
    fill_df = pd.DataFrame(
        [{"Source": k, "Spots": v} for k, v in fill_counts.items() if v > 0],
        columns=["Source", "Spots"],
    )
    fig = px.pie(
        fill_df,
        values="Spots",
        names="Source",
        title="Spot Fill",
        color="Source",
        color_discrete_map=SOURCE_COLORS,
    )
    return fig


@st.cache_data
def create_spots_per_participant_chart(spots_df: pd.DataFrame) -> go.Figure:
    """Create a stacked bar chart of fixed and random spots per participant."""
    fig = px.bar(
        spots_df.head(20),
        x="Participant",
        y=["Fixed", "Random"],
        title="Spots per Participant (Top 20)",
        color_discrete_map=SOURCE_COLORS,
    )
    fig.update_layout(yaxis_title="Spots", legend_title_text="Source")
    return fig
