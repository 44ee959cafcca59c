"""Layout utilities"""
import streamlit as st
from typing import List
from schedule_viewer.config import config


def create_card_grid(cards: List[str], cols_per_row: int = config.COLS_PER_ROW) -> List[List[str]]:
    """Split cards into rows, keeping schedule order left to right.

    Args:
        cards: Card HTML fragments in display order
        cols_per_row: Number of columns per row

    Returns:
        List of rows, each containing card fragments
    """
    return [
        cards[i:i + cols_per_row]
        for i in range(0, len(cards), cols_per_row)
    ]


def render_card_grid(cards: List[str], cols_per_row: int = config.COLS_PER_ROW):
    """Render schedule cards in a grid layout.

    Args:
        cards: Card HTML fragments in display order
        cols_per_row: Number of columns per row
    """
    for row in create_card_grid(cards, cols_per_row):
        columns = st.columns(cols_per_row)
        for card, col in zip(row, columns):
            with col:
                st.markdown(card, unsafe_allow_html=True)
