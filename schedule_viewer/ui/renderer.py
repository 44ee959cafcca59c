"""UI rendering components"""
import html
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

import streamlit as st
from streamlit.runtime.scriptrunner import add_script_run_ctx, get_script_run_ctx

from schedule_viewer.config import config
from schedule_viewer.data.models import LoadFailure, LoadResult, ScheduleEntry
from schedule_viewer.ui.layout import render_card_grid
from schedule_viewer.util.style import CARD_CSS, get_subject_color, stagger_delay


LOADING_MESSAGE = "Loading schedule..."
ERROR_SUMMARY = "Unable to load the schedule. Please check the file path and try again."
ERROR_LABEL = "Error loading schedule"
NULL_TEXT = "null"


class RenderTarget(Protocol):
    """Destination for the loader's output and status."""

    def show_loading(self) -> None:
        ...

    def render(self, result: LoadResult) -> None:
        ...


@dataclass
class DisplayState:
    """What the page shows for one display cycle.

    status is "loading", "error" or None (ready).
    """

    label: str = ""
    status: Optional[str] = None
    message: str = ""
    cards: List[str] = field(default_factory=list)


def _text(entry: ScheduleEntry, attr: str, missing: str) -> str:
    value = getattr(entry, attr)
    if value is None:
        return missing if attr in entry.missing_fields else NULL_TEXT
    return html.escape(str(value))


def schedule_title(label: Optional[str]) -> str:
    return f"{label}'s Schedule"


def build_card_html(entry: ScheduleEntry, index: int, missing: Optional[str] = None) -> str:
    """Build the HTML for one schedule card.

    Args:
        entry: Schedule entry
        index: Position in the sorted schedule (drives the stagger delay)
        missing: Text shown for absent fields (defaults to config); null
            values show as "null"

    Returns:
        HTML fragment
    """
    missing = config.MISSING_VALUE_TEXT if missing is None else missing
    return (
        f'<div class="schedule-card" style="animation-delay: {stagger_delay(index)}s">'
        f'<div class="period-badge">{_text(entry, "period", missing)}</div>'
        f'<div class="class-name">{_text(entry, "class_name", missing)}</div>'
        f'<div class="class-info">{_text(entry, "teacher", missing)}</div>'
        f'<div class="class-info">Room {_text(entry, "room_number", missing)}</div>'
        f'<span class="subject-badge" style="background-color: {get_subject_color(entry.subject_area)}">'
        f'{_text(entry, "subject_area", missing)}</span>'
        f'</div>'
    )


def loading_state() -> DisplayState:
    return DisplayState(status="loading", message=LOADING_MESSAGE)


def display_state(result: LoadResult) -> DisplayState:
    """Translate a load result into what the page should show.

    A failure shows no cards at all; a schedule shows one card per entry in
    schedule order.
    """
    if isinstance(result, LoadFailure):
        return DisplayState(
            label=ERROR_LABEL,
            status="error",
            message=f"{ERROR_SUMMARY}\n\nError details: {result.detail}",
        )

    return DisplayState(
        label=schedule_title(result.label),
        cards=[build_card_html(entry, i) for i, entry in enumerate(result)],
    )


def render_error(message: str, where=st):
    """Render an error message.

    Args:
        message: Error message
        where: Streamlit container or placeholder to draw into
    """
    where.error(f"**Error!** {message}")


def render_info(message: str, where=st):
    """Render an info message.

    Args:
        message: Info message
        where: Streamlit container or placeholder to draw into
    """
    where.info(message)


class StreamlitRenderTarget:
    """Render target backed by three Streamlit placeholders.

    Placeholders are created in the script thread; the script run context
    is captured so the loader's worker thread can write to them.
    """

    def __init__(self, label_slot=None, status_slot=None, container_slot=None):
        self._label = label_slot if label_slot is not None else st.empty()
        self._status = status_slot if status_slot is not None else st.empty()
        self._container = container_slot if container_slot is not None else st.empty()
        self._ctx = get_script_run_ctx()
        self.state = DisplayState()

    def _attach(self):
        if self._ctx is not None:
            add_script_run_ctx(threading.current_thread(), self._ctx)

    def show_loading(self) -> None:
        self._attach()
        self.state = loading_state()
        self._container.empty()
        render_info(self.state.message, where=self._status)

    def render(self, result: LoadResult) -> None:
        self._attach()
        self.state = display_state(result)
        self._label.subheader(self.state.label)

        if self.state.status == "error":
            self._container.empty()
            render_error(self.state.message, where=self._status)
            return

        self._status.empty()
        with self._container.container():
            st.markdown(CARD_CSS, unsafe_allow_html=True)
            render_card_grid(self.state.cards)
