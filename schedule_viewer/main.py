"""Main Streamlit application entry point"""
import logging
import streamlit as st
from schedule_viewer.config import DEFAULT_CATALOG, config
from schedule_viewer.data.schedule_loader import ScheduleLoader
from schedule_viewer.ui.renderer import StreamlitRenderTarget
from schedule_viewer.ui.selectors import consume_key_press, keypress_listener, schedule_selector


def setup_logging(level: str = config.LOG_LEVEL):
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s  %(name)s: %(message)s")


def get_loader() -> ScheduleLoader:
    """Get this session's schedule loader, creating it on first use.

    One loader per session keeps request tokens increasing across reruns.
    """
    if "schedule_loader" not in st.session_state:
        st.session_state.schedule_loader = ScheduleLoader(catalog=DEFAULT_CATALOG)
    return st.session_state.schedule_loader


def render():
    """Render the schedule page for one script run."""
    setup_logging()
    st.set_page_config(page_title="Class Schedule", layout="wide")
    st.title("📅 Class Schedule")

    keypress_listener(DEFAULT_CATALOG)
    consume_key_press(DEFAULT_CATALOG)

    loader = get_loader()
    resource = schedule_selector(DEFAULT_CATALOG)
    keys = ", ".join(f"{k} = {loader.label_for(DEFAULT_CATALOG.resource_for_key(k))}" for k in DEFAULT_CATALOG.keys)
    st.caption(f"Tip: press a number key to switch schedules ({keys})")

    target = StreamlitRenderTarget()
    # Keep the script run alive until the worker has drawn into the placeholders
    loader.load(resource, target).result()
