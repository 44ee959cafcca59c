"""UI selector components"""
import json
import streamlit as st
import streamlit.components.v1 as components
from typing import MutableMapping, Optional
from schedule_viewer.config import DEFAULT_CATALOG, ScheduleCatalog


SELECT_KEY = "schedule_select"
KEY_PARAM = "key"


def schedule_selector(catalog: ScheduleCatalog = DEFAULT_CATALOG, session_state: MutableMapping = None) -> str:
    """Create the schedule dropdown.

    The first run of a session starts on the catalog's default resource.

    Args:
        catalog: Schedule catalog
        session_state: Session state mapping (defaults to st.session_state)

    Returns:
        Selected resource name
    """
    state = st.session_state if session_state is None else session_state
    if state.get(SELECT_KEY) not in catalog:
        state[SELECT_KEY] = catalog.default_resource

    return st.selectbox(
        "Choose a schedule",
        options=catalog.resources,
        format_func=lambda resource: catalog.label(resource),
        key=SELECT_KEY,
    )


def resolve_key(catalog: ScheduleCatalog, key: Optional[str]) -> Optional[str]:
    """Map a pressed key to a resource name, or None if the key is not bound."""
    if key is None:
        return None
    return catalog.resource_for_key(str(key))


def consume_key_press(
    catalog: ScheduleCatalog = DEFAULT_CATALOG,
    query_params: MutableMapping = None,
    session_state: MutableMapping = None,
) -> Optional[str]:
    """Apply a key press forwarded through the query string.

    The parameter is removed so it is only applied once. A bound key also
    moves the dropdown to the matching resource; anything else is ignored.

    Args:
        catalog: Schedule catalog
        query_params: Query parameter mapping (defaults to st.query_params)
        session_state: Session state mapping (defaults to st.session_state)

    Returns:
        Resource name for a bound key, otherwise None
    """
    params = st.query_params if query_params is None else query_params
    state = st.session_state if session_state is None else session_state

    key = params.pop(KEY_PARAM, None)
    resource = resolve_key(catalog, key)
    if resource is not None:
        state[SELECT_KEY] = resource
    return resource


def keypress_listener(catalog: ScheduleCatalog = DEFAULT_CATALOG):
    """Install a page-wide keydown listener for the catalog's keys.

    Bound keys are forwarded as the ``key`` query parameter, which reloads
    the page and is picked up by consume_key_press.
    """
    keys = json.dumps(catalog.keys)
    components.html(
        f"""
        <script>
            const doc = window.parent.document;
            if (!doc.scheduleKeyListener) {{
                doc.scheduleKeyListener = true;
                doc.addEventListener('keydown', (event) => {{
                    const tag = event.target.tagName;
                    if (tag === 'INPUT' || tag === 'TEXTAREA') return;
                    if (!{keys}.includes(event.key)) return;
                    const url = new URL(window.parent.location.href);
                    url.searchParams.set('{KEY_PARAM}', event.key);
                    window.parent.location.href = url.toString();
                }});
            }}
        </script>
        """,
        height=0,
    )
