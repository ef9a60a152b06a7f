"""
Pokédex viewer: Streamlit UI entry point.
"""

import asyncio

import streamlit as st

# Load .env first so the catalog URL and range apply to everything below
from pokedex.utils.config import load_config, log_level, pokeapi_base_url
load_config()

from pokedex.infrastructure.data.sources.pokeapi_client import PokeApiClient
from pokedex.services.viewer import CreatureViewer
from pokedex.ui.creature_display import DisplaySurface, inject_card_css, render_card
from pokedex.utils.logger import setup_logger, get_logger

setup_logger("pokedex", level=log_level())
log = get_logger()

st.set_page_config(page_title="Pokédex", layout="centered")
st.title("Pokédex")
inject_card_css()


@st.cache_resource
def get_pokeapi_client():
    return PokeApiClient()


if "viewer" not in st.session_state:
    st.session_state.surface = DisplaySurface()
    st.session_state.viewer = CreatureViewer(get_pokeapi_client(), st.session_state.surface)
    st.session_state.pending_action = "start"

viewer: CreatureViewer = st.session_state.viewer
surface: DisplaySurface = st.session_state.surface


def run_action(action: str) -> None:
    """Invoke a navigation handler inside an event loop and wait for the card to settle."""

    async def _dispatch() -> None:
        getattr(viewer, action)()
        await viewer.flush()

    log.debug("Navigation action: %s (current #%d)", action, viewer.state.current_id)
    with st.spinner("Loading…"):
        asyncio.run(_dispatch())


card_slot = st.empty()

col_prev, col_random, col_next = st.columns(3)
with col_prev:
    if st.button("◀ Previous", key="prev_btn", use_container_width=True):
        st.session_state.pending_action = "step_backward"
with col_random:
    if st.button("🎲 Random", key="random_btn", use_container_width=True):
        st.session_state.pending_action = "jump_random"
with col_next:
    if st.button("Next ▶", key="next_btn", use_container_width=True):
        st.session_state.pending_action = "step_forward"

pending = st.session_state.get("pending_action")
if pending:
    st.session_state.pending_action = None
    run_action(pending)

render_card(surface, st=card_slot)

with st.expander("Debug"):
    st.caption(f"Catalog: `{pokeapi_base_url()}` · range 1–{viewer.state.max_id}")
    st.caption(f"Current id: {viewer.state.current_id} · renders: {surface.render_count}")
    if viewer.last_error:
        st.error("Last retrieval failed:")
        st.code(viewer.last_error, language="text")
    else:
        st.caption("No error recorded. Retrieval failures appear here.")
