"""
Creature card: the display sinks written by the viewer and the Streamlit renderer.
"""

from __future__ import annotations

import html
from typing import Any

import streamlit as st

FIELD_NAMES = (
    "image_src",
    "image_fallback",
    "image_alt",
    "name",
    "types",
    "height",
    "weight",
    "number",
    "ability",
)

CARD_CSS = """
<style>
@keyframes floatPokemon {
    0%, 100% { transform: translateY(0); }
    50% { transform: translateY(-12px); }
}
@keyframes pulseGlow {
    0%, 100% { filter: drop-shadow(0 0 4px rgba(255, 222, 0, 0.4)); }
    50% { filter: drop-shadow(0 0 16px rgba(255, 222, 0, 0.9)); }
}
.dex-card {
    max-width: 360px;
    margin: 0 auto;
    padding: 16px;
    border-radius: 16px;
    background: #cc0000;
    color: #ffffff;
    text-align: center;
}
.dex-screen {
    background: #dedede;
    border-radius: 8px;
    padding: 12px;
    min-height: 160px;
}
.dex-screen img.power-attack {
    max-height: 140px;
    animation: floatPokemon 3s ease-in-out infinite, pulseGlow 2s ease-in-out infinite;
}
.dex-number { opacity: 0.8; margin: 8px 0 0 0; }
.dex-name { text-transform: capitalize; margin: 4px 0 12px 0; }
.dex-stats { text-align: left; line-height: 1.8; }
.dex-stats span.value { float: right; text-transform: capitalize; }
</style>
"""


class DisplaySurface:
    """
    Writable field sinks for one card.

    apply() overwrites every field; show_error() touches the name only, so the
    other fields keep whatever the last successful render wrote.
    """

    def __init__(self) -> None:
        self.fields: dict[str, Any] = {k: "" for k in FIELD_NAMES}
        self.fields["image_fallback"] = None
        self.render_count = 0

    def apply(self, fields: dict[str, Any]) -> None:
        for k in FIELD_NAMES:
            self.fields[k] = fields.get(k)
        # Bumping the counter re-keys the image so the CSS animation restarts.
        self.render_count += 1

    def show_error(self, message: str) -> None:
        self.fields["name"] = message

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)


def _image_html(fields: dict[str, Any], render_count: int) -> str:
    src = fields.get("image_src") or ""
    if not src:
        return ""
    fallback = fields.get("image_fallback")
    onerror = ""
    if fallback:
        # Browser-side swap to the static artwork; cleared first so it fires once.
        onerror = f' onerror="this.onerror=null;this.src=\'{html.escape(fallback, quote=True)}\';"'
    return (
        f'<img id="dex-img-{render_count}" class="power-attack" '
        f'src="{html.escape(src, quote=True)}" '
        f'alt="{html.escape(fields.get("image_alt") or "", quote=True)}"{onerror}>'
    )


def card_html(surface: DisplaySurface) -> str:
    """Build the card markup from the surface's current fields."""
    f = surface.fields

    def _text(key: str) -> str:
        return html.escape(str(f.get(key) or ""))

    return (
        '<div class="dex-card">'
        f'<div class="dex-screen">{_image_html(f, surface.render_count)}</div>'
        f'<p class="dex-number">{_text("number")}</p>'
        f'<h2 class="dex-name">{_text("name")}</h2>'
        '<div class="dex-stats">'
        f'<div>Type <span class="value">{_text("types")}</span></div>'
        f'<div>Height <span class="value">{_text("height")}</span></div>'
        f'<div>Weight <span class="value">{_text("weight")}</span></div>'
        f'<div>Power <span class="value">{_text("ability")}</span></div>'
        "</div>"
        "</div>"
    )


def inject_card_css() -> None:
    st.markdown(CARD_CSS, unsafe_allow_html=True)


def render_card(surface: DisplaySurface, st=st) -> None:
    """Render the card for the surface's current fields."""
    st.markdown(card_html(surface), unsafe_allow_html=True)
