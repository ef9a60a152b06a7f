"""
Map a creature record to the text shown on the card. Pure functions, no I/O.

A record is a dict with keys: id, name, types, height, weight, abilities,
sprite, artwork (see pokeapi_client.parse_creature).
"""

from __future__ import annotations

from typing import Any

UNKNOWN_ABILITY = "Unknown"
LENGTH_UNIT = "m"
MASS_UNIT = "kg"


def _tenths(value: int, unit: str) -> str:
    # Catalog stores decimetres / hectograms.
    return f"{value / 10:.1f} {unit}"


def format_height(height: int) -> str:
    """Height in decimetres -> metres with one decimal, e.g. 7 -> "0.7 m"."""
    return _tenths(height, LENGTH_UNIT)


def format_weight(weight: int) -> str:
    """Weight in hectograms -> kilograms with one decimal, e.g. 69 -> "6.9 kg"."""
    return _tenths(weight, MASS_UNIT)


def format_number(creature_id: int) -> str:
    return f"#{creature_id:03d}"


def format_types(types: list[str]) -> str:
    return ", ".join(types)


def format_ability(abilities: list[str]) -> str:
    """First ability with hyphens turned into spaces; placeholder when there are none."""
    if not abilities:
        return UNKNOWN_ABILITY
    return abilities[0].replace("-", " ")


def display_fields(record: dict[str, Any]) -> dict[str, Any]:
    """
    Build the display fields for one record.

    Returns:
        Dict with keys: image_src, image_fallback, image_alt, name, types,
        height, weight, number, ability. image_fallback may be None.
    """
    return {
        "image_src": record["sprite"],
        "image_fallback": record.get("artwork"),
        "image_alt": record["name"],
        "name": record["name"],
        "types": format_types(record["types"]),
        "height": format_height(record["height"]),
        "weight": format_weight(record["weight"]),
        "number": format_number(record["id"]),
        "ability": format_ability(record["abilities"]),
    }
