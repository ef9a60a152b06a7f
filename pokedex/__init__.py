"""Pokédex viewer: browse PokeAPI creatures one card at a time."""

__version__ = "0.1.0"
