"""Data sources: PokeAPI catalog client."""

from pokedex.infrastructure.data.sources.pokeapi_client import PokeApiClient, RetrievalFailure

__all__ = ["PokeApiClient", "RetrievalFailure"]
