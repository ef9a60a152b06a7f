"""
PokeAPI client for fetching a single creature record by id.

No caching and no retries: every call is one GET against {base_url}/{id}.
"""

from __future__ import annotations

from typing import Any

import requests

from pokedex.utils.config import pokeapi_base_url, request_timeout, sprite_base_url
from pokedex.utils.logger import get_logger

logger = get_logger()


class RetrievalFailure(RuntimeError):
    """Raised when a record cannot be fetched: transport error, non-2xx status or malformed body."""

    def __init__(
        self,
        message: str,
        creature_id: int | None = None,
        status_code: int | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.creature_id = creature_id
        self.status_code = status_code
        self.original = original


def _require_int(data: dict[str, Any], key: str, minimum: int) -> int:
    val = data[key]
    # bool is an int subclass; reject it explicitly.
    if isinstance(val, bool) or not isinstance(val, int) or val < minimum:
        raise ValueError(f"{key} must be an integer >= {minimum}, got {val!r}")
    return val


def _object(value: Any, what: str) -> dict[str, Any]:
    """Missing or null -> {}; anything other than a JSON object is a malformed body."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _named(entries: list[Any], key: str) -> list[str]:
    """Pull entry[key]["name"] out of PokeAPI's nested slot lists, keeping order."""
    out: list[str] = []
    for entry in entries:
        name = entry[key]["name"]
        if not isinstance(name, str):
            raise ValueError(f"{key} name must be a string, got {name!r}")
        out.append(name)
    return out


def parse_creature(data: Any, sprite_base: str) -> dict[str, Any]:
    """
    Parse a PokeAPI /pokemon/{id} body into a creature record.

    Args:
        data: Decoded JSON body.
        sprite_base: Base URL of animated sprites; the record's sprite is {sprite_base}/{id}.gif.

    Returns:
        Dict with keys: id, name, types, height, weight, abilities, sprite, artwork.

    Raises:
        ValueError, KeyError, TypeError: If the body does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")

    creature_id = _require_int(data, "id", 1)
    name = data["name"]
    if not isinstance(name, str):
        raise ValueError(f"name must be a string, got {name!r}")
    types = _named(data["types"], "type")
    if not types:
        raise ValueError("types must not be empty")
    abilities = _named(data.get("abilities") or [], "ability")

    sprites = _object(data.get("sprites"), "sprites")
    other = _object(sprites.get("other"), "sprites.other")
    artwork = _object(other.get("official-artwork"), "official-artwork").get("front_default")

    return {
        "id": creature_id,
        "name": name,
        "types": types,
        "height": _require_int(data, "height", 0),
        "weight": _require_int(data, "weight", 0),
        "abilities": abilities,
        "sprite": f"{sprite_base}/{creature_id}.gif",
        "artwork": artwork or sprites.get("front_default") or None,
    }


class PokeApiClient:
    """
    Thin wrapper over the PokeAPI catalog endpoint.

    Configuration comes from pokedex.utils.config unless passed explicitly.
    """

    def __init__(
        self,
        base_url: str | None = None,
        sprite_base: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = (base_url or pokeapi_base_url()).rstrip("/")
        self._sprite_base = (sprite_base or sprite_base_url()).rstrip("/")
        self._timeout = timeout if timeout is not None else request_timeout()

    @property
    def base_url(self) -> str:
        return self._base_url

    def creature_url(self, creature_id: int) -> str:
        return f"{self._base_url}/{creature_id}"

    def fetch_creature(self, creature_id: int) -> dict[str, Any]:
        """
        Fetch and parse one creature record.

        Args:
            creature_id: Positive catalog identifier.

        Returns:
            Creature record dict (see parse_creature).

        Raises:
            RetrievalFailure: On network error, non-2xx status, invalid JSON or unexpected body.
        """
        url = self.creature_url(creature_id)
        status: int | None = None
        try:
            r = requests.get(
                url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            status = getattr(r, "status_code", None)
            r.raise_for_status()
            data = r.json()
        # requests.JSONDecodeError is also a RequestException; it must be caught first.
        except requests.JSONDecodeError as e:
            logger.exception("PokeAPI invalid JSON for %s: %s", url, e)
            raise RetrievalFailure(
                f"Invalid JSON for creature {creature_id}",
                creature_id=creature_id,
                status_code=status,
                original=e,
            ) from e
        except requests.RequestException as e:
            logger.exception("PokeAPI request failed for %s: %s", url, e)
            raise RetrievalFailure(
                f"Request for creature {creature_id} failed: {e}",
                creature_id=creature_id,
                status_code=status,
                original=e,
            ) from e

        try:
            record = parse_creature(data, self._sprite_base)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.exception("PokeAPI unexpected body for %s: %s", url, e)
            raise RetrievalFailure(
                f"Unexpected response body for creature {creature_id}: {e}",
                creature_id=creature_id,
                status_code=status,
                original=e,
            ) from e

        logger.info("PokeAPI fetched #%d %s", record["id"], record["name"])
        return record
