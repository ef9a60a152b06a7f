"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over values in .env.
    """
    load_dotenv(_project_root() / ".env", override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_optional_float(key: str, default: float | None = None) -> float | None:
    """Get optional env var as float; return default if missing, invalid or not positive."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


# --- Public config accessors ---

def pokeapi_base_url() -> str:
    """Optional: catalog endpoint; records are fetched from {base}/{id}."""
    return get_optional("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2/pokemon").rstrip("/")


def sprite_base_url() -> str:
    """Optional: base URL of the animated sprites, addressed as {base}/{id}.gif."""
    return get_optional(
        "POKEAPI_SPRITE_BASE_URL",
        "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/showdown",
    ).rstrip("/")


def total_creatures() -> int:
    """Optional: upper bound of the navigable range. Default 151 (original Pokédex)."""
    val = get_optional_int("POKEDEX_TOTAL", 151)
    return val if val >= 1 else 151


def request_timeout() -> float | None:
    """Optional: HTTP timeout in seconds. Default None (wait indefinitely)."""
    return get_optional_float("POKEAPI_TIMEOUT")


def log_level() -> str:
    """Optional: logging level name. Default INFO."""
    return get_optional("LOG_LEVEL", "INFO").upper()


def project_root() -> Path:
    """Project root directory."""
    return _project_root()
