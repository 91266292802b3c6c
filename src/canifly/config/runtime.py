"""Environment lookups with a ``.env`` fallback for the CanIFly client.

A value set in the process environment wins. Otherwise the first ``.env``
file (working directory, then home) that defines the name supplies it.
Blank values count as unset.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_FLAG_VALUES = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_dotenv_cache: Optional[dict[str, str]] = None


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines; a missing file yields no values."""
    try:
        text = path.read_text()
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {path}: {exc}") from exc

    values: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, raw = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        key = key.removeprefix("export ").strip()
        if key:
            values[key] = raw.strip().strip("'\"")
    return values


def _dotenv_values() -> dict[str, str]:
    global _dotenv_cache
    if _dotenv_cache is None:
        merged: dict[str, str] = {}
        for path in _DOTENV_CANDIDATES:
            for key, value in read_dotenv(path).items():
                merged.setdefault(key, value)
        _dotenv_cache = merged
    return _dotenv_cache


def reset_default_values() -> None:
    """Forget cached .env values so the next lookup re-reads the files."""
    global _dotenv_cache
    _dotenv_cache = None


def _lookup(name: str) -> Optional[str]:
    for candidate in (os.getenv(name), _dotenv_values().get(name)):
        if candidate is not None and candidate.strip():
            return candidate.strip()
    return None


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = _lookup(name)
    return default if value is None else value


def _env_typed(name: str, default: T, cast: Callable[[str], T], kind: str) -> T:
    raw = _lookup(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, raw, f"Expected {kind}") from exc


def env_int(name: str, default: int) -> int:
    return _env_typed(name, default, int, "an integer")


def env_float(name: str, default: float) -> float:
    return _env_typed(name, default, float, "a number")


def env_flag(name: str) -> bool:
    """True/False switch; unset means False."""
    raw = _lookup(name)
    if raw is None:
        return False
    try:
        return _FLAG_VALUES[raw.lower()]
    except KeyError:
        raise ConfigurationError.invalid_value(name, raw, "Expected a yes/no flag") from None
