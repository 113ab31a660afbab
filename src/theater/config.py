from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigurationError

try:
    import tomllib  # py311+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib


_LINE_SEPARATORS: Dict[str, str] = {
    "lf": "\n",
    "crlf": "\r\n",
    "native": os.linesep,
}


@dataclass(frozen=True)
class Config:
    """Display settings for rendered statements. Pricing rules are not configurable."""

    currency: str = "USD"
    locale: str = "en_US"
    line_separator: str = os.linesep


_ENV_PREFIX = "THEATER_"


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def _to_line_separator(value: Any) -> str:
    if value in _LINE_SEPARATORS.values():
        return str(value)
    key = str(value).strip().lower()
    if key not in _LINE_SEPARATORS:
        choices = ", ".join(sorted(_LINE_SEPARATORS))
        raise ConfigurationError(f"Unsupported line_separator {value!r}; expected one of: {choices}")
    return _LINE_SEPARATORS[key]


def _to_currency(value: Any) -> str:
    code = str(value).strip().upper()
    if not code:
        raise ConfigurationError("currency must be a non-empty currency code")
    return code


def _from_sources(raw: Dict[str, Any]) -> Config:
    currency = os.getenv(f"{_ENV_PREFIX}CURRENCY", raw.get("currency", "USD"))
    locale = os.getenv(f"{_ENV_PREFIX}LOCALE", raw.get("locale", "en_US"))
    line_separator = os.getenv(f"{_ENV_PREFIX}LINE_SEPARATOR", raw.get("line_separator", "native"))

    return Config(
        currency=_to_currency(currency),
        locale=str(locale).strip(),
        line_separator=_to_line_separator(line_separator),
    )


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {}) if isinstance(parsed, dict) else {}
    theater = tool.get("theater", {}) if isinstance(tool, dict) else {}
    return _from_sources(theater if isinstance(theater, dict) else {})


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    load_config.cache_clear()
    return load_config(start_dir)
