"""Configuration loading utilities for vispeak."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from vispeak.text.chunker import MAX_CHUNK_LENGTH, MIN_CHUNK_LENGTH

_RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
DEFAULT_REPLACEMENTS_PATH = _RESOURCES_DIR / "non_vietnamese_words.csv"
DEFAULT_ACRONYMS_PATH = _RESOURCES_DIR / "acronyms.csv"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_INT_KEYS = {"api_port", "workers", "min_chunk_length", "max_chunk_length"}
_BOOL_KEYS = {"enable_transliteration", "debug"}
_STR_KEYS = {"log_level", "log_format", "api_host", "replacements_path", "acronyms_path"}


@dataclass(frozen=True)
class PipelineOptions:
    """Per-run normalization switches."""

    enable_transliteration: bool = True
    debug: bool = False
    min_chunk_length: int = MIN_CHUNK_LENGTH
    max_chunk_length: int = MAX_CHUNK_LENGTH

    def __post_init__(self) -> None:
        _check_chunk_bounds(self.min_chunk_length, self.max_chunk_length)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    log_format: str
    api_host: str
    api_port: int
    workers: int
    enable_transliteration: bool
    debug: bool
    min_chunk_length: int
    max_chunk_length: int
    replacements_path: Path
    acronyms_path: Path

    def pipeline_options(self) -> PipelineOptions:
        return PipelineOptions(
            enable_transliteration=self.enable_transliteration,
            debug=self.debug,
            min_chunk_length=self.min_chunk_length,
            max_chunk_length=self.max_chunk_length,
        )


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("VISPEAK_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int | bool] = {
        "log_level": "INFO",
        "log_format": "console",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 1,
        "enable_transliteration": True,
        "debug": False,
        "min_chunk_length": MIN_CHUNK_LENGTH,
        "max_chunk_length": MAX_CHUNK_LENGTH,
        "replacements_path": str(DEFAULT_REPLACEMENTS_PATH),
        "acronyms_path": str(DEFAULT_ACRONYMS_PATH),
    }
    defaults.update(_load_profile(profile_path))

    def env_str(key: str) -> str:
        return os.getenv(f"VISPEAK_{key.upper()}", str(defaults[key]))

    def env_int(key: str) -> int:
        name = f"VISPEAK_{key.upper()}"
        return _parse_int(name, os.getenv(name), defaults[key])

    def env_bool(key: str) -> bool:
        name = f"VISPEAK_{key.upper()}"
        return _parse_bool(name, os.getenv(name), defaults[key])

    min_chunk_length = env_int("min_chunk_length")
    max_chunk_length = env_int("max_chunk_length")
    _check_chunk_bounds(min_chunk_length, max_chunk_length)

    return AppConfig(
        env=env,
        log_level=env_str("log_level"),
        log_format=env_str("log_format"),
        api_host=env_str("api_host"),
        api_port=env_int("api_port"),
        workers=env_int("workers"),
        enable_transliteration=env_bool("enable_transliteration"),
        debug=env_bool("debug"),
        min_chunk_length=min_chunk_length,
        max_chunk_length=max_chunk_length,
        replacements_path=Path(env_str("replacements_path")),
        acronyms_path=Path(env_str("acronyms_path")),
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int | bool]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int | bool] = {}
    for key, raw in payload.items():
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key in _BOOL_KEYS:
            resolved[key] = _coerce_bool(key, raw)
        elif key in _STR_KEYS:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _check_chunk_bounds(min_length: int, max_length: int) -> None:
    if min_length < 1:
        raise ValueError(f"min_chunk_length must be >= 1, got {min_length}")
    if max_length < min_length:
        raise ValueError(
            f"max_chunk_length must be >= min_chunk_length, got {max_length} < {min_length}"
        )


def _parse_int(name: str, raw: str | None, default: object) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _parse_bool(name: str, raw: str | None, default: object) -> bool:
    if raw is None:
        return _coerce_bool(name, default)
    return _coerce_bool(name, raw)


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
