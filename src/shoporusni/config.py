from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
import tomllib
from typing import Any

import typer

from shoporusni import __version__
from shoporusni.api.client import DEFAULT_URL
from shoporusni.errors import CacheIOError, ConfigError
from shoporusni.util.duration import parse_duration
from shoporusni.util.logging import get_logger

LOG = get_logger(__name__)

APP_NAME = "shoporusni"
CONFIG_FILE_NAME = "config.toml"
DEFAULT_REFRESH = "30minutes"
CONFIG_SECTIONS = frozenset({"api", "cache"})


@dataclass(frozen=True)
class ApiConfig:
    url: str = DEFAULT_URL
    user_agent: str = f"shoporusni/{__version__}"
    timeout_seconds: float = 30


@dataclass(frozen=True)
class CacheConfig:
    refresh: str = DEFAULT_REFRESH

    @property
    def ttl(self) -> timedelta:
        return parse_duration(self.refresh)


@dataclass(frozen=True)
class Config:
    api: ApiConfig
    cache: CacheConfig


def config_dir() -> Path:
    """Return the per-user config directory, creating it if needed."""
    return ensure_dir(Path(typer.get_app_dir(APP_NAME)))


def ensure_dir(path: Path) -> Path:
    LOG.debug("Config dir: %s", path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CacheIOError(f"Creating config directory {path}: {exc}") from exc
    return path


def load_config(path: Path, required: bool = False) -> Config:
    if not path.exists():
        if required:
            raise ConfigError(f"Missing config file: {path}")
        LOG.debug("No config file at %s, using defaults", path)
        return Config(api=ApiConfig(), cache=CacheConfig())

    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    unknown = sorted(set(raw) - CONFIG_SECTIONS)
    if unknown:
        raise ConfigError(f"Unknown setting in {path}: {', '.join(unknown)}")

    try:
        cfg = Config(
            api=ApiConfig(**_section(raw, "api")),
            cache=CacheConfig(**_section(raw, "cache")),
        )
    except TypeError as exc:
        raise ConfigError(f"Invalid setting in {path}: {exc}") from exc

    _validate(cfg, path)
    return cfg


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _validate(cfg: Config, path: Path) -> None:
    if not isinstance(cfg.api.url, str) or not cfg.api.url:
        raise ConfigError(f"{path}: api.url must be a non-empty string")
    if not isinstance(cfg.api.user_agent, str):
        raise ConfigError(f"{path}: api.user_agent must be a string")
    timeout = cfg.api.timeout_seconds
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"{path}: api.timeout_seconds must be a positive number")
    if not isinstance(cfg.cache.refresh, str):
        raise ConfigError(f"{path}: cache.refresh must be a duration string")
    try:
        cfg.cache.ttl
    except ValueError as exc:
        raise ConfigError(f"{path}: cache.refresh: {exc}") from exc
