"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

LOG_VERBOSITIES = ("low", "medium", "high")


@dataclass(frozen=True)
class CoreConfig:
    debug: bool = False
    log_verbosity: str = "medium"


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    return normalized if normalized in choices else default


def config_from_env(*, debug: bool | None = None) -> CoreConfig:
    return CoreConfig(
        debug=_env_bool("NETGUARD_DEBUG") if debug is None else debug,
        log_verbosity=_env_choice("NETGUARD_LOG_VERBOSITY", LOG_VERBOSITIES, "medium"),
    )


@lru_cache(maxsize=1)
def get_config() -> CoreConfig:
    return config_from_env()


__all__ = ["CoreConfig", "LOG_VERBOSITIES", "config_from_env", "get_config"]
