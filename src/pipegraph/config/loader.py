from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dynaconf import Dynaconf

from pipegraph.config.settings import (
    LoggingConfig,
    PipegraphConfig,
    PipelineConfig,
    TraversalConfig,
)

DEFAULTS = {
    # Strategy used by ancestors/descendants: breadth_first | depth_first
    "TRAVERSAL_STRATEGY": "breadth_first",
    # Drop None members when the Expander flattens a collection
    "PIPELINE_COMPACT_EXPANDED": True,
    # Level applied to the "pipegraph" logger by configure_logging()
    "LOG_LEVEL": "WARNING",
}

_STRATEGIES = ("breadth_first", "depth_first")

_override: Optional[PipegraphConfig] = None


def _settings() -> Dynaconf:
    settings = Dynaconf(
        envvar_prefix="PIPEGRAPH",
        load_dotenv=True,
        settings_files=[],
    )
    for key, value in DEFAULTS.items():
        if settings.get(key) is None:
            settings.set(key, value)
    return settings


def load_config() -> PipegraphConfig:
    """
    Build a PipegraphConfig from DEFAULTS overlaid with PIPEGRAPH_* env vars.
    """
    settings = _settings()

    strategy = str(settings.get("TRAVERSAL_STRATEGY")).lower()
    if strategy not in _STRATEGIES:
        raise ValueError(
            f"PIPEGRAPH_TRAVERSAL_STRATEGY must be one of {_STRATEGIES}, "
            f"got {strategy!r}"
        )

    return PipegraphConfig(
        traversal=TraversalConfig(strategy=strategy),
        pipeline=PipelineConfig(
            compact_expanded=bool(settings.get("PIPELINE_COMPACT_EXPANDED")),
        ),
        logging=LoggingConfig(level=str(settings.get("LOG_LEVEL")).upper()),
    )


@lru_cache
def _loaded_config() -> PipegraphConfig:
    return load_config()


def get_config() -> PipegraphConfig:
    if _override is not None:
        return _override
    return _loaded_config()


def set_config(config: PipegraphConfig) -> None:
    global _override
    _override = config


def reset_config() -> None:
    """
    Drop any installed config and re-read the environment on next access.
    """
    global _override
    _override = None
    _loaded_config.cache_clear()
