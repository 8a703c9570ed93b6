"""
Configuration layer for pipegraph.

Settings are frozen dataclasses. The loader fills them from defaults and
PIPEGRAPH_* environment variables via Dynaconf; callers may also install
an explicit configuration.
"""

from pipegraph.config.settings import (
    TraversalConfig,
    PipelineConfig,
    LoggingConfig,
    PipegraphConfig,
)
from pipegraph.config.loader import (
    DEFAULTS,
    load_config,
    get_config,
    set_config,
    reset_config,
)

__all__ = [
    "TraversalConfig",
    "PipelineConfig",
    "LoggingConfig",
    "PipegraphConfig",
    "DEFAULTS",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
]
