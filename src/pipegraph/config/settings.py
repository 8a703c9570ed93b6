from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# ---------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class TraversalConfig:
    """
    Controls how ancestors and descendants are walked when no explicit
    strategy is requested.
    """

    strategy: Literal["breadth_first", "depth_first"] = "breadth_first"


# ---------------------------------------------------------------------
# Pipeline evaluation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PipelineConfig:
    """
    Controls how pipeline segments treat the values flowing through them.
    """

    # Drop None members when expanding a collection into single values.
    compact_expanded: bool = True


# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PipegraphConfig:
    """
    Root configuration object for pipegraph.

    Treated as immutable policy; install a different one with
    ``pipegraph.config.set_config``.
    """

    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
