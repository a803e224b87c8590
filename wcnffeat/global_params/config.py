"""Configuration for feature extraction.

The name/order contract of the feature vector is versioned here; any change
to the names or their order must bump FEATURE_VERSION.
"""
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FEATURE_VERSION = "1.0"

# Debug flag - can be set via environment variable WCNFFEAT_DEBUG
WCNFFEAT_DEBUG = os.environ.get("WCNFFEAT_DEBUG", "False").lower() in ("true", "1", "yes")

REPLAY_MODES = ("reopen", "memory")


@dataclass
class ExtractionConfig:
    """Configuration for a single extraction call.

    Attributes:
        replay: How the graph extractor's second pass re-traverses the input.
            "reopen" reads the source again, "memory" materializes the clauses
            once and replays them from memory.
        parallel: Run the two extractors on a two-worker thread pool.
        encoding: Text encoding used when opening files.
    """

    replay: str = "reopen"  # reopen | memory
    parallel: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.replay not in REPLAY_MODES:
            raise ValueError(f"replay must be one of {REPLAY_MODES}, got {self.replay!r}")
        logger.debug("Extraction config: %s", self)
