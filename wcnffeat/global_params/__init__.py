"""Global parameters module for wcnffeat.

This module provides the extraction configuration and the environment-driven
flags used throughout the package.
"""
from .config import ExtractionConfig, FEATURE_VERSION, REPLAY_MODES, WCNFFEAT_DEBUG

__all__ = ["ExtractionConfig", "FEATURE_VERSION", "REPLAY_MODES", "WCNFFEAT_DEBUG"]
