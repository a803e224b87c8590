"""
Enumerations for WCNF dialects and clause kinds.
"""

from enum import Enum, auto


class WCNFFormat(Enum):
    """WCNF dialects, decided once per file from the header."""

    LEGACY = auto()  # "p wcnf ... top", hardness by weight >= top
    NEW = auto()  # no top, hardness by a leading "h"


class ClauseKind(Enum):
    """Clause kinds in weighted MaxSAT."""

    HARD = auto()
    SOFT = auto()
