"""
Replayable clause sources.

The graph-degree features need two traversals of the same clause sequence,
so every source can be iterated any number of times and yields the same
clauses in the same order each time.
"""

import bz2
import gzip
import logging
import lzma
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, List, Sequence, Union

from wcnffeat.features.parse_wcnf import Clause, ClauseReader
from wcnffeat.utils.exceptions import (
    MalformedInputError,
    SourceUnavailableError,
)

logger = logging.getLogger(__name__)

COMPRESSED_OPENERS = {
    ".gz": gzip.open,
    ".bz2": bz2.open,
    ".xz": lzma.open,
    ".lzma": lzma.open,
}

# undecodable bytes only matter inside tokens, where the reader rejects them
DECODE_ERRORS = "surrogateescape"


class ClauseSource(ABC):
    """A sequence of clauses that can be traversed repeatedly."""

    @abstractmethod
    def clauses(self) -> Iterator[Clause]:
        """Start a fresh traversal."""

    def __iter__(self) -> Iterator[Clause]:
        return self.clauses()


class FileSource(ClauseSource):
    """A WCNF file, re-opened on every traversal. Compressed files are read by suffix."""

    def __init__(self, path: Union[str, os.PathLike], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        if not self.path.is_file():
            raise SourceUnavailableError(f"No such file: {self.path}")
        if not os.access(self.path, os.R_OK):
            raise SourceUnavailableError(f"File not readable: {self.path}")

    def _open(self):
        opener = COMPRESSED_OPENERS.get(self.path.suffix.lower())
        try:
            if opener is not None:
                return opener(self.path, "rt", encoding=self.encoding, errors=DECODE_ERRORS)
            return open(self.path, encoding=self.encoding, errors=DECODE_ERRORS)
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self.path}: {e}") from e

    def clauses(self) -> Iterator[Clause]:
        logger.debug("Reading %s", self.path)
        with self._open() as f:
            try:
                yield from ClauseReader(f)
            except (OSError, EOFError, lzma.LZMAError) as e:
                raise SourceUnavailableError(f"Cannot read {self.path}: {e}") from e

    def __repr__(self) -> str:
        return f"FileSource({str(self.path)!r})"


class StringSource(ClauseSource):
    """WCNF text held in memory, parsed on every traversal."""

    def __init__(self, text: str):
        self.text = text

    def clauses(self) -> Iterator[Clause]:
        return iter(ClauseReader(self.text.splitlines()))

    def __repr__(self) -> str:
        return f"StringSource(<{len(self.text)} chars>)"


class MemorySource(ClauseSource):
    """A materialized arena of clause records."""

    def __init__(self, clauses: Sequence[Clause]):
        self._clauses: List[Clause] = list(clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __repr__(self) -> str:
        return f"MemorySource(<{len(self._clauses)} clauses>)"

    def clauses(self) -> Iterator[Clause]:
        return iter(self._clauses)

    @classmethod
    def from_source(cls, source: ClauseSource) -> "MemorySource":
        """Traverse source once and keep its clauses."""
        if isinstance(source, MemorySource):
            return source
        memory = cls(source.clauses())
        logger.debug("Materialized %d clauses from %r", len(memory), source)
        return memory

    @classmethod
    def from_pysat(cls, wcnf) -> "MemorySource":
        """
        Wrap a pysat WCNF object: hard clauses first, then soft clauses with their weights.
        :param wcnf: pysat.formula.WCNF
        """
        clauses = [Clause(tuple(cl), 0, True) for cl in wcnf.hard]
        for cl, w in zip(wcnf.soft, wcnf.wght):
            if w < 0 or float(w) != int(w):
                raise MalformedInputError(f"soft clause weight must be a non-negative integer, got {w!r}")
            clauses.append(Clause(tuple(cl), int(w), False))
        return cls(clauses)


def as_source(obj, encoding: str = "utf-8") -> ClauseSource:
    """
    Coerce a path, a pysat WCNF object or an existing source into a ClauseSource.
    """
    if isinstance(obj, ClauseSource):
        return obj
    if isinstance(obj, (str, os.PathLike)):
        return FileSource(obj, encoding=encoding)
    if all(hasattr(obj, attr) for attr in ("hard", "soft", "wght")):
        return MemorySource.from_pysat(obj)
    raise TypeError(f"Cannot read clauses from {type(obj).__name__}")
