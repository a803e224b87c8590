"""
Yet another parser, this time for weighted CNF.

Reads both WCNF dialects:

- legacy: ``p wcnf <vars> <clauses> <top>`` followed by ``<weight> <lit> ... 0``
  clauses, where a clause is hard iff its weight is at least ``top``;
- new: no top, hard clauses are written ``h <lit> ... 0`` and soft clauses
  ``<weight> <lit> ... 0``.

The dialect is decided once, from the header, before the first clause is
parsed. Clauses may span several lines.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from wcnffeat.features.enums import ClauseKind, WCNFFormat
from wcnffeat.utils.exceptions import InvariantViolationError, MalformedInputError

logger = logging.getLogger(__name__)

_LITERAL = re.compile(r"^-?\d+$", re.ASCII)
_UNSIGNED = re.compile(r"^\d+$", re.ASCII)

HARD_MARKER = "h"


@dataclass(frozen=True)
class Clause:
    """A clause as read from the input; transient, never retained by extractors."""

    literals: Tuple[int, ...]
    weight: int = 0
    hard: bool = True

    @property
    def size(self) -> int:
        return len(self.literals)

    @property
    def kind(self) -> ClauseKind:
        return ClauseKind.HARD if self.hard else ClauseKind.SOFT


def _read_unsigned(token: str, what: str, line: int) -> int:
    if not _UNSIGNED.match(token):
        raise MalformedInputError(f"expected {what}, got {token!r}", line)
    return int(token)


def _read_literal(token: str, line: int) -> int:
    if not _LITERAL.match(token):
        raise MalformedInputError(f"expected literal, got {token!r}", line)
    return int(token)


class ClauseReader:
    """
    Iterates the clauses of a WCNF text given as an iterable of lines.

    After iteration has started, ``top`` holds the header's top value
    (0 when absent) and ``format`` the dialect in use.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = lines
        self.top = 0
        self.format: Optional[WCNFFormat] = None
        self._header_seen = False
        self._start_clause: Optional[Callable[[str, int], Tuple[int, bool]]] = None

    def _parse_header(self, tokens: List[str], line: int) -> None:
        if self._header_seen:
            raise MalformedInputError("duplicate header", line)
        if self.format is not None:
            raise MalformedInputError("header after the first clause", line)
        if len(tokens) not in (4, 5) or tokens[0] != "p" or tokens[1] != "wcnf":
            raise MalformedInputError(f"bad header {' '.join(tokens)!r}", line)
        _read_unsigned(tokens[2], "number of variables", line)
        _read_unsigned(tokens[3], "number of clauses", line)
        if len(tokens) == 5:
            self.top = _read_unsigned(tokens[4], "top", line)
        self._header_seen = True

    def _select_format(self) -> None:
        if self.top > 0:
            self.format = WCNFFormat.LEGACY
            self._start_clause = self._start_legacy_clause
        else:
            self.format = WCNFFormat.NEW
            self._start_clause = self._start_new_clause
        logger.debug("WCNF dialect: %s (top=%d)", self.format.name, self.top)

    def _start_legacy_clause(self, token: str, line: int) -> Tuple[int, bool]:
        if token == HARD_MARKER:
            raise InvariantViolationError(
                f"line {line}: hard marker 'h' in a file with top={self.top}"
            )
        weight = _read_unsigned(token, "clause weight", line)
        if weight >= self.top:
            return 0, True
        return weight, False

    def _start_new_clause(self, token: str, line: int) -> Tuple[int, bool]:
        if token == HARD_MARKER:
            return 0, True
        return _read_unsigned(token, "clause weight or 'h'", line), False

    def __iter__(self) -> Iterator[Clause]:
        literals: Optional[List[int]] = None
        weight = 0
        hard = True
        lineno = 0
        for lineno, line in enumerate(self._lines, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            if literals is None:
                if stripped[0] == "c":
                    continue
                if stripped[0] == "p":
                    self._parse_header(stripped.split(), lineno)
                    continue
            for token in stripped.split():
                if literals is None:
                    if self._start_clause is None:
                        self._select_format()
                    weight, hard = self._start_clause(token, lineno)
                    literals = []
                    continue
                lit = _read_literal(token, lineno)
                if lit == 0:
                    yield Clause(tuple(literals), weight, hard)
                    literals = None
                else:
                    literals.append(lit)
        if literals is not None:
            raise MalformedInputError("missing terminating 0 at end of input", lineno)
        if self.format is None:
            self._select_format()


def parse_wcnf_string(wcnf_str: str) -> Tuple[List[Clause], int]:
    """
    Parse WCNF from a string.
    :param wcnf_str: WCNF file content as string
    :return: clauses and the header's top (0 for the new format)
    """
    reader = ClauseReader(wcnf_str.splitlines())
    clauses = list(reader)
    return clauses, reader.top
