"""
Clause and structure features of a WCNF instance.

A single pass over the clauses counts hard and soft clauses, clause sizes,
Horn and inverse Horn clauses, literal balance and soft clause weights.
"""

import logging
from typing import List

from wcnffeat.features.distribution import distribution_names, push_distribution
from wcnffeat.features.parse_wcnf import Clause
from wcnffeat.features.sources import ClauseSource

logger = logging.getLogger(__name__)

# clause sizes at or above this share the last bucket
SIZE_BUCKETS = 10


def size_bucket_names(prefix: str) -> List[str]:
    return [f"{prefix}_cls{i}" for i in range(1, SIZE_BUCKETS)] + [f"{prefix}_cls{SIZE_BUCKETS}p"]


CLAUSE_STRUCTURE_NAMES = (
    ["h_clauses", "variables"]
    + size_bucket_names("h")
    + ["h_horn", "h_invhorn", "h_positive", "h_negative"]
    + distribution_names("h_hornvars")
    + distribution_names("h_invhornvars")
    + distribution_names("h_balancecls")
    + distribution_names("h_balancevars")
    + ["s_clauses", "s_weight_sum"]
    + size_bucket_names("s")
    + distribution_names("s_weight")
)


def _bucket(size: int) -> int:
    return min(size, SIZE_BUCKETS)


class ClauseStructureFeatures:
    """
    Extracts the 53 clause/structure features.

    Each call to extract() reads the source once and starts from fresh
    counters; nothing is shared between instances.
    """

    def __init__(self, source: ClauseSource):
        self.source = source
        self.features: List[float] = []
        self._reset()

    @staticmethod
    def names() -> List[str]:
        return list(CLAUSE_STRUCTURE_NAMES)

    def _reset(self) -> None:
        self.n_vars = 0
        self.n_hard_clauses = 0
        self.n_soft_clauses = 0
        self.hard_clause_sizes = [0] * (SIZE_BUCKETS + 1)
        self.soft_clause_sizes = [0] * (SIZE_BUCKETS + 1)
        self.horn = 0
        self.inv_horn = 0
        self.positive = 0
        self.negative = 0
        self.weight_sum = 0
        # indexed by variable id, slot 0 is kept and reported
        self.variable_horn = [0]
        self.variable_inv_horn = [0]
        # slot 2v counts positive, 2v + 1 negative occurrences of v
        self.literal_occurrences = [0, 0]
        self.balance_clause: List[float] = []
        self.balance_variable: List[float] = []
        self.weights: List[int] = []

    def _grow(self, var: int) -> None:
        grow = var - self.n_vars
        self.variable_horn.extend([0] * grow)
        self.variable_inv_horn.extend([0] * grow)
        self.literal_occurrences.extend([0] * (2 * grow))
        self.n_vars = var

    def _record_hard(self, clause: Clause) -> None:
        self.n_hard_clauses += 1
        self.hard_clause_sizes[_bucket(clause.size)] += 1

        n_neg = 0
        for lit in clause.literals:
            if lit < 0:
                n_neg += 1
                self.literal_occurrences[2 * -lit + 1] += 1
            else:
                self.literal_occurrences[2 * lit] += 1
        n_pos = clause.size - n_neg

        if n_neg <= 1:
            if n_neg == 0:
                self.positive += 1
            self.horn += 1
            for lit in clause.literals:
                self.variable_horn[abs(lit)] += 1
        if n_pos <= 1:
            if n_pos == 0:
                self.negative += 1
            self.inv_horn += 1
            for lit in clause.literals:
                self.variable_inv_horn[abs(lit)] += 1

        if clause.size > 0:
            self.balance_clause.append(min(n_pos, n_neg) / max(n_pos, n_neg))

    def _record_soft(self, clause: Clause) -> None:
        self.n_soft_clauses += 1
        self.soft_clause_sizes[_bucket(clause.size)] += 1
        self.weight_sum += clause.weight
        self.weights.append(clause.weight)

    def extract(self) -> List[float]:
        self._reset()
        for clause in self.source.clauses():
            for lit in clause.literals:
                if abs(lit) > self.n_vars:
                    self._grow(abs(lit))
            if clause.hard:
                self._record_hard(clause)
            else:
                self._record_soft(clause)

        # balance of positive and negative literals per variable
        for v in range(1, self.n_vars + 1):
            pos = self.literal_occurrences[2 * v]
            neg = self.literal_occurrences[2 * v + 1]
            if max(pos, neg) > 0:
                self.balance_variable.append(min(pos, neg) / max(pos, neg))

        logger.debug(
            "%d hard and %d soft clauses over %d variables",
            self.n_hard_clauses, self.n_soft_clauses, self.n_vars,
        )
        self._load_feature_record()
        return self.features

    def _load_feature_record(self) -> None:
        features: List[float] = [float(self.n_hard_clauses), float(self.n_vars)]
        features.extend(float(n) for n in self.hard_clause_sizes[1:])
        features.extend(float(n) for n in (self.horn, self.inv_horn, self.positive, self.negative))
        push_distribution(features, self.variable_horn if self.n_vars else [])
        push_distribution(features, self.variable_inv_horn if self.n_vars else [])
        push_distribution(features, self.balance_clause)
        push_distribution(features, self.balance_variable)
        features.extend([float(self.n_soft_clauses), float(self.weight_sum)])
        features.extend(float(n) for n in self.soft_clause_sizes[1:])
        push_distribution(features, self.weights)
        self.features = features
