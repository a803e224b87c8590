"""
Degree features of the graphs induced by the hard clauses.

- variable-clause graph (VCG): variable degree is the number of hard clauses
  containing the variable, clause degree is the clause size;
- variable graph (VG): a variable's degree is the summed size of the hard
  clauses it occurs in;
- clause graph (CG): a hard clause's degree is the summed VCG degree of its
  variables.

The clause graph degree needs the complete VCG variable degrees, so the
source is traversed twice.
"""

import logging
from typing import List

from wcnffeat.features.distribution import distribution_names, push_distribution
from wcnffeat.features.sources import ClauseSource
from wcnffeat.utils.exceptions import SourceMismatchError

logger = logging.getLogger(__name__)

GRAPH_DEGREE_NAMES = (
    distribution_names("h_vcg_vdegree")
    + distribution_names("h_vcg_cdegree")
    + distribution_names("h_vg_degree")
    + distribution_names("h_cg_degree")
)


class GraphDegreeFeatures:
    """Extracts the 20 graph degree features in two passes over the source."""

    def __init__(self, source: ClauseSource):
        self.source = source
        self.features: List[float] = []
        self._reset()

    @staticmethod
    def names() -> List[str]:
        return list(GRAPH_DEGREE_NAMES)

    def _reset(self) -> None:
        self.n_vars = 0
        self.n_clauses = 0
        # indexed by variable id, slot 0 is kept and reported
        self.vcg_vdegree = [0]
        self.vg_degree = [0]
        self.vcg_cdegree: List[int] = []
        self.clause_degree: List[int] = []

    def first_pass(self) -> None:
        """Variable degrees and clause sizes."""
        for clause in self.source.clauses():
            self.n_clauses += 1
            # soft clauses count here, hardness does not change the clause size
            self.vcg_cdegree.append(clause.size)
            for lit in clause.literals:
                var = abs(lit)
                if var > self.n_vars:
                    grow = var - self.n_vars
                    self.vcg_vdegree.extend([0] * grow)
                    self.vg_degree.extend([0] * grow)
                    self.n_vars = var
                if clause.hard:
                    self.vcg_vdegree[var] += 1
                    self.vg_degree[var] += clause.size
        logger.debug("Graph first pass: %d clauses, %d variables", self.n_clauses, self.n_vars)

    def second_pass(self) -> None:
        """Clause graph degree of every hard clause."""
        seen = 0
        for clause in self.source.clauses():
            seen += 1
            if not clause.hard:
                continue
            degree = 0
            for lit in clause.literals:
                var = abs(lit)
                if var > self.n_vars:
                    raise SourceMismatchError(f"variable {var} not seen in the first pass")
                degree += self.vcg_vdegree[var]
            self.clause_degree.append(degree)
        if seen != self.n_clauses:
            raise SourceMismatchError(
                f"first pass read {self.n_clauses} clauses, second pass {seen}"
            )
        logger.debug("Graph second pass: %d hard clauses", len(self.clause_degree))

    def extract(self) -> List[float]:
        self._reset()
        self.first_pass()
        self.second_pass()
        self._load_feature_records()
        return self.features

    def _load_feature_records(self) -> None:
        features: List[float] = []
        push_distribution(features, self.vcg_vdegree if self.n_vars else [])
        push_distribution(features, self.vcg_cdegree)
        push_distribution(features, self.vg_degree if self.n_vars else [])
        push_distribution(features, self.clause_degree)
        self.features = features
