"""Tests for the clause/structure features"""

import math

import pytest

from wcnffeat.features.base_features import CLAUSE_STRUCTURE_NAMES, ClauseStructureFeatures
from wcnffeat.features.sources import StringSource


def features_of(text):
    extractor = ClauseStructureFeatures(StringSource(text))
    return dict(zip(extractor.names(), extractor.extract()))


def test_names():
    names = ClauseStructureFeatures.names()
    assert len(names) == 53
    assert len(set(names)) == 53
    assert names[:2] == ["h_clauses", "variables"]
    assert names[2] == "h_cls1" and names[11] == "h_cls10p"
    assert names[12:16] == ["h_horn", "h_invhorn", "h_positive", "h_negative"]
    assert names[36:38] == ["s_clauses", "s_weight_sum"]
    assert names[-1] == "s_weight_entropy"
    assert names == list(CLAUSE_STRUCTURE_NAMES)


def test_empty_instance():
    values = ClauseStructureFeatures(StringSource("c nothing here\n")).extract()
    assert len(values) == 53
    assert all(v == 0.0 for v in values)


def test_hard_unit_clause():
    f = features_of("h 1 0\n")
    assert f["h_clauses"] == 1
    assert f["variables"] == 1
    assert f["h_cls1"] == 1
    assert f["h_horn"] == 1
    assert f["h_positive"] == 1
    assert f["h_negative"] == 0
    # slot 0 of the per-variable table is part of the distribution
    assert f["h_hornvars_mean"] == pytest.approx(0.5)
    assert f["h_hornvars_min"] == 0
    assert f["h_hornvars_max"] == 1
    assert f["h_balancecls_max"] == 0


def test_negative_binary_clause():
    f = features_of("h -1 -2 0\n")
    assert f["h_invhorn"] == 1
    assert f["h_negative"] == 1
    assert f["h_horn"] == 0
    assert f["h_positive"] == 0
    assert f["h_cls2"] == 1


def test_legacy_matches_new_format():
    legacy = ClauseStructureFeatures(StringSource("p wcnf 1 1 5\n5 1 0\n")).extract()
    new = ClauseStructureFeatures(StringSource("h 1 0\n")).extract()
    assert legacy == new


def test_legacy_weight_below_top_is_soft():
    f = features_of("p wcnf 1 1 5\n4 1 0\n")
    assert f["h_clauses"] == 0
    assert f["s_clauses"] == 1
    assert f["s_weight_sum"] == 4


def test_soft_weights():
    f = features_of("2 1 0\n2 -1 2 0\n4 3 0\n")
    assert f["h_clauses"] == 0
    assert f["variables"] == 3
    assert f["s_clauses"] == 3
    assert f["s_weight_sum"] == 8
    assert f["s_cls1"] == 2
    assert f["s_cls2"] == 1
    assert f["s_weight_mean"] == pytest.approx(8 / 3)
    assert f["s_weight_min"] == 2
    assert f["s_weight_max"] == 4
    # hard-only statistics over variables seen in soft clauses stay zero
    assert f["h_hornvars_mean"] == 0
    assert f["h_hornvars_entropy"] == 0


def test_long_clauses_share_last_bucket():
    lits = " ".join(str(i) for i in range(1, 16))
    f = features_of(f"h {lits} 0\n1 {lits} 0\nh 1 2 3 4 5 6 7 8 9 10 0\nh 1 2 3 4 5 6 7 8 9 0\n")
    assert f["h_cls10p"] == 2
    assert f["h_cls9"] == 1
    assert f["s_cls10p"] == 1
    assert f["variables"] == 15


def test_empty_clause_counts_but_has_no_bucket():
    f = features_of("h 0\n")
    assert f["h_clauses"] == 1
    assert all(f[f"h_cls{i}"] == 0 for i in range(1, 10))
    assert f["h_cls10p"] == 0
    assert f["h_horn"] == 1 and f["h_invhorn"] == 1
    assert f["h_balancecls_mean"] == 0


def test_mixed_clause_balance_and_horn():
    f = features_of("h 1 2 -3 0\n")
    assert f["h_horn"] == 1
    assert f["h_invhorn"] == 0
    assert f["h_balancecls_mean"] == pytest.approx(0.5)
    assert f["h_hornvars_mean"] == pytest.approx(0.75)
    assert f["h_hornvars_entropy"] == pytest.approx(math.log(3))
    assert f["h_invhornvars_max"] == 0


def test_variable_balance():
    f = features_of("h 1 2 0\nh -1 0\n")
    assert f["h_balancevars_mean"] == pytest.approx(0.5)
    assert f["h_balancevars_variance"] == pytest.approx(0.25)
    assert f["h_balancevars_min"] == 0
    assert f["h_balancevars_max"] == 1


def test_variable_without_hard_occurrence_skipped_in_balance():
    f = features_of("h 1 -1 0\n3 2 0\n")
    assert f["variables"] == 2
    assert f["h_balancevars_mean"] == 1
    assert f["h_balancecls_mean"] == 1


def test_extract_is_repeatable():
    extractor = ClauseStructureFeatures(StringSource("h 1 -2 0\n3 2 3 0\nh -3 0\n"))
    first = extractor.extract()
    assert extractor.extract() == first
