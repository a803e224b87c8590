"""Tests for the distribution summarizer"""

import math

import pytest

from wcnffeat.features.distribution import distribution_names, push_distribution, summarize


def test_empty_sequence_is_all_zero():
    assert summarize([]) == [0.0, 0.0, 0.0, 0.0, 0.0]


def test_all_zero_values():
    assert summarize([0, 0, 0]) == [0.0, 0.0, 0.0, 0.0, 0.0]


def test_weights():
    mean, variance, lo, hi, entropy = summarize([2, 2, 4])
    assert mean == pytest.approx(8 / 3)
    assert variance == pytest.approx(8 / 9)
    assert lo == 2.0
    assert hi == 4.0
    # p = (1/4, 1/4, 1/2)
    assert entropy == pytest.approx(1.5 * math.log(2))


def test_single_value_has_no_spread():
    assert summarize([5]) == [5.0, 0.0, 5.0, 5.0, 0.0]


def test_uniform_entropy_is_log_n():
    assert summarize([3, 3, 3, 3])[4] == pytest.approx(math.log(4))


def test_zero_terms_do_not_contribute_to_entropy():
    assert summarize([0, 1, 0, 1])[4] == pytest.approx(math.log(2))


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        summarize([1, -1])


def test_push_appends_five_values():
    out = [1.0]
    push_distribution(out, [1, 3])
    assert out == [1.0, 2.0, 1.0, 1.0, 3.0, pytest.approx(-(0.25 * math.log(0.25) + 0.75 * math.log(0.75)))]


def test_names():
    assert distribution_names("s_weight") == [
        "s_weight_mean",
        "s_weight_variance",
        "s_weight_min",
        "s_weight_max",
        "s_weight_entropy",
    ]
