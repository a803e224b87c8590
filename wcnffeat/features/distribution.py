"""
Summary statistics over a distribution of non-negative observations.

Every feature group reports a distribution through the same five values,
in this order: mean, variance, min, max, entropy.
"""

from typing import List, Sequence

import numpy as np

DISTRIBUTION_SUFFIXES = ("mean", "variance", "min", "max", "entropy")


def distribution_names(prefix: str) -> List[str]:
    """
    Names of the five statistics for a feature group.
    :param prefix: Feature group prefix, e.g. "h_hornvars"
    :return: ["<prefix>_mean", ..., "<prefix>_entropy"]
    """
    return [f"{prefix}_{suffix}" for suffix in DISTRIBUTION_SUFFIXES]


def summarize(values: Sequence[float]) -> List[float]:
    """
    Mean, population variance, min, max and entropy of the values.

    The entropy treats the values as an unnormalized probability mass:
    p_i = x_i / sum(x), entropy = -sum(p_i * ln(p_i)) over p_i > 0.
    An empty sequence yields five zeros; a zero sum yields zero entropy.
    :param values: Non-negative observations
    :return: List of five floats
    """
    x = np.asarray(values, dtype=np.float64)
    if x.size == 0:
        return [0.0] * 5
    if np.any(x < 0):
        raise ValueError("distribution values must be non-negative")

    mean = float(np.mean(x))
    variance = float(np.var(x))
    total = float(np.sum(x))
    entropy = 0.0
    if total > 0:
        p = x[x > 0] / total
        entropy = max(0.0, float(-np.sum(p * np.log(p))))
    return [mean, variance, float(np.min(x)), float(np.max(x)), entropy]


def push_distribution(features: List[float], values: Sequence[float]) -> None:
    """Append the five statistics of values to features."""
    features.extend(summarize(values))
