"""Feature extraction for weighted CNF (MaxSAT) instances."""

from .base_features import ClauseStructureFeatures
from .graph_features import GraphDegreeFeatures
from .parse_wcnf import Clause, ClauseReader
from .sources import ClauseSource, FileSource, MemorySource, StringSource, as_source
from .wcnf_instance import (
    WCNFInstance,
    base_feature_names,
    extract_base_features,
    extract_features,
)

__all__ = [
    "Clause",
    "ClauseReader",
    "ClauseSource",
    "ClauseStructureFeatures",
    "FileSource",
    "GraphDegreeFeatures",
    "MemorySource",
    "StringSource",
    "WCNFInstance",
    "as_source",
    "base_feature_names",
    "extract_base_features",
    "extract_features",
]
