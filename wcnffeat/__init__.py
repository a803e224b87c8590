"""wcnffeat: feature vectors for weighted CNF (MaxSAT) instances."""

from .features import WCNFInstance, base_feature_names, extract_base_features, extract_features
from .global_params import ExtractionConfig, FEATURE_VERSION

__version__ = "0.1.0"

__all__ = [
    "ExtractionConfig",
    "FEATURE_VERSION",
    "WCNFInstance",
    "base_feature_names",
    "extract_base_features",
    "extract_features",
]
