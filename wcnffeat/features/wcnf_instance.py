"""The interface"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from wcnffeat.features.base_features import ClauseStructureFeatures
from wcnffeat.features.graph_features import GraphDegreeFeatures
from wcnffeat.features.sources import ClauseSource, MemorySource, as_source
from wcnffeat.features.stopwatch import Stopwatch
from wcnffeat.global_params import ExtractionConfig

logger = logging.getLogger(__name__)

RUNTIME_FEATURE = "base_features_runtime"


def write_features_to_json(results_dict, path="features.json"):
    """
    Write features dictionary to JSON file.
    :param results_dict: Dictionary of features to write
    :param path: Output file
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results_dict, f, indent=2)


class WCNFInstance:
    """
    Class to hold the feature extraction of one WCNF instance. The clause/structure
    features and the graph degree features are computed by independent extractors and
    concatenated, clause/structure features first, into one vector of 73 values.
    """

    def __init__(self, input_wcnf, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()
        # path to a wcnf file, a pysat WCNF object or a ClauseSource
        self.source: ClauseSource = as_source(input_wcnf, encoding=self.config.encoding)
        self.features: List[float] = []
        self.features_dict: Dict[str, float] = {}

    @staticmethod
    def names() -> List[str]:
        return ClauseStructureFeatures.names() + GraphDegreeFeatures.names()

    def extract(self) -> List[float]:
        """
        Extract all features. Either the full vector is produced or an exception propagates.
        """
        source = self.source
        if self.config.replay == "memory":
            source = MemorySource.from_source(source)

        structure = ClauseStructureFeatures(source)
        graph = GraphDegreeFeatures(source)
        if self.config.parallel:
            with ThreadPoolExecutor(max_workers=2) as pool:
                structure_future = pool.submit(structure.extract)
                graph_future = pool.submit(graph.extract)
                features = structure_future.result() + graph_future.result()
        else:
            features = structure.extract() + graph.extract()

        self.features = features
        self.features_dict = dict(zip(self.names(), features))
        return list(features)

    def display_results(self):
        """
        Display all computed features.
        """
        for name, value in self.features_dict.items():
            print(name, value)

    def write_results(self, path="features.json"):
        """
        Write computed features to JSON file.
        """
        write_features_to_json(self.features_dict, path)


def base_feature_names() -> List[str]:
    return WCNFInstance.names()


def extract_features(input_wcnf, config: Optional[ExtractionConfig] = None) -> List[float]:
    return WCNFInstance(input_wcnf, config).extract()


def extract_base_features(input_wcnf, config: Optional[ExtractionConfig] = None) -> Dict[str, float]:
    """
    Extract the feature record of an instance, keyed by feature name, together
    with the CPU time the extraction took under "base_features_runtime".
    """
    instance = WCNFInstance(input_wcnf, config)
    with Stopwatch() as watch:
        instance.extract()
        runtime = watch.stop()
    logger.info("Extracted %d features from %r in %.2f seconds",
                len(instance.features), instance.source, runtime)
    record = {RUNTIME_FEATURE: runtime}
    record.update(instance.features_dict)
    return record
