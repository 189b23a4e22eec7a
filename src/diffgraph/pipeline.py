"""
Startup pipeline: config -> ResponseSet -> matrices -> layout -> DiffGraph.

Runs once, linearly. An empty ResponseSet aborts the run before anything is
drawn.
"""

import logging
from typing import Optional

from diffgraph import ConfigError
from diffgraph.config import VisualizerConfig
from diffgraph.csv_loader import load_responses
from diffgraph.graph import build_graph
from diffgraph.layout import circular_layout
from diffgraph.matrix import build_all_matrices
from diffgraph.model import DiffGraph


logger = logging.getLogger(__name__)


def build_visualization(config: VisualizerConfig) -> Optional[DiffGraph]:
    """
    Build the graph described by a configuration.

    Args:
        config: Run configuration

    Returns:
        DiffGraph for config.question_index, or None if the input has no data

    Raises:
        ConfigError: If the configuration is invalid or the question index is
            past the last question
    """
    config.validate()

    responses = load_responses(config.input_path, missing=config.missing)
    if responses.is_empty:
        logger.error("No data loaded from %s, nothing to visualize", config.input_path)
        return None

    logger.info(
        "Loaded %d respondent(s), %d question(s) from %s",
        len(responses), responses.question_count, config.input_path,
    )

    matrices = build_all_matrices(responses)
    if config.question_index >= len(matrices):
        raise ConfigError(
            f"question_index {config.question_index} out of range: "
            f"data has {len(matrices)} question(s)"
        )
    matrix = matrices[config.question_index]

    points = circular_layout(len(responses), config.center, config.layout_radius)
    graph = build_graph(matrix, responses, points)

    logger.info(
        "Question %d: %d node(s), %d edge(s)",
        graph.question_index, len(graph.nodes), len(graph.edges),
    )
    return graph
