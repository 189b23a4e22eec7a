"""
Survey Difference Graph (diffgraph) Package

Turns a CSV of numeric survey responses into a weighted respondent graph.

PIPELINE:
---------
    CSV file -> ResponseSet -> DifferenceMatrix (one per question)
             -> circular LayoutPoints -> DiffGraph -> backend (DOT, matplotlib)

The core modules (csv_loader, matrix, layout, graph) are pure functions over
in-memory data and contain ZERO knowledge of rendering.

All drawing happens in `diffgraph.backends`.
"""

__version__ = "0.1.0"


class DiffGraphError(Exception):
    """Base class for errors raised by diffgraph."""
    pass


class ConfigError(DiffGraphError):
    """Raised when a visualizer configuration is invalid or cannot be read."""
    pass
