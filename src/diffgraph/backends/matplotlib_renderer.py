"""
Matplotlib renderer for respondent graphs.

Draws a DiffGraph on a fixed-size canvas using screen coordinates (origin top
left, y growing downwards), so node positions from the circular layout are
used as-is.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from diffgraph.model import DiffGraph


logger = logging.getLogger(__name__)

DPI = 100

NODE_COLOR = "red"
EDGE_COLOR = "green"
NODE_LABEL_BG = "#46b1c9"
EDGE_LABEL_BG = "black"
LABEL_OFFSET = 30


def render_graph(
    graph: DiffGraph,
    width: int = 1200,
    height: int = 700,
    node_radius: float = 20,
    title: str = "Survey Difference Graph",
    output_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Figure:
    """
    Draw a respondent graph.

    Args:
        graph: Graph to draw
        width, height: Canvas size in pixels
        node_radius: Node circle radius in pixels
        title: Window title
        output_path: Save the figure here if given (format from extension)
        show: Open a window and block until it is closed

    Returns:
        The matplotlib Figure (closed unless shown)
    """
    fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(title)

    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.axis('off')

    nodes = {node.index: node for node in graph.nodes}

    # Edges under everything else
    for edge in graph.edges:
        source = nodes[edge.source]
        target = nodes[edge.target]
        ax.plot([source.x, target.x], [source.y, target.y], color=EDGE_COLOR, linewidth=1, zorder=1)

        mid_x = (source.x + target.x) / 2
        mid_y = (source.y + target.y) / 2
        ax.text(
            mid_x, mid_y, edge.label,
            fontsize=12, color='white', fontweight='bold',
            ha='center', va='center', zorder=2,
            bbox=dict(facecolor=EDGE_LABEL_BG, edgecolor='none', boxstyle='round,pad=0.3'),
        )

    for node in graph.nodes:
        ax.add_patch(Circle((node.x, node.y), node_radius, color=NODE_COLOR, zorder=3))
        ax.text(
            node.x, node.y - LABEL_OFFSET, node.label,
            fontsize=10, color='white', fontweight='bold',
            ha='center', va='center', zorder=4,
            bbox=dict(facecolor=NODE_LABEL_BG, edgecolor='none', boxstyle='round,pad=0.4'),
        )

    if output_path is not None:
        fig.savefig(output_path, dpi=DPI)
        logger.info("Saved graph image to %s", output_path)

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig


__all__ = ["render_graph"]
