"""
Graphviz DOT diagram generator for respondent graphs.

Converts a DiffGraph into Graphviz DOT format for visualization.

Supports two modes:
    - SIMPLE: Nodes and weighted edges, Graphviz chooses the layout
    - PINNED: Nodes pinned to their circular layout positions (render with
      `neato -n`)
"""

from enum import Enum
from typing import List

from diffgraph.model import DiffGraph, GraphNode


NODE_COLOR = "red"
EDGE_COLOR = "green"
POINTS_PER_INCH = 72


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"   # Graphviz layout
    PINNED = "pinned"   # Circular layout positions


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Backslashes first, then quotes
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _escape_dot_id(identifier: str) -> str:
    """Escape/quote an identifier for DOT."""
    if identifier[0].isdigit() or not identifier.replace('_', '').isalnum():
        return f'"{identifier}"'
    return identifier


def _node_attributes(node: GraphNode, mode: DotMode) -> str:
    attrs = [f"label={_escape_dot_string(node.label)}"]
    if mode == DotMode.PINNED:
        # DOT's y axis points up, canvas y points down
        attrs.append(f'pos="{node.x:.2f},{-node.y:.2f}!"')
    return ", ".join(attrs)


def generate_dot(graph: DiffGraph, mode: DotMode = DotMode.SIMPLE, node_radius: float = 20) -> str:
    """
    Generate Graphviz DOT format for a respondent graph.

    Args:
        graph: DiffGraph to visualize
        mode: Visualization mode (SIMPLE, PINNED)
        node_radius: Node circle radius in points

    Returns:
        String containing an undirected DOT graph definition
    """
    lines: List[str] = []
    diameter = 2 * node_radius / POINTS_PER_INCH

    # Header
    lines.append("graph responses {")
    lines.append(f'  label="Question {graph.question_index + 1}";')
    if mode == DotMode.PINNED:
        lines.append("  layout=neato;")
    lines.append(
        f"  node [shape=circle, style=filled, fillcolor={NODE_COLOR}, "
        f"fixedsize=true, width={diameter:.3f}];"
    )
    lines.append(f"  edge [color={EDGE_COLOR}];")

    # =========================================================================
    # NODES
    # =========================================================================

    for node in graph.nodes:
        node_id = _escape_dot_id(node.node_id)
        lines.append(f"  {node_id} [{_node_attributes(node, mode)}];")

    # =========================================================================
    # EDGES
    # =========================================================================

    ids = {node.index: _escape_dot_id(node.node_id) for node in graph.nodes}
    for edge in graph.edges:
        label = _escape_dot_string(edge.label)
        lines.append(f"  {ids[edge.source]} -- {ids[edge.target]} [label={label}];")

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(
    graph: DiffGraph,
    filename: str,
    mode: DotMode = DotMode.SIMPLE,
    node_radius: float = 20,
) -> None:
    """
    Generate DOT and save to file.

    Args:
        graph: Graph to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
        node_radius: Node circle radius in points
    """
    dot = generate_dot(graph, mode=mode, node_radius=node_radius)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
