"""
Graph Emission: DifferenceMatrix + layout -> DiffGraph.

Produces the renderer-neutral graph:
    - one node per respondent, at its layout point
    - one undirected edge per pair i < j with a non-zero difference

Also provides the adjacency-list view of a graph (node id -> [Edge]).
"""

from typing import Dict, List, Sequence

from diffgraph.model import (
    DiffGraph,
    DifferenceMatrix,
    Edge,
    GraphEdge,
    GraphNode,
    LayoutPoint,
    ResponseSet,
)


def node_label(index: int, row: Sequence) -> str:
    """Display label of a respondent: "R<n> (<first answer>)"."""
    if row and row[0] is not None:
        return f"R{index + 1} ({row[0]})"
    return f"R{index + 1}"


def build_graph(
    matrix: DifferenceMatrix,
    responses: ResponseSet,
    points: Sequence[LayoutPoint],
) -> DiffGraph:
    """
    Build the weighted respondent graph for one question.

    Args:
        matrix: Difference matrix of the question being drawn
        responses: Rows the matrix was built from (used for node labels)
        points: Layout point of every respondent

    Returns:
        DiffGraph with nodes in respondent order and edges for every
        unordered pair with a difference > 0

    Raises:
        ValueError: If matrix, responses and points disagree on size
    """
    n = len(matrix)
    if len(responses) != n or len(points) != n:
        raise ValueError(
            f"Size mismatch: matrix={n}, responses={len(responses)}, points={len(points)}"
        )

    nodes = []
    for i, point in enumerate(points):
        row = responses[i]
        nodes.append(GraphNode(
            index=i,
            label=node_label(i, row),
            x=point.x,
            y=point.y,
            value=row[0] if row else None,
        ))

    edges = []
    for i in range(n):
        for j in range(i + 1, n):
            weight = matrix[i][j]
            # Zero difference means identical answers (or a missing one)
            if weight > 0:
                edges.append(GraphEdge(source=i, target=j, weight=weight))

    return DiffGraph(
        question_index=matrix.question_index,
        nodes=tuple(nodes),
        edges=tuple(edges),
    )


def build_adjacency(graph: DiffGraph) -> Dict[str, List[Edge]]:
    """
    Adjacency lists of a graph, keyed by node id ("R1", "R2", ...).

    Each undirected edge is recorded on both endpoints. Every node has an
    entry, possibly empty.
    """
    ids = {node.index: node.node_id for node in graph.nodes}
    adjacency: Dict[str, List[Edge]] = {node_id: [] for node_id in ids.values()}

    for edge in graph.edges:
        source_id = ids[edge.source]
        target_id = ids[edge.target]
        adjacency[source_id].append(Edge(target=target_id, weight=edge.weight))
        adjacency[target_id].append(Edge(target=source_id, weight=edge.weight))

    return adjacency


__all__ = ["build_graph", "build_adjacency", "node_label"]
