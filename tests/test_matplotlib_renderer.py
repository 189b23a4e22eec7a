"""Tests for the matplotlib renderer (headless)."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from diffgraph.backends.matplotlib_renderer import render_graph  # noqa: E402
from diffgraph.model import DiffGraph, GraphEdge, GraphNode  # noqa: E402


@pytest.fixture
def graph():
    return DiffGraph(
        question_index=0,
        nodes=(
            GraphNode(index=0, label="R1 (5)", x=900.0, y=350.0, value=5),
            GraphNode(index=1, label="R2 (8)", x=600.0, y=650.0, value=8),
            GraphNode(index=2, label="R3 (5)", x=300.0, y=350.0, value=5),
        ),
        edges=(
            GraphEdge(source=0, target=1, weight=3),
            GraphEdge(source=1, target=2, weight=3),
        ),
    )


class TestRenderGraph:
    """Test the drawn artists and canvas setup."""

    def test_one_circle_per_node(self, graph):
        fig = render_graph(graph)
        ax = fig.axes[0]
        assert len(ax.patches) == 3
        assert [p.center for p in ax.patches] == [(900.0, 350.0), (600.0, 650.0), (300.0, 350.0)]

    def test_one_line_per_edge(self, graph):
        ax = render_graph(graph).axes[0]
        assert len(ax.lines) == 2

    def test_labels(self, graph):
        ax = render_graph(graph).axes[0]
        texts = [t.get_text() for t in ax.texts]
        assert texts.count("3") == 2
        assert {"R1 (5)", "R2 (8)", "R3 (5)"} <= set(texts)

    def test_canvas_size_in_pixels(self, graph):
        fig = render_graph(graph, width=800, height=400)
        width, height = fig.get_size_inches() * fig.dpi
        assert (width, height) == pytest.approx((800, 400))

    def test_screen_coordinates(self, graph):
        """y grows downwards, like a window canvas."""
        ax = render_graph(graph, width=1200, height=700).axes[0]
        assert ax.get_ylim() == (700, 0)
        assert ax.get_xlim() == (0, 1200)

    def test_node_radius(self, graph):
        ax = render_graph(graph, node_radius=12).axes[0]
        assert all(p.get_radius() == 12 for p in ax.patches)

    def test_save_png(self, graph, tmp_path):
        path = tmp_path / "graph.png"
        render_graph(graph, output_path=path)
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_empty_graph(self, tmp_path):
        fig = render_graph(DiffGraph(question_index=0), output_path=tmp_path / "empty.png")
        assert len(fig.axes[0].patches) == 0
