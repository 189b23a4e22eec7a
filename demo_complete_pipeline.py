#!/usr/bin/env python3
"""
Complete Pipeline Demo: CSV → ResponseSet → Matrices → Graph → Diagrams

Shows the full workflow:
1. Load the survey CSV
2. Build one difference matrix per question
3. Lay respondents out on a circle and build the graph
4. Write Graphviz DOT (both modes) and a PNG
"""

from pathlib import Path

from diffgraph.backends import DotMode, generate_dot, render_graph, save_dot_file
from diffgraph.config import load_config
from diffgraph.csv_loader import load_responses
from diffgraph.graph import build_adjacency, build_graph
from diffgraph.layout import circular_layout
from diffgraph.matrix import build_all_matrices


def main():
    config = load_config(Path(__file__).parent / "diffgraph.yaml")

    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: CSV → Matrices → Graph → Diagrams")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Load CSV
    # =========================================================================
    print("\n1. LOADING CSV...")
    responses = load_responses(config.input_path, missing=config.missing)
    if responses.is_empty:
        print("   ✗ No data, aborting")
        return
    print(f"   ✓ Respondents: {len(responses)}")
    print(f"   ✓ Questions: {responses.question_count}")

    # =========================================================================
    # STEP 2: Matrices
    # =========================================================================
    print("\n2. BUILDING DIFFERENCE MATRICES...")
    matrices = build_all_matrices(responses)
    for matrix in matrices:
        largest = max(max(row) for row in matrix.values)
        print(f"   ✓ Q{matrix.question_index + 1}: {matrix.size}x{matrix.size}, max difference {largest}")

    # =========================================================================
    # STEP 3: Graph
    # =========================================================================
    print(f"\n3. BUILDING GRAPH FOR Q{config.question_index + 1}...")
    points = circular_layout(len(responses), config.center, config.layout_radius)
    graph = build_graph(matrices[config.question_index], responses, points)
    print(f"   ✓ Nodes: {len(graph.nodes)}")
    print(f"   ✓ Edges: {len(graph.edges)}")
    for node_id, edges in build_adjacency(graph).items():
        neighbours = ", ".join(f"{e.target}:{e.weight}" for e in edges)
        print(f"      {node_id} -> {neighbours or '(none)'}")

    # =========================================================================
    # STEP 4: Diagrams
    # =========================================================================
    print("\n4. GENERATING DIAGRAMS...")
    for mode in [DotMode.SIMPLE, DotMode.PINNED]:
        filename = f"responses_{mode.value}.dot"
        save_dot_file(graph, filename, mode=mode, node_radius=config.node_radius)
        print(f"   ✓ Saved {filename}")

    render_graph(
        graph,
        width=config.canvas_width,
        height=config.canvas_height,
        node_radius=config.node_radius,
        title=config.title,
        output_path="responses.png",
    )
    print("   ✓ Saved responses.png")

    print("\n5. SAMPLE SIMPLE MODE OUTPUT:")
    print("-" * 80)
    lines = generate_dot(graph, mode=DotMode.SIMPLE).split('\n')
    for line in lines[:15]:
        print(f"   {line}")
    if len(lines) > 15:
        print(f"   ... ({len(lines) - 15} more lines)")

    print("\n" + "=" * 80)
    print("To visualize the diagrams:")
    print("  dot -Tpng responses_simple.dot -o responses_simple.png")
    print("  neato -n -Tpng responses_pinned.dot -o responses_pinned.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
