#!/usr/bin/env python3
"""
Simple Workflow Layout Example
Lays out a small review workflow in both orientations and prints the geometry.
"""

import json
import logging

import networkx as nx

from workflow_layout import Layout, Workflow


def build_review_graph() -> nx.DiGraph:
    """Create a review workflow as a NetworkX graph."""
    graph = nx.DiGraph()
    graph.add_node("draft", label="Draft")
    graph.add_node("review", label="In review", width=160)
    graph.add_node("published", label="Published")
    graph.add_edge("draft", "review", label="submit")
    graph.add_edge("review", "draft", label="request changes")
    graph.add_edge("review", "published", label="approve")
    graph.add_edge("draft", "published")
    return graph


def main():
    logging.basicConfig(level=logging.DEBUG)

    graph = build_review_graph()
    workflow = Workflow.from_networkx_graph(graph)

    for orientation in ("horizontal", "vertical"):
        print(f"\n{orientation.upper()}")
        print("=" * 50)
        layout = Layout.from_workflow(workflow, orientation)
        print(json.dumps(layout.to_dict(), indent=2))

    layout = Layout.from_workflow(workflow)
    layout.snapshot.apply_to_networkx_graph(graph)
    print("\nNode positions written back to graph:")
    for node_id, pos in graph.nodes(data="pos"):
        print(f"   {node_id}: {pos}")


if __name__ == "__main__":
    main()
