"""
generate_graph.py

Writes the METIS input files read by benchmarks/profile_parser.py: one
connected small-world graph, saved once without weights and once with
integer edge weights (format ``001``).

Usage:
    python generate_graph.py
"""

import os
import time

import networkx as nx
import numpy as np

from metisgraph.writer import save_graph_to_metis

OUTPUT_DIR = os.path.join("data", "sample")
UNWEIGHTED_FILE = "synthetic_large_graph_100k.graph"
WEIGHTED_FILE = "synthetic_large_graph_100k_weighted.graph"


def generate_benchmark_graph(num_nodes=100000, num_neighbors=6, rewire_prob=0.1,
                             max_weight=10, seed=42):
    """
    Builds a connected Watts-Strogatz graph whose edges carry an integer
    ``weight`` in ``[1, max_weight]``.
    """
    G = nx.connected_watts_strogatz_graph(num_nodes, num_neighbors, rewire_prob, seed=seed)
    rng = np.random.default_rng(seed)
    weights = rng.integers(1, max_weight, size=G.number_of_edges(), endpoint=True)
    nx.set_edge_attributes(
        G, {edge: int(w) for edge, w in zip(G.edges(), weights)}, "weight")
    return G


def write_benchmark_files(G, output_dir=OUTPUT_DIR):
    """Saves ``G`` unweighted and weighted; returns both paths."""
    unweighted = os.path.join(output_dir, UNWEIGHTED_FILE)
    weighted = os.path.join(output_dir, WEIGHTED_FILE)
    save_graph_to_metis(G, unweighted)
    save_graph_to_metis(G, weighted, edge_weight="weight")
    return unweighted, weighted


if __name__ == "__main__":
    start_time = time.time()
    graph = generate_benchmark_graph()
    print(f"Generated graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges.")
    write_benchmark_files(graph)
    print(f"Graph generation completed in {time.time() - start_time:.2f} seconds.")
