"""
tests/test_generate_graph.py

Tests for the benchmark input generator (generate_graph.py): the generated
graph is connected, weighted within range, and both written files load back.
"""

import networkx as nx

from generate_graph import generate_benchmark_graph, write_benchmark_files
from metisgraph.graph import CSRGraph, UndirectedGraph


def test_generated_graph_is_connected_and_weighted():
    G = generate_benchmark_graph(num_nodes=200, num_neighbors=4, max_weight=5, seed=7)
    assert G.number_of_nodes() == 200
    assert nx.is_connected(G)
    weights = [w for _, _, w in G.edges(data="weight")]
    assert len(weights) == G.number_of_edges()
    assert all(isinstance(w, int) and 1 <= w <= 5 for w in weights)


def test_generation_is_reproducible():
    first = generate_benchmark_graph(num_nodes=100, seed=3)
    second = generate_benchmark_graph(num_nodes=100, seed=3)
    assert sorted(first.edges(data="weight")) == sorted(second.edges(data="weight"))


def test_written_files_load_back(tmp_path):
    G = generate_benchmark_graph(num_nodes=100, seed=1)
    unweighted, weighted = write_benchmark_files(G, str(tmp_path / "sample"))

    graph = UndirectedGraph.from_metis_graph(unweighted)
    assert graph.num_vertices() == 100
    assert graph.num_edges() == G.number_of_edges()
    assert graph.edge_weights is None

    csr = CSRGraph.from_metis_graph(weighted)
    assert csr.num_edges() == G.number_of_edges()
    assert csr.edge_weights.min() >= 1
    assert csr.edge_weights.max() <= 10
