"""
writer.py

Saves NetworkX graphs in METIS graph format.

METIS expects:
  - 1-based vertex numbering, one line per vertex in vertex order.
  - A header `num_vertices num_edges [fmt]` where num_edges counts every
    undirected edge once.
  - No self-loops.
"""

import logging
import os
from typing import Iterator, Optional

import networkx as nx

from metisgraph.header import Format, Header

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


def graph_to_metis_lines(G: nx.Graph, edge_weight: Optional[str] = None) -> Iterator[str]:
    """
    Yields the lines of the METIS representation of ``G``.

    Nodes are numbered 1..n following their sorted order.

    Parameters:
        G (networkx.Graph): The undirected input graph.
        edge_weight (str, optional): Edge attribute written as edge weight.
            Edges lacking it get weight 1.

    Raises:
        ValueError: If ``G`` is directed or has self-loops.
    """
    if G.is_directed():
        raise ValueError("METIS graph files describe undirected graphs.")
    if nx.number_of_selfloops(G) > 0:
        logger.error("Graph has self-loops, which METIS graph files cannot hold.")
        raise ValueError("METIS graph files cannot hold self-loops.")

    nodes = sorted(G.nodes())
    index = {node: i for i, node in enumerate(nodes, start=1)}
    fmt = Format(has_edge_weight=edge_weight is not None)
    yield str(Header(len(nodes), G.number_of_edges(), fmt))

    for node in nodes:
        neighbors = sorted(G.neighbors(node), key=index.__getitem__)
        if edge_weight is None:
            tokens = [str(index[n]) for n in neighbors]
        else:
            tokens = []
            for n in neighbors:
                tokens.append(str(index[n]))
                tokens.append(_format_weight(G[node][n].get(edge_weight, 1)))
        yield " ".join(tokens)


def save_graph_to_metis(G: nx.Graph, file_name: str = "graph.graph",
                        edge_weight: Optional[str] = None) -> None:
    """
    Saves a NetworkX graph in METIS format, creating the parent directory.

    Parameters:
        G (networkx.Graph): The input undirected graph.
        file_name (str): Path to save the METIS formatted graph.
        edge_weight (str, optional): Edge attribute written as edge weight.
    """
    directory = os.path.dirname(file_name)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(file_name, "w") as f:
        for line in graph_to_metis_lines(G, edge_weight):
            f.write(line + "\n")

    logger.info(
        f"Saved graph to '{file_name}': {G.number_of_nodes()} vertices, {G.number_of_edges()} edges.")


def _format_weight(weight) -> str:
    if float(weight).is_integer():
        return str(int(weight))
    return str(weight)
