"""
graph.py

In-memory graph representations built from a METIS graph file.

    UndirectedGraph : every undirected edge once, as (u, v) with u < v.
    CSRGraph        : compressed sparse row adjacency (``xadj`` / ``adjncy``
                      in the METIS Manual), both directions of every edge
                      kept. This is the representation handed to METIS.

Vertex indices are kept exactly as they appear in the file (1-based for
regular METIS files).
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx
import numpy as np

from metisgraph.errors import (
    EdgeCountMismatchError,
    NonSymmetricError,
    VertexCountMismatchError,
)
from metisgraph.header import Header
from metisgraph.line import Line
from metisgraph.metis_parser import FromMetisGraphFormat

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)

# METIS idx_t / real_t
IDX_DTYPE = np.int32
REAL_DTYPE = np.float64


class UndirectedGraph(FromMetisGraphFormat):
    """Uncompressed undirected graph stored as an edge list."""

    def __init__(self, num_vertices: int, edges: List[Tuple[int, int]],
                 edge_weights: Optional[List[float]] = None):
        self._num_vertices = num_vertices
        self.edges = edges
        self.edge_weights = edge_weights

    @classmethod
    def from_metis_graph_iter(cls, header: Header, lines: Iterable[Line]) -> "UndirectedGraph":
        """
        Collects the edges of the graph.

        Every edge is declared on the lines of both endpoints; only the
        declaration from the lower-indexed endpoint is kept.

        Raises:
            InvalidLineError: Propagated from the line sequence.
            EdgeCountMismatchError: If the number of kept edges differs
                from the header.
        """
        edges = []
        edge_weights = [] if header.fmt.has_edge_weight else None
        for line in lines:
            from_index = line.position
            for k, to_index in enumerate(line.vertices):
                if from_index < to_index:
                    edges.append((from_index, to_index))
                    if edge_weights is not None:
                        edge_weights.append(line.edge_weights[k])

        if len(edges) != header.num_edges:
            logger.error(
                f"Edge count mismatch: {len(edges)} edges found, header declares {header.num_edges}.")
            raise EdgeCountMismatchError(len(edges), header.num_edges)

        return cls(header.num_vertices, edges, edge_weights)

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_edges(self) -> int:
        return len(self.edges)

    def to_networkx(self) -> nx.Graph:
        """
        Converts the graph to a NetworkX graph with nodes ``1..num_vertices``.
        Edge weights, if any, are stored in the ``weight`` attribute.
        """
        G = nx.Graph()
        G.add_nodes_from(range(1, self._num_vertices + 1))
        if self.edge_weights is None:
            G.add_edges_from(self.edges)
        else:
            G.add_weighted_edges_from(
                (u, v, w) for (u, v), w in zip(self.edges, self.edge_weights))
        return G

    def __eq__(self, other):
        if not isinstance(other, UndirectedGraph):
            return NotImplemented
        return (self._num_vertices == other._num_vertices
                and self.edges == other.edges
                and self.edge_weights == other.edge_weights)

    def __repr__(self):
        return f"UndirectedGraph(num_vertices={self._num_vertices}, num_edges={len(self.edges)})"


class CSRGraph(FromMetisGraphFormat):
    """
    Compressed sparse row (CSR) graph.

    The neighbours of row ``i`` (0-based row, vertex ``i + 1`` of the file)
    are ``column_indices[row_offsets[i]:row_offsets[i + 1]]``.

    Attributes:
        column_indices (np.ndarray): ``adjncy`` in the METIS Manual.
        row_offsets (np.ndarray): ``xadj`` in the METIS Manual.
        vertex_sizes (np.ndarray or None): ``vsize``, one per vertex.
        vertex_weights (np.ndarray or None): ``vwgt``, shape (n, ncon).
        edge_weights (np.ndarray or None): ``adjwgt``, parallel to
            ``column_indices``.
    """

    def __init__(self, column_indices, row_offsets, vertex_sizes=None,
                 vertex_weights=None, edge_weights=None):
        self.column_indices = np.asarray(column_indices, dtype=IDX_DTYPE)
        self.row_offsets = np.asarray(row_offsets, dtype=IDX_DTYPE)
        self.vertex_sizes = None if vertex_sizes is None else np.asarray(
            vertex_sizes, dtype=IDX_DTYPE)
        self.vertex_weights = None if vertex_weights is None else np.asarray(
            vertex_weights, dtype=REAL_DTYPE)
        self.edge_weights = None if edge_weights is None else np.asarray(
            edge_weights, dtype=REAL_DTYPE)

    @classmethod
    def from_metis_graph_iter(cls, header: Header, lines: Iterable[Line]) -> "CSRGraph":
        """
        Accumulates the neighbour lists row by row.

        Raises:
            InvalidLineError: Propagated from the line sequence.
            VertexCountMismatchError: If the number of rows differs from the header.
            NonSymmetricError: If the total number of neighbour entries is odd.
            EdgeCountMismatchError: If half the entries differ from the header.
        """
        fmt = header.fmt
        column_indices = []
        row_offsets = [0]
        vertex_sizes = [] if fmt.has_vertex_size else None
        vertex_weights = [] if fmt.has_vertex_weight else None
        edge_weights = [] if fmt.has_edge_weight else None

        num_elements = 0
        for line in lines:
            num_elements += len(line.vertices)
            column_indices.extend(line.vertices)
            row_offsets.append(num_elements)
            if vertex_sizes is not None:
                vertex_sizes.append(line.vertex_size)
            if vertex_weights is not None:
                vertex_weights.append(line.vertex_weights)
            if edge_weights is not None:
                edge_weights.extend(line.edge_weights)

        num_rows = len(row_offsets) - 1
        if num_rows != header.num_vertices:
            logger.error(
                f"Vertex count mismatch: {num_rows} vertex lines found, header declares {header.num_vertices}.")
            raise VertexCountMismatchError(num_rows, header.num_vertices)
        if len(column_indices) % 2 != 0:
            logger.error(
                f"Odd number of adjacency entries ({len(column_indices)}); the graph is not symmetric.")
            raise NonSymmetricError(len(column_indices))
        if len(column_indices) // 2 != header.num_edges:
            logger.error(
                f"Edge count mismatch: {len(column_indices) // 2} edges found, header declares {header.num_edges}.")
            raise EdgeCountMismatchError(len(column_indices) // 2, header.num_edges)

        if vertex_weights is not None:
            vertex_weights = np.asarray(vertex_weights, dtype=REAL_DTYPE).reshape(
                num_rows, header.num_weights)
        return cls(column_indices, row_offsets, vertex_sizes, vertex_weights, edge_weights)

    @property
    def xadj(self) -> np.ndarray:
        return self.row_offsets

    @property
    def adjncy(self) -> np.ndarray:
        return self.column_indices

    def num_vertices(self) -> int:
        return len(self.row_offsets) - 1

    def num_edges(self) -> int:
        return len(self.column_indices) // 2

    def neighbors(self, row: int) -> np.ndarray:
        """Neighbour indices of the 0-based ``row``, as stored in the file."""
        return self.column_indices[self.row_offsets[row]:self.row_offsets[row + 1]]

    def to_adjacency_list(self) -> Dict[int, List[int]]:
        """Maps every 0-based row to the list of its neighbour indices."""
        return {row: self.neighbors(row).tolist() for row in range(self.num_vertices())}

    def __eq__(self, other):
        if not isinstance(other, CSRGraph):
            return NotImplemented
        return all(_optional_equal(a, b) for a, b in (
            (self.column_indices, other.column_indices),
            (self.row_offsets, other.row_offsets),
            (self.vertex_sizes, other.vertex_sizes),
            (self.vertex_weights, other.vertex_weights),
            (self.edge_weights, other.edge_weights),
        ))

    __hash__ = None

    def __repr__(self):
        return f"CSRGraph(num_vertices={self.num_vertices()}, num_edges={self.num_edges()})"


def _optional_equal(a: Optional[np.ndarray], b: Optional[np.ndarray]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return np.array_equal(a, b)
