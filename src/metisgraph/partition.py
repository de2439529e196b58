"""
partition.py

Boundary to the METIS partitioning and ordering routines, called through
PyMETIS. A :class:`CSRGraph` is passed as a ``pymetis.CSRAdjacency`` built
from its ``(xadj, adjncy)`` arrays, together with its optional vertex and
edge weights.

METIS works with 0-based vertex numbers while METIS graph files are 1-based,
so by default the column indices are shifted down by one before the call.
"""

import logging
from typing import Dict, List, Sequence, Set, Tuple

import numpy as np
import pymetis

from metisgraph.errors import (
    MetisInputError,
    MetisMemoryError,
    MetisUnknownError,
    PartitionError,
)
from metisgraph.graph import CSRGraph

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def partition_graph(graph: CSRGraph, num_partitions: int, recursive: bool = False,
                    contiguous: bool = False, use_weights: bool = True,
                    one_based: bool = True) -> Tuple[int, List[int]]:
    """
    Partitions a graph using PyMETIS into the specified number of partitions.

    Parameters:
        graph (CSRGraph): The graph to partition.
        num_partitions (int): The number of partitions, at least 2.
        recursive (bool): Use recursive bisection instead of k-way partitioning.
        contiguous (bool): Require every partition to be connected.
        use_weights (bool): Pass the vertex and edge weights of the graph, if any.
        one_based (bool): Whether the column indices of the graph are 1-based.

    Returns:
        Tuple[int, List[int]]: The edge cut and, for every vertex in row
            order, the 0-based partition it was assigned to.

    Raises:
        MetisInputError: If the arguments cannot be passed to METIS or METIS
            rejects them.
        MetisMemoryError: If METIS runs out of memory.
        MetisUnknownError: For any other METIS failure.
    """
    routine = "METIS_PartGraphRecursive" if recursive else "METIS_PartGraphKway"
    if num_partitions <= 1:
        logger.error("Number of partitions must be greater than 1.")
        raise MetisInputError(routine, "number of partitions must be greater than 1")

    adjacency = _metis_adjacency(graph, routine, one_based)
    vweights = eweights = None
    if use_weights:
        if graph.vertex_weights is not None:
            vweights = _integral_weights(graph.vertex_weights, routine, "vertex")
        if graph.edge_weights is not None:
            eweights = _integral_weights(graph.edge_weights, routine, "edge")

    try:
        logger.info(
            f"Partitioning graph using PyMETIS into {num_partitions} partitions...")
        objval, parts = pymetis.part_graph(
            num_partitions, adjacency=adjacency, vweights=vweights,
            eweights=eweights, recursive=recursive, contiguous=contiguous)
    except Exception as e:
        raise _translate_failure(routine, e) from e

    logger.info(f"PyMETIS partitioning completed successfully (edge cut {objval}).")
    return objval, list(parts)


def order_graph(graph: CSRGraph, one_based: bool = True) -> Tuple[List[int], List[int]]:
    """
    Computes a fill-reducing ordering of the graph by nested dissection.

    Returns:
        Tuple[List[int], List[int]]: ``(perm, iperm)`` as defined by METIS_NodeND.
    """
    routine = "METIS_NodeND"
    adjacency = _metis_adjacency(graph, routine, one_based)
    try:
        perm, iperm = pymetis.nested_dissection(adjacency=adjacency)
    except Exception as e:
        raise _translate_failure(routine, e) from e
    return list(perm), list(iperm)


def group_partitions(parts: Sequence[int], one_based: bool = True) -> Dict[int, Set[int]]:
    """
    Groups the vertices by partition.

    Parameters:
        parts (Sequence[int]): Partition of every vertex, in row order.
        one_based (bool): Number the vertices from 1, as in the graph file.

    Returns:
        Dict[int, Set[int]]: A dictionary mapping partition indices to sets of vertices.
    """
    offset = 1 if one_based else 0
    partition_dict = {}
    for row, part_id in enumerate(parts):
        partition_dict.setdefault(part_id, set()).add(row + offset)
    return partition_dict


def _metis_adjacency(graph: CSRGraph, routine: str,
                     one_based: bool) -> pymetis.CSRAdjacency:
    n = graph.num_vertices()
    adjncy = graph.column_indices.astype(np.int64)
    if one_based:
        adjncy = adjncy - 1
    if adjncy.size and (adjncy.min() < 0 or adjncy.max() >= n):
        base = 1 if one_based else 0
        logger.error(
            f"Adjacency index out of range for {n} vertices numbered from {base}.")
        raise MetisInputError(
            routine, f"adjacency index out of range for {n} vertices numbered from {base}")
    return pymetis.CSRAdjacency(graph.row_offsets.tolist(), adjncy.tolist())


def _integral_weights(weights: np.ndarray, routine: str, kind: str) -> List[int]:
    flat = np.asarray(weights).ravel()
    if not np.all(np.equal(np.mod(flat, 1), 0)):
        logger.error(f"METIS requires integer {kind} weights.")
        raise MetisInputError(routine, f"{kind} weights must be integers")
    return flat.astype(np.int64).tolist()


def _translate_failure(routine: str, error: Exception) -> PartitionError:
    """Maps a PyMETIS exception to the METIS status it stands for."""
    detail = str(error) or type(error).__name__
    lowered = detail.lower()
    if isinstance(error, MemoryError) or "memory" in lowered:
        cls = MetisMemoryError
    elif isinstance(error, (ValueError, TypeError)) or "input" in lowered:
        cls = MetisInputError
    else:
        cls = MetisUnknownError
    logger.error(f"PyMETIS {routine} failed: {detail}")
    return cls(routine, detail)
