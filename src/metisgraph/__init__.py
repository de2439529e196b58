"""
metisgraph

Reader for graphs in METIS graph file format, with an edge-list and a
compressed sparse row representation, and a PyMETIS-backed boundary to the
METIS partitioning routines.
"""

from metisgraph.errors import (
    EdgeCountMismatchError,
    EdgeCountMissingError,
    EdgeWeightMissingError,
    EmptyHeaderError,
    GraphFileError,
    GraphFileIOError,
    HeaderError,
    HeaderParseIntError,
    InvalidFormatError,
    InvalidGraphFileError,
    InvalidLineError,
    LineError,
    LineParseFloatError,
    LineParseIntError,
    MetisError,
    MetisInputError,
    MetisMemoryError,
    MetisUnknownError,
    NonSymmetricError,
    PartitionError,
    VertexCountMismatchError,
    VertexOutOfRangeError,
    VertexSizeMissingError,
    VertexWeightMissingError,
)
from metisgraph.header import Format, Header
from metisgraph.line import Line
from metisgraph.metis_parser import FromMetisGraphFormat, load_graph_from_metis
from metisgraph.graph import CSRGraph, UndirectedGraph
from metisgraph.partition import group_partitions, order_graph, partition_graph
from metisgraph.writer import graph_to_metis_lines, save_graph_to_metis

__version__ = "0.1.0"
