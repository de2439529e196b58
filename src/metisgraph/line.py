"""
line.py

Parsing of a single vertex line of a METIS graph file.

A vertex line holds, in order:

    [s] [w_1 ... w_ncon] v_1 [e_1] v_2 [e_2] ...

``s`` (vertex size), the ``w`` block (vertex weights) and the ``e`` tokens
(edge weights) are present only when the corresponding flag of the header
format is set.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from metisgraph.errors import (
    EdgeWeightMissingError,
    LineParseFloatError,
    LineParseIntError,
    VertexOutOfRangeError,
    VertexSizeMissingError,
    VertexWeightMissingError,
)
from metisgraph.header import Header, parse_signed, parse_unsigned

# Range of METIS idx_t (32-bit build)
IDX_MIN = -2 ** 31
IDX_MAX = 2 ** 31 - 1


@dataclass
class Line:
    """Parsed vertex line."""

    # Corresponding vertex index (1-based)
    position: int
    # `s` in the manual, None unless fmt.has_vertex_size
    vertex_size: Optional[int]
    # `w_1`, `w_2`, ... in the manual, None unless fmt.has_vertex_weight
    vertex_weights: Optional[List[float]]
    # `v_1`, `v_2`, ... in the manual
    vertices: List[int]
    # `e_1`, `e_2`, ... in the manual, None unless fmt.has_edge_weight
    edge_weights: Optional[List[float]]

    @classmethod
    def parse(cls, header: Header, position: int, line: str) -> "Line":
        """
        Parses the line describing vertex ``position``.

        Parameters:
            header (Header): Header of the file; decides which fields exist.
            position (int): 1-based index of the vertex this line describes.
            line (str): Raw text of the line.

        Returns:
            Line: The parsed line.

        Raises:
            VertexSizeMissingError: If the vertex size is flagged but absent.
            VertexWeightMissingError: If fewer than ``num_weights`` vertex
                weights are present.
            EdgeWeightMissingError: If a neighbour has no matching edge weight.
            VertexOutOfRangeError: If a neighbour index exceeds the vertex count.
            LineParseIntError, LineParseFloatError: If a token is not a number.
        """
        tokens = iter(line.split())
        fmt = header.fmt

        vertex_size = None
        if fmt.has_vertex_size:
            token = next(tokens, None)
            if token is None:
                raise VertexSizeMissingError()
            vertex_size = _to_int(token)

        vertex_weights = None
        if fmt.has_vertex_weight:
            vertex_weights = [_to_float(token)
                              for token in _take(tokens, header.num_weights)]
            if len(vertex_weights) < header.num_weights:
                raise VertexWeightMissingError(header.num_weights, len(vertex_weights))

        edge_weights = None
        if fmt.has_edge_weight:
            vertices = []
            edge_weights = []
            for token in tokens:
                vertices.append(_to_index(token))
                weight = next(tokens, None)
                if weight is None:
                    raise EdgeWeightMissingError()
                edge_weights.append(_to_float(weight))
        else:
            vertices = [_to_index(token) for token in tokens]

        for index in vertices:
            if index > header.num_vertices:
                raise VertexOutOfRangeError(index, header.num_vertices)

        return cls(position, vertex_size, vertex_weights, vertices, edge_weights)


def _take(tokens: Iterator[str], count: int) -> Iterator[str]:
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            return
        yield token


def _to_index(token: str) -> int:
    try:
        index = parse_unsigned(token)
    except ValueError as e:
        raise LineParseIntError(token) from e
    if index > IDX_MAX:
        raise LineParseIntError(token)
    return index


def _to_int(token: str) -> int:
    try:
        value = parse_signed(token)
    except ValueError as e:
        raise LineParseIntError(token) from e
    if not IDX_MIN <= value <= IDX_MAX:
        raise LineParseIntError(token)
    return value


def _to_float(token: str) -> float:
    try:
        return float(token)
    except ValueError as e:
        raise LineParseFloatError(token) from e
