"""
metis_parser.py

This module drives the reading of a graph in METIS file format. It reads the
header from the first content line, then lazily parses every following line
(paired with its 1-based vertex position) and hands the header and the lazy
line sequence to a graph class implementing :class:`FromMetisGraphFormat`.

The graph class decides the in-memory representation:
    UndirectedGraph  -> list of (u, v) edges with u < v
    CSRGraph         -> xadj / adjncy arrays as expected by METIS

Lines whose first non-blank character is '%' are comments and are skipped.
Blank lines before the header are skipped; a blank vertex line describes a
vertex without neighbours.

Refer to Section 4.1.1 of the METIS Manual for details.
"""

import abc
import logging
import os
from typing import Iterable, Iterator, Type, TypeVar, Union

from metisgraph.errors import (
    EmptyHeaderError,
    GraphFileIOError,
    InvalidLineError,
    LineError,
)
from metisgraph.header import Header
from metisgraph.line import Line

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)

COMMENT_PREFIX = "%"

G = TypeVar("G", bound="FromMetisGraphFormat")


def iter_content_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Filters the raw lines of a METIS file.

    Comment lines are dropped everywhere; blank lines are dropped only
    until the header has been seen. Trailing newlines are removed.
    """
    seen_header = False
    for line in lines:
        stripped = line.strip()
        if stripped.startswith(COMMENT_PREFIX):
            continue
        if not seen_header:
            if not stripped:
                continue
            seen_header = True
        yield line.rstrip("\r\n")


def parse_lines(header: Header, lines: Iterable[str]) -> Iterator[Line]:
    """
    Lazily parses vertex lines, numbering them from 1.

    Parameters:
        header (Header): The already parsed header.
        lines (Iterable[str]): The vertex lines, in vertex order.

    Yields:
        Line: One parsed line per input line.

    Raises:
        InvalidLineError: On the first malformed line, with the underlying
            :class:`LineError` as ``error`` and ``__cause__``.
    """
    for position, text in enumerate(lines, start=1):
        try:
            yield Line.parse(header, position, text)
        except LineError as e:
            logger.error(f"Vertex {position}: {e} (line: '{text.strip()}').")
            raise InvalidLineError(position, text, e) from e


def read_header(lines: Iterator[str]) -> Header:
    """Consumes and parses the first line of ``lines``."""
    first = next(lines, None)
    if first is None:
        logger.error("METIS file is empty or contains only comments/whitespace.")
        raise EmptyHeaderError()
    return Header.parse(first)


class FromMetisGraphFormat(abc.ABC):
    """
    Capability of being constructed from a METIS graph file.

    Implementations only provide :meth:`from_metis_graph_iter`, a strict
    single pass over the parsed lines; reading strings, files and raw line
    sources is shared.
    """

    @classmethod
    @abc.abstractmethod
    def from_metis_graph_iter(cls: Type[G], header: Header, lines: Iterable[Line]) -> G:
        """Builds the graph from a header and the lazily parsed vertex lines."""

    @classmethod
    def from_metis_graph_lines(cls: Type[G], lines: Iterable[str]) -> G:
        """
        Reads a METIS graph from any source of text lines.

        The header is taken from the first content line, the remaining
        lines are parsed one at a time while the graph is being built.
        """
        content = iter_content_lines(lines)
        header = read_header(content)
        graph = cls.from_metis_graph_iter(header, parse_lines(header, content))
        logger.info(
            f"Loaded METIS graph as {cls.__name__}: "
            f"{header.num_vertices} vertices, {header.num_edges} edges.")
        return graph

    @classmethod
    def from_metis_graph_str(cls: Type[G], text: str) -> G:
        """Reads a METIS graph held in a string (assumed to be small)."""
        return cls.from_metis_graph_lines(text.strip().splitlines())

    @classmethod
    def from_metis_graph(cls: Type[G], file_path: Union[str, os.PathLike]) -> G:
        """
        Reads a METIS graph file.

        Raises:
            GraphFileIOError: If the file cannot be opened or read.
            InvalidGraphFileError: If the content is not a valid graph.
        """
        try:
            with open(file_path, "r") as f:
                return cls.from_metis_graph_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file '{file_path}': {e}")
            raise GraphFileIOError(file_path, e) from e


def load_graph_from_metis(file_path: Union[str, os.PathLike],
                          graph_cls: Type[G] = None) -> G:
    """
    Reads a METIS graph file into ``graph_cls`` (a :class:`CSRGraph` by
    default, the representation METIS routines consume).
    """
    if graph_cls is None:
        from metisgraph.graph import CSRGraph
        graph_cls = CSRGraph
    return graph_cls.from_metis_graph(file_path)
