"""
header.py

Parsing of the first line of a METIS graph file.

Header format (Section 4.1.1 of the METIS Manual):

    <num_vertices> <num_edges> [<fmt>] [<ncon>]

where ``fmt`` is a 3-character string of 0/1 flags telling which optional
fields appear on every vertex line, in order: vertex size, vertex weights,
edge weights. ``ncon`` is the number of weights per vertex and defaults to 1.

Examples:
    "7 11"          -> no optional fields
    "7 11 001"      -> edge weights
    "7 11 011"      -> vertex weights and edge weights
    "7 11 010 3"    -> three weights per vertex
"""

import logging
import re
from dataclasses import dataclass
from typing import Type

from metisgraph.errors import (
    EdgeCountMissingError,
    EmptyHeaderError,
    HeaderParseIntError,
    InvalidFormatError,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)

# Number of weights per vertex when the header omits ``ncon``.
DEFAULT_NUM_WEIGHTS = 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


def parse_unsigned(token: str) -> int:
    """
    Parses a non-negative decimal integer.

    ``int()`` is too lenient for counts and indices: it accepts negative
    numbers, underscores and surrounding whitespace.

    Raises:
        ValueError: If the token is not a plain non-negative integer.
    """
    if not _UNSIGNED_RE.fullmatch(token):
        raise ValueError(f"invalid unsigned integer literal: {token!r}")
    return int(token)


def parse_signed(token: str) -> int:
    """Parses a decimal integer with an optional sign."""
    if not _SIGNED_RE.fullmatch(token):
        raise ValueError(f"invalid integer literal: {token!r}")
    return int(token)


@dataclass(frozen=True)
class Format:
    """Flags of the optional ``fmt`` header field."""

    has_vertex_size: bool = False
    has_vertex_weight: bool = False
    has_edge_weight: bool = False

    @classmethod
    def parse(cls: Type["Format"], fmt: str) -> "Format":
        """
        Decodes a 3-character flag string such as ``"011"``.

        Parameters:
            fmt (str): The flag string, each character ``'0'`` or ``'1'``.

        Returns:
            Format: The decoded flags.

        Raises:
            InvalidFormatError: If the string is not exactly 3 characters long
                or contains anything other than ``'0'`` and ``'1'``.
        """
        if len(fmt) != 3:
            logger.error(f"Invalid format spec '{fmt}': length {len(fmt)} != 3.")
            raise InvalidFormatError(fmt, "invalid format length")

        flags = []
        for char in fmt:
            if char not in ("0", "1"):
                logger.error(
                    f"Invalid format spec '{fmt}': unexpected character '{char}'.")
                raise InvalidFormatError(fmt, "invalid format character")
            flags.append(char == "1")
        return cls(*flags)

    def __str__(self) -> str:
        return "".join("1" if flag else "0" for flag in
                       (self.has_vertex_size, self.has_vertex_weight, self.has_edge_weight))


@dataclass(frozen=True)
class Header:
    """Header of a METIS graph file."""

    num_vertices: int
    num_edges: int
    fmt: Format = Format()
    # Number of vertex weights associated with each vertex of the graph
    num_weights: int = DEFAULT_NUM_WEIGHTS

    @classmethod
    def parse(cls: Type["Header"], line: str) -> "Header":
        """
        Parses the header line of a METIS graph file.

        Tokens are separated by any run of whitespace; tokens after the
        fourth are ignored.

        Parameters:
            line (str): The first content line of the file.

        Returns:
            Header: The decoded header.

        Raises:
            EmptyHeaderError: If the line has no tokens.
            EdgeCountMissingError: If the edge count is absent.
            HeaderParseIntError: If a count is not a non-negative integer.
            InvalidFormatError: If the format flags are malformed.
        """
        tokens = line.split()
        if not tokens:
            logger.error("METIS header is empty.")
            raise EmptyHeaderError()
        if len(tokens) < 2:
            logger.error(
                "Invalid METIS header: requires at least two tokens (num_vertices and num_edges).")
            raise EdgeCountMissingError()

        num_vertices = _parse_count(tokens[0], "num_vertices")
        num_edges = _parse_count(tokens[1], "num_edges")
        fmt = Format.parse(tokens[2]) if len(tokens) >= 3 else Format()
        # If ncon is omitted, the vertices are assumed to have a single weight.
        if len(tokens) >= 4:
            num_weights = _parse_count(tokens[3], "num_weights")
        else:
            num_weights = DEFAULT_NUM_WEIGHTS

        header = cls(num_vertices, num_edges, fmt, num_weights)
        logger.debug(f"Parsed METIS header: {header}")
        return header

    def __str__(self) -> str:
        if self.num_weights != DEFAULT_NUM_WEIGHTS:
            return f"{self.num_vertices} {self.num_edges} {self.fmt} {self.num_weights}"
        if self.fmt != Format():
            return f"{self.num_vertices} {self.num_edges} {self.fmt}"
        return f"{self.num_vertices} {self.num_edges}"


def _parse_count(token: str, field: str) -> int:
    try:
        return parse_unsigned(token)
    except ValueError as e:
        logger.error(f"Invalid {field} value in METIS header: '{token}'.")
        raise HeaderParseIntError(field, token) from e
