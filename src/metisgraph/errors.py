"""
errors.py

Exception hierarchy for the METIS graph reader and the pymetis partitioning
boundary.

    MetisError
    ├── GraphFileError
    │   ├── GraphFileIOError
    │   └── InvalidGraphFileError (also a ValueError)
    │       ├── HeaderError ...
    │       ├── LineError ...
    │       ├── InvalidLineError
    │       ├── VertexCountMismatchError
    │       ├── EdgeCountMismatchError
    │       └── NonSymmetricError
    └── PartitionError
        ├── MetisMemoryError
        ├── MetisInputError
        └── MetisUnknownError

Every error keeps the values that describe it as attributes (listed in
``_fields``) and two errors compare equal when they have the same type and
the same field values, so callers can assert on the exact failure.
"""

from typing import Any, Tuple


class MetisError(Exception):
    """Base class of every error raised by metisgraph."""

    _fields: Tuple[str, ...] = ()

    def _key(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __repr__(self):
        args = ", ".join(f"{name}={getattr(self, name)!r}"
                         for name in self._fields)
        return f"{type(self).__name__}({args})"


# ---------- Graph file errors ----------


class GraphFileError(MetisError):
    """The METIS graph file could not be read or is not a valid graph file."""


class GraphFileIOError(GraphFileError):
    """The underlying line source failed (missing file, read or decode failure)."""

    _fields = ("path", "error")

    def __init__(self, path, error: Exception):
        self.path = path
        self.error = error
        super().__init__(f"Cannot read METIS graph file '{path}': {error}")


class InvalidGraphFileError(GraphFileError, ValueError):
    """The content of the METIS graph file violates the format."""


# ---------- Header errors ----------


class HeaderError(InvalidGraphFileError):
    """The first line of the file is not a valid METIS header."""


class EmptyHeaderError(HeaderError):
    def __init__(self):
        super().__init__("Header is empty")


class EdgeCountMissingError(HeaderError):
    def __init__(self):
        super().__init__("Header does not have edge count")


class InvalidFormatError(HeaderError):
    """The 3-character ``fmt`` flag string is malformed."""

    _fields = ("fmt", "reason")

    def __init__(self, fmt: str, reason: str):
        self.fmt = fmt
        self.reason = reason
        super().__init__(f"Format spec in header is invalid ({reason}): {fmt!r}")


class HeaderParseIntError(HeaderError):
    """A count in the header is not a non-negative integer."""

    _fields = ("field", "token")

    def __init__(self, field: str, token: str):
        self.field = field
        self.token = token
        super().__init__(
            f"Invalid {field} in header: {token!r} is not a non-negative integer")


# ---------- Line errors ----------


class LineError(InvalidGraphFileError):
    """A data line is malformed. Raised without positional context."""


class VertexSizeMissingError(LineError):
    def __init__(self):
        super().__init__("vertex size `s` is missing")


class VertexWeightMissingError(LineError):
    _fields = ("expected", "actual")

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected {expected} vertex weights, found {actual}")


class EdgeWeightMissingError(LineError):
    def __init__(self):
        super().__init__("edge weight does not exist")


class VertexOutOfRangeError(LineError):
    _fields = ("index", "num_vertices")

    def __init__(self, index: int, num_vertices: int):
        self.index = index
        self.num_vertices = num_vertices
        super().__init__(
            f"Vertex is out-of-range: {index} > {num_vertices}")


class LineParseIntError(LineError):
    _fields = ("token",)

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid integer literal: {token!r}")


class LineParseFloatError(LineError):
    _fields = ("token",)

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid float literal: {token!r}")


class InvalidLineError(InvalidGraphFileError):
    """A :class:`LineError` annotated with the 1-based row it came from."""

    _fields = ("position", "line", "error")

    def __init__(self, position: int, line: str, error: LineError):
        self.position = position
        self.line = line
        self.error = error
        super().__init__(f"Invalid line for vertex {position}: {error}")


# ---------- Aggregate count errors ----------


class VertexCountMismatchError(InvalidGraphFileError):
    _fields = ("actual", "header")

    def __init__(self, actual: int, header: int):
        self.actual = actual
        self.header = header
        super().__init__(
            f"Vertex count mismatch: actual({actual}) != header({header})")


class EdgeCountMismatchError(InvalidGraphFileError):
    _fields = ("actual", "header")

    def __init__(self, actual: int, header: int):
        self.actual = actual
        self.header = header
        super().__init__(
            f"Edge count mismatch: actual({actual}) != header({header})")


class NonSymmetricError(InvalidGraphFileError):
    _fields = ("num_entries",)

    def __init__(self, num_entries: int):
        self.num_entries = num_entries
        super().__init__(
            "METIS graph is assumed to be symmetric, "
            f"but has an odd number of adjacency entries ({num_entries})")


# ---------- Partitioning errors ----------


class PartitionError(MetisError):
    """A METIS routine called through pymetis failed."""

    _fields = ("routine", "detail")

    def __init__(self, routine: str, detail: str):
        self.routine = routine
        self.detail = detail
        super().__init__(f"METIS routine ({routine}) failed: {detail}")


class MetisMemoryError(PartitionError, MemoryError):
    """METIS_ERROR_MEMORY: the routine could not allocate memory."""


class MetisInputError(PartitionError, ValueError):
    """METIS_ERROR_INPUT: the routine rejected its arguments."""


class MetisUnknownError(PartitionError, RuntimeError):
    """METIS_ERROR or any failure that cannot be classified."""
