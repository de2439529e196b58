"""
tests/test_metis_parser.py

Unit tests for the METIS graph reader implemented in src/metisgraph/metis_parser.py.
These tests cover:
  - Reading graphs from strings, files and arbitrary line sources.
  - Skipping of comment lines and of blank lines before the header.
  - Detection and reporting of malformed files (empty files, only comments,
    malformed header, malformed vertex lines with their position).
  - Wrapping of I/O failures.
  - A performance test for a large METIS graph (data/PGPgiantcompo.graph).

Run the tests with:
    pytest tests/test_metis_parser.py --maxfail=1 --disable-warnings -v
"""

import os

import pytest

from metisgraph import examples
from metisgraph.errors import (
    EdgeCountMissingError,
    EmptyHeaderError,
    GraphFileIOError,
    InvalidLineError,
    VertexOutOfRangeError,
    EdgeWeightMissingError,
)
from metisgraph.graph import CSRGraph, UndirectedGraph
from metisgraph.header import Header
from metisgraph.metis_parser import (
    iter_content_lines,
    load_graph_from_metis,
    parse_lines,
)

# Helper function to write graph content to a temporary file.


def write_temp_graph(tmp_path, content: str) -> str:
    file_path = tmp_path / "graph.metis"
    file_path.write_text(content)
    return str(file_path)

# ---------- Basic Functionality Tests ----------


def test_load_unweighted_graph(tmp_path):
    """
    Test a simple unweighted METIS graph.
    Graph:
      Vertex 1: neighbor 2
      Vertex 2: neighbors 1 and 3
      Vertex 3: neighbor 2
    Header "3 2" with 2 edges (each edge appears twice in the file).
    """
    content = (
        "3 2\n"
        "2\n"
        "1 3\n"
        "2\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    graph = load_graph_from_metis(file_path)
    assert isinstance(graph, CSRGraph)
    assert graph.to_adjacency_list() == {0: [2], 1: [1, 3], 2: [2]}
    assert graph.num_vertices() == 3
    assert graph.num_edges() == 2


def test_load_as_undirected_graph(tmp_path):
    content = (
        "3 2\n"
        "2\n"
        "1 3\n"
        "2\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    graph = load_graph_from_metis(file_path, UndirectedGraph)
    assert graph.edges == [(1, 2), (2, 3)]


def test_string_and_file_give_same_graph(tmp_path):
    file_path = write_temp_graph(tmp_path, examples.MANUAL_2B.strip() + "\n")
    assert CSRGraph.from_metis_graph(file_path) == CSRGraph.from_metis_graph_str(
        examples.MANUAL_2B)


def test_from_lines_accepts_any_iterable():
    lines = iter(["3 2", "2", "1 3", "2"])
    graph = UndirectedGraph.from_metis_graph_lines(lines)
    assert graph.num_edges() == 2


def test_comment_lines_are_skipped(tmp_path):
    content = (
        "% Graph from the manual\n"
        "\n"
        "3 2\n"
        "% vertex 1\n"
        "2\n"
        "  % vertex 2\n"
        "1 3\n"
        "2\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    graph = load_graph_from_metis(file_path)
    assert graph.row_offsets.tolist() == [0, 1, 3, 4]


def test_blank_vertex_line_is_isolated_vertex(tmp_path):
    content = (
        "4 2\n"
        "2\n"
        "1 3\n"
        "2\n"
        "\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    graph = load_graph_from_metis(file_path)
    assert graph.num_vertices() == 4
    assert graph.neighbors(3).tolist() == []


def test_windows_line_endings(tmp_path):
    file_path = tmp_path / "graph.metis"
    file_path.write_bytes(b"3 2\r\n2\r\n1 3\r\n2\r\n")
    graph = UndirectedGraph.from_metis_graph(file_path)
    assert graph.edges == [(1, 2), (2, 3)]


def test_iter_content_lines_keeps_blank_lines_after_header():
    lines = list(iter_content_lines(["", "% c", "2 1", "2", "", "% c"]))
    assert lines == ["2 1", "2", ""]


def test_parse_lines_numbers_from_one():
    header = Header.parse("3 2")
    positions = [line.position for line in parse_lines(header, ["2", "1 3", "2"])]
    assert positions == [1, 2, 3]


def test_parse_lines_is_lazy():
    """Nothing after the first bad line is read."""
    header = Header.parse("3 2")
    consumed = []

    def source():
        for text in ["2", "9", "never read"]:
            consumed.append(text)
            yield text

    lines = parse_lines(header, source())
    assert next(lines).vertices == [2]
    with pytest.raises(InvalidLineError):
        next(lines)
    assert consumed == ["2", "9"]

# ---------- Error Handling Tests ----------


def test_empty_file(tmp_path):
    """Test that an empty METIS file raises a ValueError."""
    file_path = write_temp_graph(tmp_path, "")
    with pytest.raises(ValueError, match="Header is empty"):
        load_graph_from_metis(file_path)


def test_file_with_only_comments(tmp_path):
    """Test that a METIS file with only comment lines raises EmptyHeaderError."""
    content = (
        "% This is a comment\n"
        "% Another comment\n"
        "   % Indented comment\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    with pytest.raises(EmptyHeaderError):
        load_graph_from_metis(file_path)


def test_malformed_header(tmp_path):
    """Test that a METIS file with a one-token header is rejected."""
    content = (
        "3\n"
        "2\n"
        "1 3\n"
        "2\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    with pytest.raises(EdgeCountMissingError):
        load_graph_from_metis(file_path)


def test_malformed_vertex_line_missing_edge_weight(tmp_path):
    """A vertex line with a neighbour but no weight reports its position."""
    content = (
        "3 2 001\n"
        "2 10\n"
        "1 10 3\n"  # neighbour 3 has no weight
        "2 20\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    with pytest.raises(InvalidLineError, match="vertex 2") as excinfo:
        load_graph_from_metis(file_path)
    assert excinfo.value.position == 2
    assert excinfo.value.error == EdgeWeightMissingError()
    assert isinstance(excinfo.value.__cause__, EdgeWeightMissingError)


def test_out_of_range_neighbor(tmp_path):
    """Test that a METIS file with an out-of-range neighbor index is rejected."""
    content = (
        "3 2\n"
        "1 4\n"  # For vertex 1, neighbor '4' is invalid (graph has 3 nodes)
        "1 3\n"
        "2\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    with pytest.raises(InvalidLineError) as excinfo:
        load_graph_from_metis(file_path)
    assert excinfo.value.position == 1
    assert excinfo.value.error == VertexOutOfRangeError(4, 3)


def test_first_error_aborts(tmp_path):
    """Only the first malformed line is reported."""
    content = (
        "3 2\n"
        "2\n"
        "1 x\n"
        "7\n"
    )
    file_path = write_temp_graph(tmp_path, content)
    with pytest.raises(InvalidLineError) as excinfo:
        load_graph_from_metis(file_path, UndirectedGraph)
    assert excinfo.value.position == 2
    assert excinfo.value.line == "1 x"


def test_missing_file(tmp_path):
    missing = tmp_path / "missing.graph"
    with pytest.raises(GraphFileIOError) as excinfo:
        load_graph_from_metis(missing)
    assert isinstance(excinfo.value.error, FileNotFoundError)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_is_io_error(tmp_path):
    with pytest.raises(GraphFileIOError):
        UndirectedGraph.from_metis_graph(tmp_path)


def test_undecodable_file_is_io_error(tmp_path):
    file_path = tmp_path / "graph.metis"
    file_path.write_bytes(b"2 1\n2\n1 \xff\n")
    with pytest.raises(GraphFileIOError) as excinfo:
        CSRGraph.from_metis_graph(file_path)
    assert isinstance(excinfo.value.error, UnicodeDecodeError)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

# ---------- Performance / Large Graph Test ----------


def test_large_graph_performance():
    """
    Attempts to load the large METIS graph (PGPgiantcompo.graph) from the data directory.
    If the file is not available, the test is skipped.
    """
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    graph_path = os.path.join(base_dir, "data", "PGPgiantcompo.graph")
    if not os.path.exists(graph_path):
        pytest.skip(
            "Large graph file 'PGPgiantcompo.graph' not available in data directory.")

    graph = load_graph_from_metis(graph_path)
    assert graph.num_vertices() > 1000
    assert graph.row_offsets[-1] == len(graph.column_indices)


# ---------- Optional: Allow Running Tests Directly ----------
if __name__ == "__main__":
    pytest.main()
