#!/usr/bin/env python3
"""
benchmarks/profile_parser.py

This script profiles the METIS graph reader on a large synthetic graph
(100,000 vertices, see generate_graph.py). The profiling covers:
  - Function execution times using cProfile and pstats.
  - Memory usage using memory_profiler.

Both representations are profiled:
  - UndirectedGraph.from_metis_graph (edge list)
  - CSRGraph.from_metis_graph (xadj / adjncy)

The profiling results are saved into PROFILE_OUTPUT_FILE for later review.

Usage:
    python benchmarks/profile_parser.py
"""

import cProfile
import os
import pstats
import sys
from io import StringIO

from memory_profiler import memory_usage

from metisgraph.graph import CSRGraph, UndirectedGraph

# Set up file paths (adjust if necessary)
GRAPH_FILE_PATH = os.path.join(
    "data", "sample", "synthetic_large_graph_100k.graph")
PROFILE_OUTPUT_FILE = os.path.join("results", "parser_profile.txt")

GRAPH_CLASSES = [UndirectedGraph, CSRGraph]


def profile_execution_time(graph_cls, file_path):
    """
    Profiles the execution time of reading ``file_path`` into ``graph_cls``.

    Returns:
        tuple: (graph, stats) where stats is the sorted pstats report as a string.
    """
    profiler = cProfile.Profile()
    profiler.enable()
    graph = graph_cls.from_metis_graph(file_path)
    profiler.disable()

    s = StringIO()
    pstats.Stats(profiler, stream=s).sort_stats("cumtime").print_stats(20)
    return graph, s.getvalue()


def profile_memory_usage(func, *args, **kwargs):
    """
    Profiles the memory usage of a function call using memory_profiler.

    Returns:
        tuple: (result, max_memory, mem_usage) where:
            - result is the function's return value.
            - max_memory is the peak memory usage in MiB.
            - mem_usage is a list of memory usage samples.
    """
    mem_usage, result = memory_usage(
        (func, args, kwargs), retval=True, interval=0.1, timeout=None)
    return result, max(mem_usage), mem_usage


def write_profile_results(time_stats, mem_stats):
    """
    Writes the profiling results (execution time and memory usage) into PROFILE_OUTPUT_FILE.

    Parameters:
        time_stats (dict): Class name -> pstats report.
        mem_stats (dict): Class name -> {"peak_memory": float, "samples": list}.
    """
    os.makedirs(os.path.dirname(PROFILE_OUTPUT_FILE), exist_ok=True)
    with open(PROFILE_OUTPUT_FILE, "w") as f:
        for name, report in time_stats.items():
            f.write(f"===== {name} Execution Time Profiling =====\n\n")
            f.write(report)
            f.write("\n")
        f.write("===== Memory Usage Profiling =====\n\n")
        for name, value in mem_stats.items():
            f.write(f"Representation: {name}\n")
            f.write(f"  Peak Memory Usage: {value['peak_memory']:.2f} MiB\n")
            f.write(f"  Memory Usage Samples: {len(value['samples'])}\n\n")


def main():
    if not os.path.exists(GRAPH_FILE_PATH):
        sys.exit(f"Graph file not found: {GRAPH_FILE_PATH} (run generate_graph.py first)")

    time_stats = {}
    mem_stats = {}
    for graph_cls in GRAPH_CLASSES:
        name = graph_cls.__name__
        print(f"Profiling execution time of {name}.from_metis_graph()...")
        _, time_stats[name] = profile_execution_time(graph_cls, GRAPH_FILE_PATH)

        print(f"Profiling memory usage of {name}.from_metis_graph()...")
        _, peak, samples = profile_memory_usage(
            graph_cls.from_metis_graph, GRAPH_FILE_PATH)
        mem_stats[name] = {"peak_memory": peak, "samples": samples}

    write_profile_results(time_stats, mem_stats)
    print(f"Profiling completed. Results saved to {PROFILE_OUTPUT_FILE}")


if __name__ == "__main__":
    main()
