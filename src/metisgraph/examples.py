"""Example graphs of the METIS Manual (Figures 2 and 3)."""

# Figure 2 (a): unweighted graph
MANUAL_2A = """
    7 11
    5 3 2
    1 3 4
    5 4 2 1
    2 3 6 7
    1 3 6
    5 4 7
    6 4
"""

# Figure 2 (b): weights on edges
MANUAL_2B = """
    7 11 001
    5 1 3 2 2 1
    1 1 3 2 4 1
    5 3 4 2 2 2 1 2
    2 1 3 2 6 2 7 5
    1 1 3 3 6 2
    5 2 4 2 7 6
    6 6 4 5
"""

# Figure 2 (c): weights on vertices and edges
MANUAL_2C = """
    7 11 011
    4 5 1 3 2 2 1
    2 1 1 3 2 4 1
    5 5 3 4 2 2 2 1 2
    3 2 1 3 2 6 2 7 5
    1 1 1 3 3 6 2
    6 5 2 4 2 7 6
    2 6 6 4 5
"""

# Figure 2 (d): multi-constraint graph, three weights per vertex
MANUAL_2D = """
    7 11 010 3
    1 2 0 5 3 2
    0 2 2 1 3 4
    4 1 1 5 4 2 1
    2 2 3 2 3 6 7
    1 1 1 1 3 6
    2 2 1 5 4 7
    1 2 1 6 4
"""

# Figure 3 (a): 5x3 grid, written with 0-based vertex numbers
MANUAL_3A = """
    15 22
    1 5
    0 2 6
    1 3 7
    2 4 8
    3 9
    0 6 10
    1 5 7 11
    2 6 8 12
    3 7 9 13
    4 8 14
    5 11
    6 10 12
    7 11 13
    8 12 14
    9 13
"""
