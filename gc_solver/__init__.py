"""
Graph Coloring SAT Solver Package

This package decides whether a graph can be colored with K colors by
encoding the problem as a CNF formula and searching it:
- CNF encoding of vertex/color variables
- Naive backtracking search over a parent-linked assignment history
- Z3 as a reference solver for cross-checking results
"""

__version__ = "0.1.0"
__author__ = "GC Solver Team"
