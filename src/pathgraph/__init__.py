from .astar import Estimate, a_star, manhattan_distance
from .config import Config, configure, get_config, reset
from .exceptions import (
    ConfigurationError,
    CyclicGraphError,
    GraphError,
    InvalidArgumentError,
    NegativeCostCycleError,
    SpanningTreeError,
)
from .graph import DirectedGraph
from .grid import GridGraph
from .logger import console, logger
from .model import INFINITY, Edge, Position, Vertex
from .parsing import from_lines, parse
from .results import AlgorithmState, MinimumSpanTree, Pathway, PathwayCollection, Roadmap
from .shortest import bellman_ford, dijkstra, dijkstra_path, floyd_warshall
from .spanning import kruskals_minimum_spanning_tree, prims_minimum_spanning_tree
from .structures import DisjointSet, PriorityQueue
from .topology import tarjan, topological_sort
from .traversal import breadth_first_search, depth_first_search

__all__ = [
    "INFINITY",
    "Vertex",
    "Edge",
    "Position",
    "DirectedGraph",
    "GridGraph",
    "AlgorithmState",
    "Pathway",
    "PathwayCollection",
    "Roadmap",
    "MinimumSpanTree",
    "breadth_first_search",
    "depth_first_search",
    "dijkstra",
    "dijkstra_path",
    "bellman_ford",
    "floyd_warshall",
    "a_star",
    "Estimate",
    "manhattan_distance",
    "tarjan",
    "topological_sort",
    "prims_minimum_spanning_tree",
    "kruskals_minimum_spanning_tree",
    "parse",
    "from_lines",
    "PriorityQueue",
    "DisjointSet",
    "Config",
    "configure",
    "get_config",
    "reset",
    "GraphError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NegativeCostCycleError",
    "CyclicGraphError",
    "SpanningTreeError",
    "logger",
    "console",
]
