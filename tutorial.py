"""pathgraph usage tutorial
=========================

This single script walks through a quick start on a small road network and
then demonstrates grid search, ordering, spanning trees and configuration.
"""

from __future__ import annotations

from pathgraph import (
    GridGraph,
    Position,
    a_star,
    configure,
    dijkstra,
    from_lines,
    kruskals_minimum_spanning_tree,
    manhattan_distance,
    topological_sort,
)
from pathgraph.logger import console


# --------------------------------------------------------------
# Quick start
# --------------------------------------------------------------
ROADS = """
A B 3
A F 2
B C 17
B D 16
C D 8
D E 11
E F 1
E H 5
H J 13
D I 4
I J 9
"""


def quick_start() -> None:
    graph = from_lines(ROADS.splitlines())
    paths = dijkstra(graph, graph["A"])
    for target in ("D", "J"):
        pathway = paths[graph[target]]
        console.print(f"A -> {target}: {' '.join(pathway.values)} ({pathway.distance})")

    tree = kruskals_minimum_spanning_tree(graph)
    console.print(f"spanning tree weight: {tree.distance}")


# --------------------------------------------------------------
# Advanced topics
# --------------------------------------------------------------
settings = {"grid": {"diagonals": False}, "logging": {"level": "DEBUG"}}


def grid_search() -> None:
    configure(settings)
    grid = GridGraph(5, 3)
    wall = {(0, 2), (1, 2)}
    for row in range(grid.height):
        for column in range(grid.width):
            if (row, column) not in wall:
                grid.set_vertex(Position(row, column), Position(row, column))

    pathway = a_star(grid, grid[0, 0], grid[0, 4], manhattan_distance)
    console.print(f"around the wall in {pathway.distance} steps:")
    for position in pathway.values:
        console.print(f"  {tuple(position)}")


def build_order() -> None:
    steps = from_lines(["fetch compile", "compile link", "configure compile", "link package"], directed=True)
    console.print("build order:", " -> ".join(v.value for v in topological_sort(steps)))


if __name__ == "__main__":
    quick_start()
    grid_search()
    build_order()
