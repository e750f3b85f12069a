"""Adjacency-list text input for :class:`DirectedGraph`."""
from __future__ import annotations

from pydantic import validate_call

from .config import get_config
from .exceptions import InvalidArgumentError
from .graph import DirectedGraph
from .logger import logger

__all__ = ["parse", "from_lines"]


@validate_call(config={"arbitrary_types_allowed": True})
def parse(
    graph: DirectedGraph,
    lines: list[str],
    directed: bool | None = None,
    default_weight: int | None = None,
) -> DirectedGraph:
    """Fill ``graph`` from ``"start end [weight]"`` lines.

    Unknown labels become vertices. Unless ``directed``, every line also adds
    the reverse edge with the same weight. Blank lines are skipped.

    Parameters
    ----------
    graph:
        Graph to fill; string labels are used as vertex values.
    lines:
        Input lines.
    directed:
        Treat lines as one-way edges. Defaults to ``parsing.directed``.
    default_weight:
        Weight of lines without a third field. Defaults to
        ``parsing.default_weight``.

    Returns
    -------
    DirectedGraph
        The same ``graph``, for chaining.
    """
    cfg = get_config()
    if directed is None:
        directed = bool(cfg.parsing.directed)
    if default_weight is None:
        default_weight = int(cfg.parsing.default_weight)

    count = 0
    for number, line in enumerate(lines, start=1):
        labels = line.split()
        if not labels:
            continue
        if len(labels) < 2:
            raise InvalidArgumentError(f"line {number}: expected 'start end [weight]', got {line!r}")
        start, end = labels[0], labels[1]
        try:
            weight = int(labels[2]) if len(labels) > 2 else default_weight
        except ValueError as e:
            raise InvalidArgumentError(f"line {number}: weight {labels[2]!r} is not an integer") from e

        for label in (start, end):
            if not graph.contains_vertex(label):
                graph.set_vertex(label)
        graph.set_edge(start, end, weight)
        if not directed:
            graph.set_edge(end, start, weight)
        count += 1

    logger.debug("parsed {} edge lines ({})", count, "directed" if directed else "undirected")
    return graph


def from_lines(lines: list[str], directed: bool | None = None) -> DirectedGraph:
    """Build a new graph from adjacency-list lines."""
    return parse(DirectedGraph(), lines, directed=directed)
