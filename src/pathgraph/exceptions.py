"""Custom exception hierarchy for the pathgraph package."""

class GraphError(Exception):
    """Base class for all pathgraph exceptions."""
    pass

class ConfigurationError(GraphError):
    """Raised when there is an issue with configuration parsing or structure."""
    pass

class InvalidArgumentError(GraphError, ValueError):
    """Raised when a vertex, position or capability argument is missing or foreign."""
    pass

class NegativeCostCycleError(GraphError):
    """Raised when Bellman-Ford still finds an improving edge after |V|-1 rounds."""
    pass

class CyclicGraphError(GraphError):
    """Raised when topological ordering meets an edge back to an in-progress vertex."""
    pass

class SpanningTreeError(GraphError):
    """Raised when the edge supply runs out before |V|-1 tree edges were selected."""
    pass
