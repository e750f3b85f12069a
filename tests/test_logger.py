import pytest
from pathgraph import CyclicGraphError, DirectedGraph, configure, console, dijkstra, logger, tarjan
from pathgraph.logger import set_level


@pytest.fixture
def messages():
    collected: list[str] = []
    handler = logger.add(lambda message: collected.append(str(message)), level="DEBUG", format="{message}")
    yield collected
    logger.remove(handler)


def _rendered(level: str, text: str) -> str:
    with console.capture() as capture:
        logger.log(level, text)
    return capture.get()


def test_algorithms_log_debug_summary(messages):
    graph = DirectedGraph("ab", [("a", "b", 1)])
    dijkstra(graph, graph["a"])
    assert any("dijkstra from a reached 2 of 2 vertices" in m for m in messages)


def test_failures_are_logged_before_raising(messages):
    graph = DirectedGraph("ab", [("a", "b"), ("b", "a")])
    with pytest.raises(CyclicGraphError):
        tarjan(graph)
    assert any("closes a cycle" in m for m in messages)


def test_rich_handler_respects_level():
    assert "visible" in _rendered("INFO", "visible")
    assert "hidden" not in _rendered("DEBUG", "hidden")

    set_level("WARNING")
    assert "muted" not in _rendered("INFO", "muted")
    assert "loud" in _rendered("WARNING", "loud")


def test_configure_applies_logging_level():
    configure({"logging": {"level": "DEBUG"}})
    assert "detail" in _rendered("DEBUG", "detail")
