"""Graph representation registry."""

from __future__ import annotations

from .edges_graph import EdgesGraph
from .graph import Graph
from .vertices_graph import VerticesGraph

GRAPH_KINDS: dict[str, type[Graph]] = {
    "edges": EdgesGraph,
    "vertices": VerticesGraph,
}

DEFAULT_KIND = "vertices"


def get_graph_class(kind: str) -> type[Graph]:
    """Look up a graph representation by name."""
    try:
        return GRAPH_KINDS[kind]
    except KeyError:
        valid = ", ".join(sorted(GRAPH_KINDS))
        raise ValueError(f"unknown graph kind {kind!r}; expected one of: {valid}") from None


def empty_graph(kind: str = DEFAULT_KIND) -> Graph:
    """Return a new, empty graph of the requested representation."""
    return get_graph_class(kind)()
