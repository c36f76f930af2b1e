"""Graph backed by a vertex set and a flat list of edge records."""

from __future__ import annotations

from dataclasses import dataclass

from .graph import Graph, format_edge


@dataclass
class Edge:
    """Directed weighted connection between two vertex labels."""

    source: str
    target: str
    weight: int

    def __str__(self) -> str:
        return format_edge(self.source, self.target, self.weight)


class EdgesGraph(Graph):
    """Edge-list representation.

    ``_vertices`` holds every label once; ``_edges`` is scanned linearly and
    keeps insertion order. Updating a weight keeps the edge in place,
    removing it and setting it again appends it at the end.
    """

    def __init__(self) -> None:
        self._vertices: set[str] = set()
        self._edges: list[Edge] = []

    def _check_rep(self) -> None:
        seen: set[tuple[str, str]] = set()
        for edge in self._edges:
            assert edge.source in self._vertices, f"dangling source {edge.source!r}"
            assert edge.target in self._vertices, f"dangling target {edge.target!r}"
            assert isinstance(edge.weight, int) and edge.weight > 0, f"bad weight on {edge}"
            key = (edge.source, edge.target)
            assert key not in seen, f"parallel edge {edge}"
            seen.add(key)

    def _find(self, source: str, target: str) -> Edge | None:
        for edge in self._edges:
            if edge.source == source and edge.target == target:
                return edge
        return None

    def has_vertex(self, label: str) -> bool:
        return label in self._vertices

    def add(self, label: str) -> bool:
        if label in self._vertices:
            return False
        self._vertices.add(label)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        self._validate_set(source, target, weight)
        edge = self._find(source, target)
        previous = edge.weight if edge is not None else 0
        if edge is not None and weight == 0:
            self._edges.remove(edge)
        elif edge is not None:
            edge.weight = weight
        elif weight > 0:
            self._edges.append(Edge(source=source, target=target, weight=weight))
        self._check_rep()
        return previous

    def remove(self, label: str) -> bool:
        if label not in self._vertices:
            return False
        self._edges = [edge for edge in self._edges if label not in (edge.source, edge.target)]
        self._vertices.discard(label)
        self._check_rep()
        return True

    def vertices(self) -> set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> dict[str, int]:
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: str) -> dict[str, int]:
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def edges(self) -> list[tuple[str, str, int]]:
        return [(edge.source, edge.target, edge.weight) for edge in self._edges]
