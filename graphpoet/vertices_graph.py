"""Graph backed by a list of vertices, each owning its outgoing edges."""

from __future__ import annotations

from dataclasses import dataclass, field

from .graph import Graph


@dataclass
class Vertex:
    """A labelled vertex and its outgoing ``target -> weight`` map."""

    label: str
    edges: dict[str, int] = field(default_factory=dict)

    def targets(self) -> dict[str, int]:
        return dict(self.edges)


class VerticesGraph(Graph):
    """Vertex-list representation.

    ``_vertices`` maps each label to its ``Vertex`` in insertion order. An
    edge ``a -> b`` lives in ``a``'s ``edges`` map; removing a vertex also
    strips it from every other vertex's map.
    """

    def __init__(self) -> None:
        self._vertices: dict[str, Vertex] = {}

    def _check_vertex(self, vertex: Vertex) -> None:
        assert self._vertices.get(vertex.label) is vertex, f"duplicate vertex label {vertex.label!r}"
        for target, weight in vertex.edges.items():
            assert target in self._vertices, f"dangling target {target!r} from {vertex.label!r}"
            assert isinstance(weight, int) and weight > 0, f"bad weight {weight!r}"

    def _check_rep(self, label: str | None = None) -> None:
        """Check one vertex when ``label`` is given, otherwise the whole graph."""
        if label is not None:
            self._check_vertex(self._vertices[label])
            return
        for vertex in self._vertices.values():
            self._check_vertex(vertex)

    def has_vertex(self, label: str) -> bool:
        return label in self._vertices

    def add(self, label: str) -> bool:
        if label in self._vertices:
            return False
        self._vertices[label] = Vertex(label=label)
        self._check_rep(label)
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        self._validate_set(source, target, weight)
        vertex = self._vertices[source]
        if weight == 0:
            previous = vertex.edges.pop(target, 0)
        else:
            previous = vertex.edges.get(target, 0)
            vertex.edges[target] = weight
        self._check_rep(source)
        return previous

    def remove(self, label: str) -> bool:
        if label not in self._vertices:
            return False
        del self._vertices[label]
        for other in self._vertices.values():
            other.edges.pop(label, None)
        self._check_rep()
        return True

    def vertices(self) -> set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> dict[str, int]:
        return {
            vertex.label: vertex.edges[target]
            for vertex in self._vertices.values()
            if target in vertex.edges
        }

    def targets(self, source: str) -> dict[str, int]:
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.targets()

    def edges(self) -> list[tuple[str, str, int]]:
        return [
            (vertex.label, target, weight)
            for vertex in self._vertices.values()
            for target, weight in vertex.edges.items()
        ]
