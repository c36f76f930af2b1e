"""Directed weighted graph contract shared by every representation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def format_edge(source: str, target: str, weight: int) -> str:
    return f"({source} -> {target}, weight: {weight})"


class Graph(ABC):
    """A mutable directed graph with positive integer edge weights.

    Vertices are unique labels. An edge is an ordered ``(source, target)``
    pair with a weight > 0; a weight of 0 means the edge does not exist, so
    ``set(a, b, 0)`` is how edges are removed. Self-loops are allowed.

    Every accessor returns a fresh copy, never a view of internal storage.
    """

    @abstractmethod
    def add(self, label: str) -> bool:
        """Add a vertex with no edges. Returns False if it already exists."""
        ...

    @abstractmethod
    def set(self, source: str, target: str, weight: int) -> int:
        """Create, update or remove the edge ``source -> target``.

        Args:
            source: existing vertex label.
            target: existing vertex label.
            weight: new weight; 0 removes the edge.

        Returns:
            The previous weight, or 0 if there was no such edge.

        Raises:
            ValueError: if ``weight`` is negative or not an int, or either
                endpoint is not a vertex. The graph is left unchanged.
        """
        ...

    @abstractmethod
    def remove(self, label: str) -> bool:
        """Remove a vertex and every edge touching it. Returns False if absent."""
        ...

    @abstractmethod
    def vertices(self) -> set[str]:
        """Snapshot of all vertex labels."""
        ...

    @abstractmethod
    def sources(self, target: str) -> dict[str, int]:
        """Map of ``source -> weight`` for every edge into ``target``."""
        ...

    @abstractmethod
    def targets(self, source: str) -> dict[str, int]:
        """Map of ``target -> weight`` for every edge out of ``source``."""
        ...

    @abstractmethod
    def edges(self) -> list[tuple[str, str, int]]:
        """All edges as ``(source, target, weight)`` in rendering order."""
        ...

    @abstractmethod
    def has_vertex(self, label: str) -> bool:
        """True if ``label`` is a vertex."""
        ...

    def edge_count(self) -> int:
        return len(self.edges())

    def _validate_set(self, source: str, target: str, weight: Any) -> None:
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError("weight must be an integer")
        if weight < 0:
            raise ValueError(f"weight must be >= 0, got {weight}")
        for label in (source, target):
            if not self.has_vertex(label):
                raise ValueError(f"unknown vertex: {label!r}")

    def __str__(self) -> str:
        return "".join(f"{format_edge(*edge)}\n" for edge in self.edges())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self.vertices())}, edges={self.edge_count()})"
