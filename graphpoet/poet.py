"""Bridge-word poet built on a word-affinity graph.

The corpus becomes a graph whose vertices are lower-cased words and whose
edge ``a -> b`` counts how often ``a`` is immediately followed by ``b``.
A poem is the input sentence with, between each adjacent pair ``w1 w2``, the
word ``b`` maximising ``weight(w1 -> b) + weight(b -> w2)`` inserted.
"""

from __future__ import annotations

import logging
import os
import warnings
from collections.abc import Iterable
from dataclasses import dataclass

from .corpus import read_corpus, read_corpus_lines, tokenize
from .graph import Graph
from .registry import DEFAULT_KIND, empty_graph

logger = logging.getLogger(__name__)


@dataclass
class PoetConfig:
    """Knobs for graph construction and poem output."""

    representation: str = DEFAULT_KIND
    cross_line: bool = True
    preserve_case: bool = False
    encoding: str = "utf-8"


def build_word_graph(token_lines: Iterable[Iterable[str]], graph: Graph) -> Graph:
    """Accumulate adjacency counts from each token stream into ``graph``.

    Each stream is scanned independently; pairs never span two streams.
    Repeated adjacencies add to the existing weight.
    """
    for tokens in token_lines:
        previous: str | None = None
        for token in tokens:
            word = token.lower()
            graph.add(word)
            if previous is not None:
                weight = graph.targets(previous).get(word, 0)
                graph.set(previous, word, weight + 1)
            previous = word
    return graph


def find_bridge(graph: Graph, first: str, second: str) -> str | None:
    """Best ``b`` on a two-edge path ``first -> b -> second``, or None.

    Ties on combined weight go to the lexicographically smallest label.
    """
    if not graph.has_vertex(first) or not graph.has_vertex(second):
        return None
    into_second = graph.sources(second)
    scores = {
        bridge: weight + into_second[bridge]
        for bridge, weight in graph.targets(first).items()
        if bridge in into_second
    }
    if not scores:
        return None
    return min(scores, key=lambda bridge: (-scores[bridge], bridge))


class GraphPoet:
    """Generate poems from a corpus file using bridge words."""

    def __init__(self, corpus: str | os.PathLike[str], config: PoetConfig | None = None) -> None:
        cfg = config or PoetConfig()
        if cfg.cross_line:
            token_lines = [read_corpus(corpus, encoding=cfg.encoding)]
        else:
            token_lines = read_corpus_lines(corpus, encoding=cfg.encoding)
        self._setup(token_lines, cfg)

    @classmethod
    def from_text(cls, text: str, config: PoetConfig | None = None) -> "GraphPoet":
        """Build a poet from an in-memory corpus string."""
        cfg = config or PoetConfig()
        if cfg.cross_line:
            token_lines = [tokenize(text)]
        else:
            token_lines = [tokenize(line) for line in text.splitlines()]
        poet = cls.__new__(cls)
        poet._setup(token_lines, cfg)
        return poet

    def _setup(self, token_lines: list[list[str]], config: PoetConfig) -> None:
        self.config = config
        self._graph = build_word_graph(token_lines, empty_graph(config.representation))
        if not self._graph.vertices():
            warnings.warn("graphpoet: corpus contains no words", stacklevel=3)
        logger.debug(
            "word graph built: %d vertices, %d edges (%s)",
            len(self._graph.vertices()),
            self._graph.edge_count(),
            config.representation,
        )

    @property
    def graph(self) -> Graph:
        return self._graph

    def poem(self, text: str) -> str:
        """Return ``text`` with the best bridge word inserted between each pair."""
        tokens = tokenize(text)
        if not tokens:
            return ""
        words = [token.lower() for token in tokens]
        emitted = tokens if self.config.preserve_case else words

        output: list[str] = []
        for index in range(len(words) - 1):
            output.append(emitted[index])
            bridge = find_bridge(self._graph, words[index], words[index + 1])
            if bridge is not None:
                logger.debug("bridge %r between %r and %r", bridge, words[index], words[index + 1])
                output.append(bridge.lower())
        output.append(emitted[-1])
        return " ".join(output)
