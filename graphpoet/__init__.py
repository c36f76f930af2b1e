"""GraphPoet public API."""

from .corpus import CorpusError, read_corpus, read_corpus_lines, tokenize
from .edges_graph import Edge, EdgesGraph
from .graph import Graph
from .poet import GraphPoet, PoetConfig, build_word_graph, find_bridge
from .registry import DEFAULT_KIND, GRAPH_KINDS, empty_graph, get_graph_class
from .vertices_graph import Vertex, VerticesGraph

__all__ = [
    "Graph",
    "Edge",
    "EdgesGraph",
    "Vertex",
    "VerticesGraph",
    "GRAPH_KINDS",
    "DEFAULT_KIND",
    "empty_graph",
    "get_graph_class",
    "CorpusError",
    "tokenize",
    "read_corpus",
    "read_corpus_lines",
    "GraphPoet",
    "PoetConfig",
    "build_word_graph",
    "find_bridge",
]

__version__ = "1.0.0"
