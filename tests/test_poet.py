from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest

from graphpoet import (
    GRAPH_KINDS,
    CorpusError,
    GraphPoet,
    PoetConfig,
    VerticesGraph,
    build_word_graph,
    empty_graph,
    find_bridge,
)

FIXTURES = Path(__file__).parent / "fixtures" / "poet"


@pytest.fixture(params=sorted(GRAPH_KINDS))
def kind(request) -> str:
    return request.param


def test_build_word_graph_accumulates(kind):
    graph = build_word_graph([["a", "b", "a", "b", "a", "b"]], empty_graph(kind))
    assert graph.targets("a") == {"b": 3}
    assert graph.targets("b") == {"a": 2}


def test_build_word_graph_lowercases(kind):
    graph = build_word_graph([["The", "cat", "THE", "Cat"]], empty_graph(kind))
    assert graph.vertices() == {"the", "cat"}
    assert graph.targets("the") == {"cat": 2}
    assert graph.targets("cat") == {"the": 1}


def test_build_word_graph_keeps_isolated_words(kind):
    graph = build_word_graph([["alone"], []], empty_graph(kind))
    assert graph.vertices() == {"alone"}
    assert graph.edges() == []


def test_build_word_graph_streams_do_not_pair(kind):
    graph = build_word_graph([["a", "b"], ["c", "d"]], empty_graph(kind))
    assert "c" not in graph.targets("b")


def test_find_bridge_picks_max_combined_weight(kind):
    graph = empty_graph(kind)
    for label in ("x", "y", "p", "q"):
        graph.add(label)
    graph.set("x", "p", 1)
    graph.set("p", "y", 1)
    graph.set("x", "q", 2)
    graph.set("q", "y", 3)
    assert find_bridge(graph, "x", "y") == "q"


def test_find_bridge_tie_goes_to_smallest_label(kind):
    graph = empty_graph(kind)
    for label in ("x", "y", "beta", "alpha"):
        graph.add(label)
    graph.set("x", "beta", 3)
    graph.set("beta", "y", 1)
    graph.set("x", "alpha", 1)
    graph.set("alpha", "y", 3)
    assert find_bridge(graph, "x", "y") == "alpha"


def test_find_bridge_none(kind):
    graph = empty_graph(kind)
    graph.add("x")
    graph.add("y")
    graph.set("x", "y", 1)
    assert find_bridge(graph, "x", "y") is None
    assert find_bridge(graph, "x", "missing") is None
    assert find_bridge(graph, "missing", "y") is None


def test_find_bridge_through_self_loop(kind):
    graph = empty_graph(kind)
    graph.add("x")
    graph.add("y")
    graph.set("x", "x", 1)
    graph.set("x", "y", 1)
    assert find_bridge(graph, "x", "y") == "x"


def test_poem_inserts_bridge_words(kind):
    poet = GraphPoet(FIXTURES / "seven-words.txt", PoetConfig(representation=kind))
    assert poet.poem("Seek to explore new and exciting synergies!") == (
        "seek to explore strange new life and exciting synergies!"
    )


def test_poem_no_bridge_needed(kind):
    poet = GraphPoet(FIXTURES / "mugar-omni-theater.txt", PoetConfig(representation=kind))
    assert poet.poem("Test of the system.") == "test of the system."


def test_poem_unknown_words_pass_through(kind):
    poet = GraphPoet(FIXTURES / "seven-words.txt", PoetConfig(representation=kind))
    assert poet.poem("Hello unknown world!") == "hello unknown world!"
    assert poet.poem("This is a test.") == "this is a test."


def test_poem_single_word():
    poet = GraphPoet(FIXTURES / "seven-words.txt")
    assert poet.poem("Word") == "word"


def test_poem_blank_input():
    poet = GraphPoet(FIXTURES / "seven-words.txt")
    assert poet.poem("") == ""
    assert poet.poem("   \n\t") == ""


def test_poem_normalizes_whitespace():
    poet = GraphPoet(FIXTURES / "seven-words.txt")
    assert poet.poem("  explore \n new  ") == "explore strange new"


def test_poem_preserve_case():
    poet = GraphPoet(FIXTURES / "seven-words.txt", PoetConfig(preserve_case=True))
    assert poet.poem("Seek to EXPLORE New") == "Seek to EXPLORE strange New"


def test_cross_line_adjacency():
    poet = GraphPoet(FIXTURES / "hamlet.txt")
    assert poet.graph.targets("be") == {"or": 1, "that": 1}
    assert poet.graph.targets("to") == {"be": 2}
    assert poet.poem("not be") == "not to be"


def test_per_line_adjacency():
    poet = GraphPoet(FIXTURES / "hamlet.txt", PoetConfig(cross_line=False))
    assert poet.graph.targets("be") == {"or": 1}
    assert poet.poem("to that") == "to that"


def test_representations_build_same_graph():
    edges = GraphPoet(FIXTURES / "hamlet.txt", PoetConfig(representation="edges")).graph
    vertices = GraphPoet(FIXTURES / "hamlet.txt", PoetConfig(representation="vertices")).graph
    assert edges.vertices() == vertices.vertices()
    for label in edges.vertices():
        assert edges.targets(label) == vertices.targets(label)
        assert edges.sources(label) == vertices.sources(label)


def test_from_text_matches_file():
    text = (FIXTURES / "seven-words.txt").read_text(encoding="utf-8")
    poet = GraphPoet.from_text(text)
    assert poet.poem("explore new and") == "explore strange new life and"


def test_from_text_per_line():
    poet = GraphPoet.from_text("a b\nc d", PoetConfig(cross_line=False))
    assert poet.graph.targets("b") == {}


def test_unknown_representation():
    with pytest.raises(ValueError, match="unknown graph kind"):
        GraphPoet.from_text("a b", PoetConfig(representation="matrix"))


def test_missing_corpus_propagates(tmp_path: Path):
    with pytest.raises(CorpusError):
        GraphPoet(tmp_path / "absent.txt")


def test_bridge_is_logged(caplog):
    poet = GraphPoet(FIXTURES / "seven-words.txt")
    with caplog.at_level(logging.DEBUG, logger="graphpoet.poet"):
        poet.poem("explore new")
    assert any("strange" in record.getMessage() for record in caplog.records)


def test_find_bridge_does_not_snapshot_vertices():
    class NoSnapshotGraph(VerticesGraph):
        def vertices(self) -> set[str]:
            raise AssertionError("vertices() should not be called")

    graph = build_word_graph([["explore", "strange", "new"]], NoSnapshotGraph())
    assert find_bridge(graph, "explore", "new") == "strange"
    assert find_bridge(graph, "explore", "missing") is None


@pytest.mark.parametrize("text", ["", "  \n\t "])
def test_empty_corpus_warns_from_text(text):
    with pytest.warns(UserWarning, match="contains no words") as record:
        poet = GraphPoet.from_text(text)
    assert record[0].filename == __file__
    assert poet.poem("any words") == "any words"


def test_empty_corpus_warns_from_file(tmp_path: Path):
    path = tmp_path / "empty.txt"
    path.write_text("\n   \n", encoding="utf-8")
    with pytest.warns(UserWarning, match="contains no words") as record:
        GraphPoet(path, PoetConfig(cross_line=False))
    assert record[0].filename == __file__


def test_large_corpus_builds_same_graph_in_both_representations():
    rng = random.Random(7)
    words = [f"w{index}" for index in range(300)]
    tokens = [rng.choice(words) for _ in range(2000)]

    graphs = {kind: build_word_graph([tokens], empty_graph(kind)) for kind in sorted(GRAPH_KINDS)}
    edges, vertices = graphs["edges"], graphs["vertices"]

    assert edges.vertices() == vertices.vertices() == set(tokens)
    assert sum(weight for _, _, weight in vertices.edges()) == len(tokens) - 1
    assert sorted(edges.edges()) == sorted(vertices.edges())
    for label in vertices.vertices():
        assert edges.targets(label) == vertices.targets(label)
        assert edges.sources(label) == vertices.sources(label)

    sentence = " ".join(tokens[:40:3])
    poems = {
        kind: GraphPoet.from_text(" ".join(tokens), PoetConfig(representation=kind)).poem(sentence)
        for kind in sorted(GRAPH_KINDS)
    }
    assert poems["edges"] == poems["vertices"]
