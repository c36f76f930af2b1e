"""Thin, stdlib-only CLI wrapper for GraphPoet."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .corpus import CorpusError
from .poet import GraphPoet, PoetConfig
from .registry import DEFAULT_KIND, GRAPH_KINDS

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphpoet")
    sub = parser.add_subparsers(dest="command", required=True)

    poem = sub.add_parser("poem", help="insert bridge words into TEXT")
    poem.add_argument("text", nargs="+")
    poem.add_argument("--preserve-case", action="store_true", help="keep the input's casing")
    _add_corpus_args(poem)

    graph = sub.add_parser("graph", help="print the word-affinity graph built from a corpus")
    _add_corpus_args(graph)
    return parser


def _add_corpus_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--corpus", required=True)
    parser.add_argument("--representation", choices=sorted(GRAPH_KINDS), default=DEFAULT_KIND)
    parser.add_argument("--per-line", action="store_true", help="do not pair words across line breaks")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("graphpoet")
    package_logger.setLevel(logging.DEBUG)
    if not package_logger.handlers:
        package_logger.addHandler(logging.StreamHandler(sys.stderr))


def _load_poet(args: argparse.Namespace) -> GraphPoet:
    config = PoetConfig(
        representation=args.representation,
        cross_line=not args.per_line,
        preserve_case=getattr(args, "preserve_case", False),
        encoding=args.encoding,
    )
    logger.debug("loading corpus %s", args.corpus)
    return GraphPoet(args.corpus, config)


def cmd_poem(args: argparse.Namespace) -> int:
    poet = _load_poet(args)
    text = " ".join(args.text)
    result = poet.poem(text)
    if args.json:
        print(json.dumps({"input": text, "poem": result, "vertices": len(poet.graph.vertices())}, indent=2))
    else:
        print(result)
    return 0


def cmd_graph(args: argparse.Namespace) -> int:
    poet = _load_poet(args)
    graph = poet.graph
    if args.json:
        payload = {
            "vertices": len(graph.vertices()),
            "edges": graph.edge_count(),
            "representation": args.representation,
        }
        print(json.dumps(payload, indent=2))
    else:
        sys.stdout.write(str(graph))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "poem":
            return cmd_poem(args)
        if args.command == "graph":
            return cmd_graph(args)
    except CorpusError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
