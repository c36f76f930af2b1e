"""Corpus loading and whitespace tokenization."""

from __future__ import annotations

import os
from pathlib import Path


class CorpusError(OSError):
    """Raised when a corpus file cannot be opened, read or decoded."""


def tokenize(text: str) -> list[str]:
    """Split on runs of whitespace. Casing and punctuation are kept."""
    return text.split()


def _read_text(path: str | os.PathLike[str], encoding: str) -> str:
    corpus_path = Path(path).expanduser()
    try:
        return corpus_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError(f"cannot read corpus {corpus_path}: {exc}") from exc


def read_corpus(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[str]:
    """Read a corpus file as one token stream; line breaks are whitespace."""
    return tokenize(_read_text(path, encoding))


def read_corpus_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[list[str]]:
    """Read a corpus file as one token list per non-blank line."""
    lines = [tokenize(line) for line in _read_text(path, encoding).splitlines()]
    return [tokens for tokens in lines if tokens]
