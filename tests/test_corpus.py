from pathlib import Path

import pytest

from corpus import read_corpus, tokenize


def test_tokenize_splits_on_any_whitespace():
    assert list(tokenize("Seek\tto  explore\nnew synergies! ")) == [
        "Seek",
        "to",
        "explore",
        "new",
        "synergies!",
    ]
    assert list(tokenize("   ")) == []


def test_read_corpus_yields_tokens_across_lines(tmp_path: Path):
    path = tmp_path / "corpus.txt"
    path.write_text("To explore\n\n  strange new\nworlds\n", encoding="utf-8")

    assert list(read_corpus(path)) == ["To", "explore", "strange", "new", "worlds"]


def test_read_corpus_honours_encoding(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("café crème".encode("latin-1"))

    assert list(read_corpus(path, encoding="latin-1")) == ["café", "crème"]


def test_read_corpus_missing_file_raises_on_iteration(tmp_path: Path):
    tokens = read_corpus(tmp_path / "nope.txt")

    with pytest.raises(FileNotFoundError):
        next(tokens)


def test_tokenize_keeps_no_break_spaces_inside_tokens():
    text = "new\u00a0world 10\u2007000 a\u202fb\u3000c"

    assert list(tokenize(text)) == ["new\u00a0world", "10\u2007000", "a\u202fb", "c"]
