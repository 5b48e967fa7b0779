"""Checks for the synthetic benchmark corpus generator."""

from __future__ import annotations

import importlib.util
import tempfile
import unittest
from pathlib import Path

import minigrep

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "generate_benchmark_corpus.py"


def load_generator():
    module_spec = importlib.util.spec_from_file_location("generate_benchmark_corpus", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)  # type: ignore[union-attr]
    return module


class BenchmarkCorpusTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.corpus = Path(self._tmpdir.name) / "nested" / "corpus.txt"
        self.generator = load_generator()

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def test_corpus_plants_needle_in_mixed_case(self) -> None:
        hits = self.generator.generate_corpus(self.corpus, 300, needle="needle", every=10)
        self.assertEqual(hits, 30)

        contents = self.corpus.read_text(encoding="utf-8")
        self.assertEqual(len(list(minigrep.iter_lines(contents))), 300)
        self.assertEqual(len(minigrep.search_case_insensitive("needle", contents)), 30)
        self.assertEqual(len(minigrep.search("NEEDLE", contents)), 10)
        self.assertEqual(len(minigrep.search("Needle", contents)), 10)

    def test_corpus_is_deterministic(self) -> None:
        self.generator.generate_corpus(self.corpus, 50)
        first = self.corpus.read_bytes()
        self.generator.generate_corpus(self.corpus, 50)
        self.assertEqual(self.corpus.read_bytes(), first)


if __name__ == "__main__":
    unittest.main()
