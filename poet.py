"""
Bridge-word poet over a word-affinity graph.

The affinity graph has one vertex per lower-cased corpus word and an edge
w1 -> w2 whose weight counts how often w2 directly follows w1 in the corpus.
A poem is an input sentence with a bridge word spliced between each adjacent
pair (current, next) whenever the graph holds a two-hop path
current -> bridge -> next.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union
import logging

from corpus import read_corpus, tokenize
from graph import Graph
from weighted_graph import WeightedDirectedGraph

logger = logging.getLogger(__name__)


class AffinityPoet:
    """
    Poet holding an affinity graph built once from a corpus token stream.

    The graph is private and never mutated after construction; graph()
    hands out independent copies.
    """

    def __init__(self, corpus: Iterable[str]) -> None:
        self._graph: WeightedDirectedGraph[str] = WeightedDirectedGraph()

        words = iter(corpus)
        first = next(words, None)
        if first is not None:
            current = first.lower()
            self._graph.add(current)
            for word in words:
                nxt = word.lower()
                self._graph.add(nxt)
                existing = self._graph.targets(current).get(nxt, 0)
                self._graph.set(current, nxt, existing + 1)
                current = nxt

        logger.info(
            "affinity graph built: %d vertices, %d edges",
            len(self._graph),
            sum(1 for _ in self._graph.edges()),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> "AffinityPoet":
        """Build a poet from a corpus file; OSError propagates if it can't be read."""
        return cls(read_corpus(path, encoding=encoding))

    @classmethod
    def from_text(cls, text: str) -> "AffinityPoet":
        return cls(tokenize(text))

    def graph(self) -> WeightedDirectedGraph[str]:
        """Return a copy of the affinity graph sharing no state with the poet."""
        return _copy_graph(self._graph)

    def find_bridge_word(self, current: str, next_word: str) -> Optional[str]:
        """
        Return the first vertex m with edges current -> m and m -> next_word.

        Candidates are tried in the insertion order of current's targets, so
        the first match wins regardless of weight. Returns None if none exists.
        """
        current = current.lower()
        next_word = next_word.lower()
        for middle in self._graph.targets(current):
            if next_word in self._graph.targets(middle):
                return middle
        return None

    def poem(self, text: str) -> str:
        """Insert bridge words into text, keeping the input words' own case."""
        words = iter(tokenize(text))
        current = next(words, None)
        if current is None:
            return ""

        out: List[str] = [current]
        for nxt in words:
            bridge = self.find_bridge_word(current, nxt)
            if bridge is not None:
                out.append(bridge)
            out.append(nxt)
            current = nxt
        return " ".join(out)

    def __len__(self) -> int:
        """Number of distinct words in the affinity graph."""
        return len(self._graph)

    def __str__(self) -> str:
        return str(self.graph())


def _copy_graph(graph: Graph[str]) -> WeightedDirectedGraph[str]:
    result: WeightedDirectedGraph[str] = WeightedDirectedGraph()
    # Vertices first so the copy keeps the original vertex order.
    for vertex in graph.vertices():
        result.add(vertex)
    for vertex in graph.vertices():
        for target, weight in graph.targets(vertex).items():
            result.set(vertex, target, weight)
    return result
