"""
Concrete directed, weighted graph implementation for the affinity poet.

Implements the Graph interface using an insertion-ordered adjacency map, so
every enumeration (vertices, targets, sources, edges) is deterministic.
"""

from typing import AbstractSet, Dict, Iterator, Tuple

from graph import Graph, V


class WeightedDirectedGraph(Graph[V]):
    """
    Directed, weighted graph backed by a vertex -> (target -> weight) mapping.

    At most one edge exists per ordered pair; weights are positive integers
    and an edge with weight 0 is simply not stored.
    """

    def __init__(self) -> None:
        self._adj: Dict[V, Dict[V, int]] = {}

    # --- Mutation API --------------------------------------------------------

    def add(self, vertex: V) -> bool:
        if vertex in self._adj:
            return False
        self._adj[vertex] = {}
        return True

    def set(self, source: V, target: V, weight: int) -> int:
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"edge weight must be an int, got {type(weight).__name__}")
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight}")

        self.add(source)
        self.add(target)
        out = self._adj[source]
        previous = out.get(target, 0)
        if weight == 0:
            out.pop(target, None)
        else:
            out[target] = weight
        return previous

    def remove(self, vertex: V) -> bool:
        if vertex not in self._adj:
            return False
        del self._adj[vertex]
        for out in self._adj.values():
            out.pop(vertex, None)
        return True

    # --- Queries -------------------------------------------------------------

    def vertices(self) -> AbstractSet[V]:
        # Snapshot keeps insertion order and is detached from later mutation.
        return dict.fromkeys(self._adj).keys()

    def targets(self, source: V) -> Dict[V, int]:
        return dict(self._adj.get(source, {}))  # defensive copy

    def sources(self, target: V) -> Dict[V, int]:
        return {src: out[target] for src, out in self._adj.items() if target in out}

    def edges(self) -> Iterator[Tuple[V, V, int]]:
        """Yield (source, target, weight) in source then target insertion order."""
        for src, out in self._adj.items():
            for dst, weight in out.items():
                yield src, dst, weight

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedDirectedGraph):
            return NotImplemented
        return self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = ["vertices: " + ", ".join(str(v) for v in self._adj)]
        lines.append("edges:")
        for src, dst, weight in self.edges():
            lines.append(f"  {src} -> {dst} ({weight})")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"WeightedDirectedGraph(vertices={len(self._adj)}, edges={sum(1 for _ in self.edges())})"
