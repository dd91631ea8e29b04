"""
Directed, weighted graph abstraction for the affinity poet.

Vertices are any hashable, equality-comparable values.
Edges are directed: u -> v with a positive integer weight; 0 means no edge.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Dict, Generic, Hashable, TypeVar

V = TypeVar("V", bound=Hashable)


class Graph(ABC, Generic[V]):
    """Mutable directed graph with integer edge weights."""

    @abstractmethod
    def add(self, vertex: V) -> bool:
        """
        Add a vertex if it is absent.

        Returns: True if the vertex was newly added.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: V, target: V, weight: int) -> int:
        """
        Set the weight of source -> target, adding either vertex if needed.

        A weight of 0 removes the edge.

        Returns: the previous weight, 0 if the edge did not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: V) -> bool:
        """
        Remove a vertex together with every edge touching it.

        Returns: True if the vertex was present.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> AbstractSet[V]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: V) -> Dict[V, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[V, int], empty when the vertex is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: V) -> Dict[V, int]:
        """
        Incoming neighbours and edge weights for a given vertex.

        Returns: dict[V, int], empty when the vertex is unknown.
        """
        raise NotImplementedError
