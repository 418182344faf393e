from abc import ABC, abstractmethod
from typing import Dict, Set


class InvalidWeightError(ValueError):
    """Raised when an edge weight is negative."""


def validate_weight(weight: int) -> None:
    """
    Checks that a caller-supplied weight is usable by Graph.set.

    Args:
        weight: The requested edge weight.

    Raises:
        TypeError: If the weight is not an int (bools are rejected too).
        InvalidWeightError: If the weight is negative.
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Weight must be an int, got {type(weight).__name__}.")
    if weight < 0:
        raise InvalidWeightError(f"Weight {weight} must be non-negative.")


class Graph(ABC):
    """
    A mutable weighted directed graph with string vertex labels.

    Vertices are unique labels. Every edge carries a strictly positive integer
    weight; a weight of zero is never stored, it means "no edge". Every edge's
    source and target are vertices of the graph. Self-loops are allowed.

    Query results are fresh objects: mutating them, or mutating the graph
    afterwards, never changes what was returned.
    """

    @abstractmethod
    def add(self, label: str) -> bool:
        """
        Adds a vertex with no edges.

        Args:
            label: The vertex label.

        Returns:
            True if the vertex was added, False if it was already present.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: str, target: str, weight: int) -> int:
        """
        Adds, changes or removes the edge source -> target.

        Missing endpoints are added as vertices with no edges. A positive
        weight creates or overwrites the edge; a weight of zero removes it
        if present.

        Args:
            source: The label of the source vertex.
            target: The label of the target vertex.
            weight: The new weight, or 0 to remove the edge.

        Returns:
            The weight the edge had before this call, or 0 if it did not exist.

        Raises:
            TypeError: If the weight is not an int.
            InvalidWeightError: If the weight is negative.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, label: str) -> bool:
        """
        Removes a vertex and every edge into or out of it.

        Args:
            label: The vertex label.

        Returns:
            True if the vertex existed, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[str]:
        """Returns a snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: str) -> Dict[str, int]:
        """
        Returns every vertex with an edge into target, mapped to the edge weight.

        The result is empty if target has no incoming edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: str) -> Dict[str, int]:
        """
        Returns every vertex source has an edge to, mapped to the edge weight.

        The result is empty if source has no outgoing edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        """Returns a human-readable listing of the graph, for diagnostics only."""
        raise NotImplementedError

    def __contains__(self, label: str) -> bool:
        """Checks if a vertex exists in the graph."""
        return label in self.vertices()

    def __len__(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self.vertices())

    def __str__(self) -> str:
        return self.describe()
