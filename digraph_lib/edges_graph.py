import logging
from typing import Dict, List, Set

from . import invariants
from .graph import Graph, validate_weight

logger = logging.getLogger(__name__)


class Edge:
    """
    A directed edge source -> target with a positive weight.

    The endpoints are fixed at construction; only the weight can change.
    """

    def __init__(self, source: str, target: str, weight: int) -> None:
        self._source = source
        self._target = target
        self._weight = weight
        self._check_rep()

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target

    @property
    def weight(self) -> int:
        return self._weight

    @weight.setter
    def weight(self, weight: int) -> None:
        """
        Updates the weight in place.

        Raises:
            ValueError: If the weight is not positive. Removing an edge is
                        up to the graph that holds it.
        """
        if weight <= 0:
            raise ValueError(f"Edge weight {weight} must be positive.")
        self._weight = weight
        self._check_rep()

    def connects(self, source: str, target: str) -> bool:
        return self._source == source and self._target == target

    def touches(self, label: str) -> bool:
        return self._source == label or self._target == label

    def _check_rep(self) -> None:
        if invariants.rep_checks_enabled():
            invariants.check_positive([self._weight])

    def __repr__(self) -> str:
        return f"Edge({self._source!r} -> {self._target!r}, weight={self._weight})"


class EdgesGraph(Graph):
    """
    Graph stored as a set of vertex labels and a flat list of Edge objects.

    There is no index by source or target, so every edge operation and both
    sources() and targets() scan the whole edge list.
    """

    def __init__(self) -> None:
        self._vertices: Set[str] = set()
        self._edges: List[Edge] = []

    def add(self, label: str) -> bool:
        if label in self._vertices:
            return False
        self._vertices.add(label)
        logger.debug("Added vertex %r", label)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        validate_weight(weight)
        self.add(source)
        self.add(target)

        for index, edge in enumerate(self._edges):
            if edge.connects(source, target):
                previous = edge.weight
                if weight == 0:
                    del self._edges[index]
                    logger.debug("Deleted edge %r -> %r", source, target)
                else:
                    edge.weight = weight
                self._check_rep()
                return previous

        if weight > 0:
            self._edges.append(Edge(source, target, weight))
            logger.debug("Created edge %r -> %r with weight %d", source, target, weight)
        self._check_rep()
        return 0

    def remove(self, label: str) -> bool:
        if label not in self._vertices:
            return False
        self._vertices.remove(label)
        kept = [edge for edge in self._edges if not edge.touches(label)]
        logger.debug("Removed vertex %r with %d edges", label, len(self._edges) - len(kept))
        self._edges = kept
        self._check_rep()
        return True

    def vertices(self) -> Set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> Dict[str, int]:
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: str) -> Dict[str, int]:
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        return len(self._edges)

    def describe(self) -> str:
        lines = ["EdgesGraph:", f"  Vertices: {sorted(self._vertices, key=repr)}", "  Edges:"]
        lines.extend(f"    {edge!r}" for edge in self._edges)
        return "\n".join(lines)

    def _check_rep(self) -> None:
        if not invariants.rep_checks_enabled():
            return
        invariants.check_positive(edge.weight for edge in self._edges)
        pairs = [(edge.source, edge.target) for edge in self._edges]
        invariants.check_endpoints(pairs, self._vertices)
        invariants.check_unique(pairs, kind="edge")
