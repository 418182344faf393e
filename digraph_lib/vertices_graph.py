import logging
from typing import Dict, List, Optional, Set

from . import invariants
from .graph import Graph, validate_weight

logger = logging.getLogger(__name__)


class Vertex:
    """
    A labelled vertex that owns its outgoing edges.

    The label is fixed for the vertex's lifetime. Outgoing edges are kept as a
    target label -> positive weight mapping; a weight of zero is never stored.
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._edges: Dict[str, int] = {}  # target -> weight

    @property
    def label(self) -> str:
        return self._label

    def edges(self) -> Dict[str, int]:
        """Returns a copy of the outgoing edges as target -> weight."""
        return dict(self._edges)

    def out_degree(self) -> int:
        """Returns the number of outgoing edges."""
        return len(self._edges)

    def get_edge(self, target: str) -> Optional[int]:
        """Returns the weight of the edge to target, or None if there is none."""
        return self._edges.get(target)

    def set_edge(self, target: str, weight: int) -> int:
        """
        Sets the weight of the edge to target.

        Args:
            target: The target vertex label.
            weight: The new weight; 0 removes the edge.

        Returns:
            The previous weight, or 0 if there was no edge.
        """
        previous = self._edges.get(target, 0)
        if weight == 0:
            self._edges.pop(target, None)
        else:
            self._edges[target] = weight
        self._check_rep()
        return previous

    def remove_edge(self, target: str) -> bool:
        """Removes the edge to target. Returns whether there was one."""
        removed = self._edges.pop(target, None) is not None
        self._check_rep()
        return removed

    def _check_rep(self) -> None:
        if invariants.rep_checks_enabled():
            invariants.check_positive(self._edges.values())

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, edges={self._edges!r})"


class VerticesGraph(Graph):
    """
    Graph stored as a list of Vertex objects, each holding its outgoing edges.

    Looking up the targets of a vertex only touches that vertex, while finding
    the sources of a vertex has to look at every vertex's edges.
    """

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []  # insertion order

    def _find(self, label: str) -> Optional[Vertex]:
        for vertex in self._vertices:
            if vertex.label == label:
                return vertex
        return None

    def _find_or_create(self, label: str) -> Vertex:
        vertex = self._find(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices.append(vertex)
            logger.debug("Added vertex %r", label)
        return vertex

    def add(self, label: str) -> bool:
        if self._find(label) is not None:
            return False
        self._vertices.append(Vertex(label))
        logger.debug("Added vertex %r", label)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        validate_weight(weight)
        source_vertex = self._find_or_create(source)
        self._find_or_create(target)

        previous = source_vertex.set_edge(target, weight)
        if previous != weight:
            logger.debug("Edge %r -> %r: %d -> %d", source, target, previous, weight)
        self._check_rep()
        return previous

    def remove(self, label: str) -> bool:
        removed: Optional[Vertex] = None
        dropped = 0
        for vertex in self._vertices:
            if vertex.label == label:
                removed = vertex
            elif vertex.remove_edge(label):
                dropped += 1

        if removed is None:
            return False
        self._vertices.remove(removed)
        logger.debug(
            "Removed vertex %r with %d outgoing and %d incoming edges",
            label, removed.out_degree(), dropped,
        )
        self._check_rep()
        return True

    def vertices(self) -> Set[str]:
        return {vertex.label for vertex in self._vertices}

    def sources(self, target: str) -> Dict[str, int]:
        result: Dict[str, int] = {}
        for vertex in self._vertices:
            weight = vertex.get_edge(target)
            if weight is not None:
                result[vertex.label] = weight
        return result

    def targets(self, source: str) -> Dict[str, int]:
        vertex = self._find(source)
        if vertex is None:
            return {}
        return vertex.edges()

    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        return sum(vertex.out_degree() for vertex in self._vertices)

    def describe(self) -> str:
        lines = ["VerticesGraph:"]
        lines.extend(f"  {vertex!r}" for vertex in self._vertices)
        return "\n".join(lines)

    def _check_rep(self) -> None:
        if not invariants.rep_checks_enabled():
            return
        labels = [vertex.label for vertex in self._vertices]
        invariants.check_unique(labels)
        present = set(labels)
        for vertex in self._vertices:
            edges = vertex.edges()
            invariants.check_positive(edges.values())
            invariants.check_endpoints(((vertex.label, target) for target in edges), present)
