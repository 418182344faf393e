from typing import Callable, Dict

from .edges_graph import EdgesGraph
from .graph import Graph
from .vertices_graph import VerticesGraph

_REPRESENTATIONS: Dict[str, Callable[[], Graph]] = {
    "vertices": VerticesGraph,
    "edges": EdgesGraph,
}

KINDS = tuple(_REPRESENTATIONS)


def empty(kind: str = "vertices") -> Graph:
    """
    Creates a new graph with no vertices.

    Args:
        kind: Which representation to use, "vertices" (each vertex owns its
              outgoing edges) or "edges" (a flat edge list).

    Returns:
        An empty graph.

    Raises:
        ValueError: If kind is not a known representation.
    """
    if kind not in _REPRESENTATIONS:
        raise ValueError(f"Unknown graph representation: {kind}.")
    return _REPRESENTATIONS[kind]()
