import logging

from .graph import Graph, InvalidWeightError
from .vertices_graph import Vertex, VerticesGraph
from .edges_graph import Edge, EdgesGraph
from .factory import KINDS, empty
from .invariants import rep_checks, rep_checks_enabled, set_rep_checks

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Graph", "InvalidWeightError",
    "Vertex", "VerticesGraph",
    "Edge", "EdgesGraph",
    "KINDS", "empty",
    "rep_checks", "rep_checks_enabled", "set_rep_checks",
]
