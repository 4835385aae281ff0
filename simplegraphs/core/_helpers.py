from enum import Enum
from numbers import Real

import numpy as np


class EdgeType(Enum):
    DIRECTED = "DIRECTED"
    UNDIRECTED = "UNDIRECTED"


# Weights are single precision throughout (edge records and path costs)
WEIGHT_DTYPE = np.float32
DEFAULT_WEIGHT = 1.0

NULL_VERTEX_MESSAGE = "Vertices cannot be None"
SAME_VERTEX_MESSAGE = "Self loops are not allowed"
NOT_IN_GRAPH_MESSAGE = "At least one vertex is not in the graph"


class GraphError(Exception):
    """Base class for errors raised by simplegraphs."""


class InvalidArgumentError(GraphError, ValueError):
    """A vertex is None or is not registered in the graph."""


class UnsupportedOperationError(GraphError, ValueError):
    """The graph model does not allow the requested edge (self loops)."""


def _coerce_weight(weight):
    """Validate a caller weight and narrow it to ``WEIGHT_DTYPE``.

    Booleans are rejected even though they are ``numbers.Real``.
    """
    if isinstance(weight, bool) or not isinstance(weight, (Real, np.floating, np.integer)):
        raise TypeError(f"weight must be numeric, got {type(weight).__name__}")
    return WEIGHT_DTYPE(weight)


def _check_vertex(v):
    if v is None:
        raise InvalidArgumentError(NULL_VERTEX_MESSAGE)
