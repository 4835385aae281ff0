from .paths import ShortestPaths
from .traversal import Traversal


class Algorithms(ShortestPaths, Traversal):
    """Algorithm engine bound to one graph.

    Operates on adjacency nodes; the owning Graph resolves vertex values and
    validates arguments before delegating here. Each call builds its own
    scratch table, but the engine is still not meant for concurrent use, and
    mutating the graph during a run is undefined.
    """

    def __init__(self, graph):
        self._G = graph

    def __repr__(self):
        return f"Algorithms({self._G!r})"
