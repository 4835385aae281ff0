from collections.abc import Collection


class VertexView(Collection):
    """Live read-only view of a graph's vertices.

    Parameters
    --
    graph : Graph
        Parent graph instance

    Notes
    -
    - Nothing is copied: iteration, ``len`` and membership read the graph's
      registry on every call, so later mutations (and re-sorting) show up.

    """

    __slots__ = ("_graph",)

    def __init__(self, graph):
        self._graph = graph

    def __iter__(self):
        return iter(self._graph._registry.vertices())

    def __len__(self):
        return len(self._graph._registry)

    def __contains__(self, v):
        return v in self._graph._registry

    def __repr__(self):
        return f"VertexView({list(self)!r})"


class EdgeView(Collection):
    """Live read-only view of edges.

    Parameters
    --
    graph : Graph
        Parent graph instance
    node : AdjacencyNode | None
        Restrict the view to the outgoing edges of this node. When None, the
        view covers the graph's global edge index (canonical connections).

    """

    __slots__ = ("_graph", "_node")

    def __init__(self, graph, node=None):
        self._graph = graph
        self._node = node

    def _source(self):
        if self._node is None:
            return self._graph._edges
        return self._node.connections

    def __iter__(self):
        return iter(self._source().values())

    def __len__(self):
        return len(self._source())

    def __contains__(self, edge):
        key = getattr(edge, "key", None)
        if key is None:
            return False
        found = self._source().get(key)
        return found is not None and found == edge

    def __repr__(self):
        return f"EdgeView(edges={len(self)})"
