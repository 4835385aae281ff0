import logging
from functools import cmp_to_key

from ._helpers import (
    DEFAULT_WEIGHT,
    NOT_IN_GRAPH_MESSAGE,
    SAME_VERTEX_MESSAGE,
    InvalidArgumentError,
    UnsupportedOperationError,
    _check_vertex,
    _coerce_weight,
)
from ._IndexManager import VertexIndex
from ._Policy import policy_for
from ._Views import EdgeView, VertexView

logger = logging.getLogger(__name__)

# ===================================


class Graph:
    """In-memory weighted graph over arbitrary hashable vertices.

    Vertices are caller values (anything hashable except None). Each vertex
    owns an adjacency node; edges are Connections with ``float32`` weights,
    at most one per (ordered or unordered) pair, and never self loops.

    Parameters
    --
    vertices : iterable, optional
        Vertices to add on construction.
    directed : bool, default True
        Selects the edge policy. Directed graphs hold ordered-pair edges;
        undirected graphs mirror every edge at both endpoints.

    Notes
    -
    - Vertex and edge iteration follow insertion order until re-sorted with
      :meth:`sort_vertices` / :meth:`sort_edges`.
    - Collection queries return live read-only views, not copies.
    - Not thread safe. Searches must not overlap with mutation.

    See Also

    DirectedGraph, UndirectedGraph, simplegraphs.algorithms.engine.Algorithms

    """

    # Construction

    def __init__(self, vertices=None, directed=True):
        self._policy = policy_for(directed)
        self._registry = VertexIndex()
        self._edges = {}  # edge key -> canonical Connection, insertion ordered
        if vertices is not None:
            self.add_vertices(vertices)

    def _spawn(self):
        """Empty graph with the same edge policy."""
        return Graph(directed=self._policy.directed)

    # ==================== Vertices ====================

    def add_vertex(self, v):
        """Add a vertex.

        Parameters
        --
        v : hashable

        Returns
        ---
        bool
            True if the vertex was not already in the graph.

        Raises
        --
        InvalidArgumentError
            If ``v`` is None.

        """
        added = self._registry.add(v) is not None
        if added:
            logger.debug("add_vertex %r", v)
        return added

    def add_vertices(self, vertices):
        for v in vertices:
            self.add_vertex(v)

    def remove_vertex(self, v):
        """Remove a vertex and every edge incident to it.

        Returns
        ---
        bool
            True if the vertex was in the graph.

        """
        node = self._registry.get(v)
        if node is None:
            return False
        edges = self._edges
        for connection in list(node.inbound.values()):
            connection._node_a.detach(node)
            edges.pop(connection.key, None)
        for connection in node.connections.values():
            connection._node_b.inbound.pop(node.handle, None)
            edges.pop(connection.key, None)
        node.disconnect_all()
        self._registry.discard(node)
        logger.debug("remove_vertex %r", v)
        return True

    def remove_vertices(self, vertices):
        for v in vertices:
            self.remove_vertex(v)

    def remove_all_vertices(self):
        """Remove every vertex and edge."""
        for node in self._registry.nodes():
            node.disconnect_all()
        self._edges.clear()
        self._registry.clear()
        logger.debug("remove_all_vertices")

    def sort_vertices(self, key=None, *, cmp=None, reverse=False):
        """Reorder vertices in place.

        Parameters
        --
        key : callable, optional
            ``key(vertex)`` as for :func:`sorted`.
        cmp : callable, optional
            Two-argument comparator, used instead of ``key``.
        reverse : bool, default False

        Notes
        -
        Affects iteration of :meth:`get_vertices` and the start order of
        whole-graph algorithms such as :meth:`detect_cycle`.

        """
        if cmp is not None:
            key = cmp_to_key(cmp)
        self._registry.reorder(sorted(self._registry.vertices(), key=key, reverse=reverse))
        logger.debug("sort_vertices")

    # ==================== Edges ====================

    def add_edge(self, v, w, weight=DEFAULT_WEIGHT):
        """Add an edge from ``v`` to ``w``, or update the weight of an existing one.

        Parameters
        --
        v, w : hashable
            Registered vertices.
        weight : float, default 1.0
            Stored as ``numpy.float32``. Must be non-negative for the shortest
            path algorithms to be correct (not checked). Path costs are summed
            in single precision, so a path whose total exceeds the ``float32``
            range counts as unreachable.

        Returns
        ---
        Connection
            The edge. For undirected graphs, the canonical record.

        Raises
        --
        InvalidArgumentError
            If either vertex is None or not in the graph.
        UnsupportedOperationError
            If ``v == w``.
        TypeError
            If ``weight`` is not numeric.

        """
        _check_vertex(v)
        _check_vertex(w)
        if v == w:
            raise UnsupportedOperationError(SAME_VERTEX_MESSAGE)
        a, b = self._registry.pair(v, w)
        weight = _coerce_weight(weight)
        connection = self._policy.connect(self._edges, a, b, weight)
        logger.debug("add_edge %r -> %r (weight=%s)", v, w, weight)
        return connection

    def remove_edge(self, v, w):
        """Remove the edge from ``v`` to ``w`` (either way round when undirected).

        Returns
        ---
        bool
            True if the edge existed.

        Raises
        --
        InvalidArgumentError
            If either vertex is not in the graph.

        """
        a, b = self._registry.pair(v, w)
        removed = self._policy.disconnect(self._edges, a, b) is not None
        if removed:
            logger.debug("remove_edge %r -> %r", v, w)
        return removed

    def remove_connection(self, edge):
        """Remove an edge given a Connection obtained from this graph."""
        a, b = edge._node_a, edge._node_b
        if self._registry.get(a.object) is not a or self._registry.get(b.object) is not b:
            raise InvalidArgumentError(NOT_IN_GRAPH_MESSAGE)
        return self.remove_edge(a.object, b.object)

    def remove_all_edges(self):
        """Remove every edge, keeping the vertices."""
        for node in self._registry.nodes():
            node.disconnect_all()
        self._edges.clear()
        logger.debug("remove_all_edges")

    def sort_edges(self, key=None, *, cmp=None, reverse=False):
        """Reorder edges in place.

        Parameters
        --
        key : callable, optional
            ``key(connection)`` as for :func:`sorted`.
        cmp : callable, optional
            Two-argument comparator over Connections, used instead of ``key``.
        reverse : bool, default False

        Notes
        -
        The global edge order and every vertex's adjacency order are both
        rebuilt, so :meth:`get_edges` and the neighbour expansion order of
        later searches follow the new order.

        """
        if cmp is not None:
            key = cmp_to_key(cmp)
        ordered = sorted(self._edges.values(), key=key, reverse=reverse)
        self._edges = {c.key: c for c in ordered}
        position = {k: i for i, k in enumerate(self._edges)}
        for node in self._registry.nodes():
            node.reorder(position)
        logger.debug("sort_edges")

    # ==================== Queries ====================

    def contains(self, v):
        """True if ``v`` is a vertex of this graph."""
        return v in self._registry

    def edge_exists(self, v, w):
        """True if there is an edge from ``v`` to ``w``.

        Raises
        --
        InvalidArgumentError
            If either vertex is not in the graph.

        """
        a, b = self._registry.pair(v, w)
        return a.get_edge(b) is not None

    def get_edge(self, v, w):
        """The edge from ``v`` to ``w``, or None.

        Raises
        --
        InvalidArgumentError
            If either vertex is not in the graph.

        """
        a, b = self._registry.pair(v, w)
        return self._policy.lookup(self._edges, a, b)

    def get_edges(self, v=None):
        """Edges of the graph, or the outgoing edges of ``v``.

        Parameters
        --
        v : hashable, optional

        Returns
        ---
        EdgeView
            Live read-only view.

        Raises
        --
        InvalidArgumentError
            If ``v`` is given and not in the graph.

        """
        if v is None:
            return EdgeView(self)
        return EdgeView(self, self._registry.node(v))

    def get_vertices(self):
        """Live read-only view of the vertices."""
        return VertexView(self)

    def size(self):
        """Number of vertices."""
        return len(self._registry)

    def edge_count(self):
        """Number of edges (an undirected edge counts once)."""
        return len(self._edges)

    def is_directed(self):
        return self._policy.directed

    @property
    def edge_type(self):
        return self._policy.edge_type

    # ==================== Algorithms ====================

    @property
    def algorithms(self):
        """Algorithm engine bound to this graph."""
        if not hasattr(self, "_algorithms"):
            from ..algorithms.engine import Algorithms

            self._algorithms = Algorithms(self)
        return self._algorithms

    def find_shortest_path(self, start, target, heuristic=None):
        """Cheapest path from ``start`` to ``target``.

        Uses A* when ``heuristic`` is given, Dijkstra otherwise.

        Parameters
        --
        start, target : hashable
        heuristic : callable, optional
            ``heuristic(vertex, target) -> float``, an estimate of the
            remaining cost. It must not mutate the graph.

        Returns
        ---
        list
            Vertices from ``start`` to ``target`` inclusive, or ``[]`` if
            ``target`` is unreachable.

        Raises
        --
        InvalidArgumentError
            If either vertex is not in the graph.

        """
        a, b = self._registry.pair(start, target)
        return self.algorithms.find_shortest_path(a, b, heuristic)

    def find_minimum_distance(self, start, target):
        """Sum of the weights along a cheapest path, ``math.inf`` if unreachable."""
        a, b = self._registry.pair(start, target)
        return self.algorithms.find_minimum_distance(a, b)

    def is_reachable(self, start, target):
        a, b = self._registry.pair(start, target)
        return self.algorithms.is_reachable(a, b)

    def breadth_first_search(self, v, max_vertices=None, max_depth=None):
        """Bounded breadth-first search from ``v``.

        Parameters
        --
        v : hashable
        max_vertices : int, optional
            Maximum number of vertices to emit. Defaults to :meth:`size`.
        max_depth : int, optional
            Maximum edge distance from ``v``; vertices at this distance are
            emitted but not expanded. Defaults to :meth:`size`.

        Returns
        ---
        Graph
            The emitted vertices and the edges they were discovered through,
            in discovery order. Empty if either limit is ``<= 0``.

        Raises
        --
        InvalidArgumentError
            If ``v`` is not in the graph.

        """
        node = self._registry.node(v)
        max_vertices, max_depth = self._limits(max_vertices, max_depth)
        return self.algorithms.breadth_first_search(node, max_vertices, max_depth)

    def depth_first_search(self, v, max_vertices=None, max_depth=None):
        """Bounded depth-first search from ``v``; see :meth:`breadth_first_search`."""
        node = self._registry.node(v)
        max_vertices, max_depth = self._limits(max_vertices, max_depth)
        return self.algorithms.depth_first_search(node, max_vertices, max_depth)

    def detect_cycle(self):
        """True if the graph contains a cycle."""
        return self.algorithms.detect_cycle()

    def _limits(self, max_vertices, max_depth):
        n = self.size()
        return (n if max_vertices is None else max_vertices, n if max_depth is None else max_depth)

    # ==================== Dunder ====================

    def __len__(self):
        return self.size()

    def __contains__(self, v):
        return self.contains(v)

    def __iter__(self):
        return iter(self._registry.vertices())

    def __repr__(self):
        kind = "directed" if self.is_directed() else "undirected"
        return f"Graph({kind}, vertices={self.size()}, edges={self.edge_count()})"


def DirectedGraph(vertices=None):
    """Graph with ordered-pair edges."""
    return Graph(vertices, directed=True)


def UndirectedGraph(vertices=None):
    """Graph whose edges are unordered pairs, mirrored at both endpoints."""
    return Graph(vertices, directed=False)
