from ._helpers import DEFAULT_WEIGHT, WEIGHT_DTYPE


class Connection:
    """A weighted arc between two adjacency nodes.

    Parameters
    --
    node_a : AdjacencyNode
        Source node of this record.
    node_b : AdjacencyNode
        Destination node of this record.
    key : tuple | frozenset
        Edge identity: ``(ha, hb)`` for directed edges, ``frozenset({ha, hb})``
        for undirected ones.
    weight : numpy.float32, optional

    Notes
    -
    - An undirected edge is stored as two records (``a -> b`` in ``a``'s
      adjacency, ``b -> a`` in ``b``'s), sharing the same key. The graph's
      edge policy keeps their weights equal.
    - Equality and hashing follow the endpoint nodes (by identity): ordered
      for directed edges, unordered for undirected ones. Both records of an
      undirected edge are the same logical edge, while edges of other graphs
      or of removed vertices never match, even when their handles coincide.

    """

    __slots__ = ("_node_a", "_node_b", "_key", "_weight")

    def __init__(self, node_a, node_b, key, weight=WEIGHT_DTYPE(DEFAULT_WEIGHT)):
        self._node_a = node_a
        self._node_b = node_b
        self._key = key
        self._weight = WEIGHT_DTYPE(weight)

    @property
    def a(self):
        """Source vertex."""
        return self._node_a.object

    @property
    def b(self):
        """Destination vertex."""
        return self._node_b.object

    @property
    def weight(self):
        return self._weight

    @property
    def key(self):
        return self._key

    @property
    def directed(self):
        return isinstance(self._key, tuple)

    def _set_weight(self, weight):
        self._weight = WEIGHT_DTYPE(weight)

    def _endpoints(self):
        if self.directed:
            return (self._node_a, self._node_b)
        return frozenset((self._node_a, self._node_b))

    def __eq__(self, other):
        if not isinstance(other, Connection):
            return NotImplemented
        return self._endpoints() == other._endpoints()

    def __hash__(self):
        return hash(self._endpoints())

    def __repr__(self):
        arrow = "->" if self.directed else "--"
        return f"Connection({self.a!r} {arrow} {self.b!r}, weight={float(self._weight):g})"
