class AdjacencyNode:
    """Per-vertex adjacency record.

    ``connections`` maps edge key -> outgoing Connection in insertion order (the
    order of ``Graph.get_edges(v)`` and of neighbour expansion in the
    algorithms). ``neighbours`` maps the neighbour's handle -> the same
    Connection. ``inbound`` maps a source handle -> the Connection pointing at
    this node, so vertex removal can strip incoming edges without a scan.
    Node identity is the integer ``handle``, never the vertex value.
    """

    __slots__ = ("object", "handle", "connections", "neighbours", "inbound")

    def __init__(self, obj, handle: int):
        self.object = obj
        self.handle = handle
        self.connections = {}
        self.neighbours = {}
        self.inbound = {}

    def get_edge(self, other):
        return self.neighbours.get(other.handle)

    def attach(self, other, connection):
        self.connections[connection.key] = connection
        self.neighbours[other.handle] = connection
        other.inbound[self.handle] = connection

    def detach(self, other):
        """Drop the record pointing at ``other``; return it, or None."""
        connection = self.neighbours.pop(other.handle, None)
        if connection is not None:
            del self.connections[connection.key]
            other.inbound.pop(self.handle, None)
        return connection

    def disconnect_all(self):
        self.connections.clear()
        self.neighbours.clear()
        self.inbound.clear()

    def reorder(self, position):
        """Sort outgoing records by ``position`` (edge key -> rank)."""
        ordered = sorted(self.connections.items(), key=lambda item: position[item[0]])
        self.connections = dict(ordered)
        self.neighbours = {c._node_b.handle: c for _, c in ordered}

    def __repr__(self):
        return f"AdjacencyNode({self.object!r}, handle={self.handle}, degree={len(self.connections)})"
