"""Edge policies: the only place directed and undirected graphs differ."""

from ._Connection import Connection
from ._helpers import EdgeType


class DirectedPolicy:
    """Ordered-pair edges, one adjacency record per edge."""

    edge_type = EdgeType.DIRECTED
    directed = True

    def edge_key(self, a, b):
        return (a.handle, b.handle)

    def connect(self, edges, a, b, weight):
        connection = a.get_edge(b)
        if connection is None:
            connection = Connection(a, b, self.edge_key(a, b), weight)
            a.attach(b, connection)
            edges[connection.key] = connection
        else:
            connection._set_weight(weight)
        return connection

    def disconnect(self, edges, a, b):
        connection = a.detach(b)
        if connection is None:
            return None
        del edges[connection.key]
        return connection

    def lookup(self, edges, a, b):
        return a.get_edge(b)


class UndirectedPolicy:
    """Unordered-pair edges, mirrored as one record at each endpoint.

    The global index keeps the record created first (the canonical one);
    lookups from either side resolve to it.
    """

    edge_type = EdgeType.UNDIRECTED
    directed = False

    def edge_key(self, a, b):
        return frozenset((a.handle, b.handle))

    def connect(self, edges, a, b, weight):
        forward = a.get_edge(b)
        if forward is None:
            key = self.edge_key(a, b)
            forward = Connection(a, b, key, weight)
            a.attach(b, forward)
            b.attach(a, Connection(b, a, key, weight))
            edges[key] = forward
            return forward
        forward._set_weight(weight)
        b.get_edge(a)._set_weight(weight)
        return edges[forward.key]

    def disconnect(self, edges, a, b):
        forward = a.detach(b)
        if forward is None:
            return None
        b.detach(a)
        return edges.pop(forward.key)

    def lookup(self, edges, a, b):
        connection = a.get_edge(b)
        if connection is None:
            return None
        return edges[connection.key]


def policy_for(directed):
    return DirectedPolicy() if directed else UndirectedPolicy()
