from ._helpers import NOT_IN_GRAPH_MESSAGE, InvalidArgumentError, _check_vertex
from ._Node import AdjacencyNode


class VertexIndex:
    """Vertex registry.

    Maps each vertex value to a stable integer handle, and each handle to its
    AdjacencyNode in an arena list. Freed handles are recycled, so the arena
    never grows past the peak number of live vertices.
    """

    def __init__(self):
        self._handles = {}  # vertex -> handle, insertion ordered
        self._arena = []  # handle -> AdjacencyNode | None
        self._free = []  # recycled handles

    # ==================== Vertex <-> handle ====================

    def add(self, v):
        """Register ``v``; return its new node, or None if already present."""
        _check_vertex(v)
        if v in self._handles:
            return None
        if self._free:
            handle = self._free.pop()
        else:
            handle = len(self._arena)
            self._arena.append(None)
        node = AdjacencyNode(v, handle)
        self._arena[handle] = node
        self._handles[v] = handle
        return node

    def discard(self, node):
        """Forget ``node``; its handle becomes reusable."""
        del self._handles[node.object]
        self._arena[node.handle] = None
        self._free.append(node.handle)

    def clear(self):
        self._handles.clear()
        self._arena.clear()
        self._free.clear()

    def get(self, v):
        """Node of ``v``, or None if ``v`` is not registered."""
        _check_vertex(v)
        handle = self._handles.get(v)
        if handle is None:
            return None
        return self._arena[handle]

    def node(self, v):
        """Node of ``v``; raises InvalidArgumentError if not registered."""
        node = self.get(v)
        if node is None:
            raise InvalidArgumentError(NOT_IN_GRAPH_MESSAGE)
        return node

    def pair(self, v, w):
        """Nodes of ``v`` and ``w``; raises InvalidArgumentError unless both are registered."""
        a, b = self.get(v), self.get(w)
        if a is None or b is None:
            raise InvalidArgumentError(NOT_IN_GRAPH_MESSAGE)
        return a, b

    def at(self, handle):
        """Node stored under ``handle``."""
        return self._arena[handle]

    # ==================== Ordering ====================

    def reorder(self, vertices):
        """Replace the iteration order with ``vertices`` (same content)."""
        self._handles = {v: self._handles[v] for v in vertices}

    # ==================== Utilities ====================

    def __contains__(self, v):
        return v is not None and v in self._handles

    def __len__(self):
        return len(self._handles)

    def vertices(self):
        """Live keys view, in registry order."""
        return self._handles.keys()

    def nodes(self):
        """Iterate live nodes in registry order."""
        arena = self._arena
        return (arena[h] for h in self._handles.values())

    @property
    def capacity(self):
        """Size of the arena; every live handle is below it."""
        return len(self._arena)

