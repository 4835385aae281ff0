import logging
from collections import deque

from ._scratch import Scratch

logger = logging.getLogger(__name__)


# Traversal (bounded searches, cycles)
class Traversal:
    def _emit(self, tree, node, via):
        tree.add_vertex(node.object)
        if via is not None:
            tree.add_edge(via.a, via.b, via.weight)

    def breadth_first_search(self, start, max_vertices, max_depth):
        """Bounded breadth-first search from node ``start``.

        Parameters
        --
        start : AdjacencyNode
        max_vertices : int
            Stop once this many vertices have been emitted.
        max_depth : int
            Vertices at this edge distance are emitted but not expanded.

        Returns
        ---
        Graph
            New graph (same directedness) with the emitted vertices and, for
            each one but the start, the edge it was discovered through. Both
            are in discovery order.

        """
        tree = self._G._spawn()
        if max_depth <= 0 or max_vertices <= 0:
            return tree
        registry = self._G._registry
        scratch = Scratch(registry.capacity)
        queued, depth = scratch.queued, scratch.depth

        queued[start.handle] = True
        depth[start.handle] = 0
        queue = deque([(start.handle, None)])

        while queue:
            h, via = queue.popleft()
            node = registry.at(h)
            self._emit(tree, node, via)
            scratch.visited[h] = True
            if len(tree) >= max_vertices:
                break
            if depth[h] >= max_depth:
                continue
            for w, connection in node.neighbours.items():
                if not queued[w]:
                    queued[w] = True
                    depth[w] = depth[h] + 1
                    queue.append((w, connection))

        logger.debug("bfs from %r: emitted %d vertices", start.object, len(tree))
        return tree

    def depth_first_search(self, start, max_vertices, max_depth):
        """Bounded depth-first search from node ``start``.

        Same parameters and result as :meth:`breadth_first_search`, with a
        stack instead of a queue.

        Notes
        -
        - A vertex is marked visited when popped, not when pushed, so it can
          sit on the stack several times; later pops are no-ops. Each push
          carries its own depth and discovering edge, and the pop that
          processes the vertex decides both.
        - Neighbours are pushed in adjacency order, so the last one is
          explored first.

        """
        tree = self._G._spawn()
        if max_depth <= 0 or max_vertices <= 0:
            return tree
        registry = self._G._registry
        scratch = Scratch(registry.capacity)
        visited, depth = scratch.visited, scratch.depth

        stack = [(start.handle, 0, None)]

        while stack:
            h, d, via = stack.pop()
            if visited[h]:
                continue
            visited[h] = True
            depth[h] = d
            node = registry.at(h)
            self._emit(tree, node, via)
            if len(tree) >= max_vertices:
                break
            if d >= max_depth:
                continue
            for w, connection in node.neighbours.items():
                if not visited[w]:
                    stack.append((w, d + 1, connection))

        logger.debug("dfs from %r: emitted %d vertices", start.object, len(tree))
        return tree

    def detect_cycle(self):
        """True if the graph contains a cycle.

        Notes
        -
        - Iterative depth-first search from every unvisited vertex, keeping
          the vertices of the active path marked; an edge into the active
          path closes a cycle.
        - Undirected graphs ignore the edge back to the parent, and need at
          least 3 vertices and 3 edges to hold a cycle. Directed graphs need
          at least 2 of each (``a -> b -> a``).

        """
        G = self._G
        directed = G.is_directed()
        minimum = 2 if directed else 3
        if G.size() < minimum or G.edge_count() < minimum:
            return False

        registry = G._registry
        scratch = Scratch(registry.capacity)
        visited, on_path = scratch.visited, scratch.queued

        for root in registry.nodes():
            if visited[root.handle]:
                continue
            visited[root.handle] = True
            on_path[root.handle] = True
            frames = [(root.handle, -1, iter(root.neighbours))]
            while frames:
                h, parent, children = frames[-1]
                for w in children:
                    if not directed and w == parent:
                        continue
                    if on_path[w]:
                        logger.debug(
                            "cycle found through %r -> %r",
                            registry.at(h).object, registry.at(w).object,
                        )
                        return True
                    if not visited[w]:
                        visited[w] = True
                        on_path[w] = True
                        frames.append((w, h, iter(registry.at(w).neighbours)))
                        break
                else:
                    on_path[h] = False
                    frames.pop()
        return False
