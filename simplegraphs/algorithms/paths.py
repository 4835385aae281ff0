"""A*/Dijkstra shortest path search."""

import heapq
import itertools
import logging
import math

import numpy as np

from ._scratch import Scratch

logger = logging.getLogger(__name__)


def zero_heuristic(vertex, target):
    """Default heuristic; reduces A* to Dijkstra."""
    return 0.0


class ShortestPaths:
    # Shortest paths (mixed into Algorithms; expects self._G)

    def _a_star(self, start, target, heuristic=None):
        """Run A* from node ``start`` until node ``target`` is popped.

        Parameters
        --
        start, target : AdjacencyNode
        heuristic : callable, optional
            ``heuristic(vertex, target_vertex) -> float``. Must not mutate the
            graph. Defaults to :func:`zero_heuristic`.

        Returns
        ---
        Scratch | None
            The run's side table when the target was reached, otherwise None.

        Notes
        -
        Edge weights are assumed non-negative; nothing checks it. Costs are
        accumulated in ``float32``: a path whose cost overflows to ``inf`` is
        treated as unreachable.

        """
        if heuristic is None:
            heuristic = zero_heuristic
        registry = self._G._registry
        scratch = Scratch(registry.capacity)
        distance, estimate = scratch.distance, scratch.estimate
        visited, previous = scratch.visited, scratch.previous
        target_vertex = target.object

        distance[start.handle] = 0
        counter = itertools.count()
        heap = [(0.0, next(counter), start.handle)]

        reached = False
        with np.errstate(over="ignore"):
            while heap:
                _, _, u = heapq.heappop(heap)
                if u == target.handle:
                    reached = True
                    break
                if visited[u]:
                    continue  # stale entry
                visited[u] = True
                for v, connection in registry.at(u).neighbours.items():
                    if visited[v]:
                        continue
                    candidate = distance[u] + connection.weight
                    if candidate < distance[v]:
                        distance[v] = candidate
                        previous[v] = u
                        estimate[v] = heuristic(registry.at(v).object, target_vertex)
                        heapq.heappush(heap, (float(candidate + estimate[v]), next(counter), v))

        if logger.isEnabledFor(logging.DEBUG):
            if reached:
                logger.debug(
                    "a_star %r -> %r: reached, cost=%s, explored=%d",
                    start.object, target_vertex, distance[target.handle], scratch.explored(),
                )
            else:
                logger.debug(
                    "a_star %r -> %r: unreachable, explored=%d",
                    start.object, target_vertex, scratch.explored(),
                )
        return scratch if reached else None

    def find_shortest_path(self, start, target, heuristic=None):
        """Vertices of a cheapest path from ``start`` to ``target``.

        Parameters
        --
        start, target : AdjacencyNode
        heuristic : callable, optional

        Returns
        ---
        list
            Vertex values including both endpoints, or ``[]`` if unreachable.

        """
        scratch = self._a_star(start, target, heuristic)
        if scratch is None:
            return []
        registry = self._G._registry
        return [registry.at(h).object for h in scratch.trail(target.handle)]

    def find_minimum_distance(self, start, target):
        """Total weight of a cheapest path, or ``math.inf`` if unreachable."""
        scratch = self._a_star(start, target)
        if scratch is None:
            return math.inf
        return float(scratch.distance[target.handle])

    def is_reachable(self, start, target):
        return self._a_star(start, target) is not None
