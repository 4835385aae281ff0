import numpy as np

from ..core._helpers import WEIGHT_DTYPE


class Scratch:
    """Per-run algorithm state, indexed by node handle.

    Every algorithm call allocates its own table sized to the registry arena,
    so nothing is shared between runs and nothing is stored on the nodes.

    Attributes
    --
    visited : numpy.ndarray[bool]
        Finalized (shortest path) or processed (traversals).
    queued : numpy.ndarray[bool]
        Enqueued at least once (BFS) or currently on the DFS path (cycles).
    distance : numpy.ndarray[float32]
        Best known cost from the start, ``inf`` when untouched.
    estimate : numpy.ndarray[float32]
        Heuristic estimate to the target.
    depth : numpy.ndarray[int32]
        Edge distance from the start, ``-1`` when unset.
    previous : numpy.ndarray[int64]
        Handle of the node this one was reached from, ``-1`` when unset.

    """

    __slots__ = ("visited", "queued", "distance", "estimate", "depth", "previous")

    def __init__(self, capacity: int):
        self.visited = np.zeros(capacity, dtype=bool)
        self.queued = np.zeros(capacity, dtype=bool)
        self.distance = np.full(capacity, np.inf, dtype=WEIGHT_DTYPE)
        self.estimate = np.zeros(capacity, dtype=WEIGHT_DTYPE)
        self.depth = np.full(capacity, -1, dtype=np.int32)
        self.previous = np.full(capacity, -1, dtype=np.int64)

    def trail(self, end: int):
        """Handles from the run's start to ``end``, following ``previous``."""
        handles = [end]
        h = int(self.previous[end])
        while h >= 0:
            handles.append(h)
            h = int(self.previous[h])
        handles.reverse()
        return handles

    def explored(self) -> int:
        return int(np.count_nonzero(self.visited))
