# metrics_tracker.py - running averages of command latencies

from collections import defaultdict
from typing import List, Tuple


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0: return 0.0
        return self.m[key] / self.n[key]

    def rows(self) -> List[Tuple[str, int, float]]:
        """(key, count, avg) per tracked metric, sorted by key."""
        return [(k, self.n[k], self.avg(k)) for k in sorted(self.m)]

    def reset(self):
        self.m.clear()
        self.n.clear()
