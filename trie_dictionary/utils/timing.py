# timing.py - latency helpers feeding the shell's /stats table

from functools import wraps
import time
from typing import Callable, Optional

from trie_dictionary.utils.metrics_tracker import Metrics


def timed(metrics: Optional[Metrics] = None, key: Optional[str] = None) -> Callable:
    """
    Decorator: the wrapped call returns (result, elapsed_seconds).
    When `metrics` is given the elapsed time is also recorded there under
    `key` (default "<function name>_time").
        out, dt = timed(metrics, "search_time")(trie.search)("cat")
    """
    def _decor(func: Callable) -> Callable:
        name = key or f"{getattr(func, '__name__', 'call')}_time"

        @wraps(func)
        def _wrap(*a, **kw):
            t0 = time.perf_counter()
            res = func(*a, **kw)
            elapsed = time.perf_counter() - t0
            if metrics is not None:
                metrics.record(name, elapsed)
            return res, elapsed
        return _wrap
    return _decor
