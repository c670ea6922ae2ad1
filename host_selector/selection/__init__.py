"""Selection engine: concurrent probing plus latency ranking."""

from .ranking import compare_candidates, rank_candidates
from .selector import HostSelector, select_best

__all__ = ["HostSelector", "compare_candidates", "rank_candidates", "select_best"]
