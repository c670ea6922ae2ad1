"""Probing of individual candidates.

- TcpConnectProber: one timed TCP handshake per attempt
- measure_candidate: repeated attempts averaged into a mean latency
"""

from .measure import measure_candidate
from .tcp import TcpConnectProber

__all__ = ["TcpConnectProber", "measure_candidate"]
