"""TCP connect prober."""

from __future__ import annotations

import socket
import time

from host_selector.interfaces.prober import Prober
from host_selector.models.candidate import ProbeFailure, ProbeOutcome, ProbeSuccess


class TcpConnectProber(Prober):
    """Time a TCP handshake to the first address a target resolves to.

    Only the connect is timed; name resolution happens first and a failure
    there short-circuits the attempt. A refused connection means the host
    answered, so it counts as reachable unless ``refused_is_reachable`` is off.
    """

    def __init__(self, port: int = 80, timeout_ms: float = 500, refused_is_reachable: bool = True) -> None:
        self.port = port
        self.timeout_ms = timeout_ms
        self.refused_is_reachable = refused_is_reachable

    def _resolve(self, target: str) -> tuple:
        infos = socket.getaddrinfo(target, self.port, type=socket.SOCK_STREAM)
        if not infos:
            raise socket.gaierror(f"no addresses for {target}")
        family, socktype, proto, _, sockaddr = infos[0]
        return family, socktype, proto, sockaddr

    def probe_once(self, target: str) -> ProbeOutcome:
        try:
            family, socktype, proto, sockaddr = self._resolve(target)
        except (socket.gaierror, UnicodeError) as exc:
            return ProbeFailure("resolution", str(exc))

        sock = socket.socket(family, socktype, proto)
        sock.settimeout(self.timeout_ms / 1000.0)
        start = time.perf_counter()
        try:
            sock.connect(sockaddr)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
        except ConnectionRefusedError as exc:
            if self.refused_is_reachable:
                return ProbeSuccess((time.perf_counter() - start) * 1000.0)
            return ProbeFailure("unreachable", str(exc))
        except socket.timeout:
            return ProbeFailure("timeout", f"no answer within {self.timeout_ms} ms")
        except OSError as exc:
            return ProbeFailure("unreachable", str(exc))
        finally:
            sock.close()
        return ProbeSuccess(elapsed_ms)
