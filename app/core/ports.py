from __future__ import annotations

import socket


class PortInUseError(RuntimeError):
    def __init__(self, port: int) -> None:
        super().__init__(f"Port {port} is already in use")
        self.port = port


def ensure_port_available(port: int, host: str = "0.0.0.0") -> None:
    """Raise PortInUseError if something is already bound to host:port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise PortInUseError(port) from exc
