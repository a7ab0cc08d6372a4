"""UDP request/response helpers and the tick message format."""

from __future__ import annotations

import socket
from datetime import datetime

BUFFER_SIZE = 1500
SERVER_ADDRESS = ("localhost", 8888)
SERVER_REPLY = "Hello from Server"
TICK_FORMAT = "%d/%m/%Y %H:%M:%S"


def serve_once(sock: socket.socket) -> tuple[str, tuple]:
    """Receive one datagram on ``sock``, answer it and return its text and sender.

    Raises UnicodeDecodeError when the datagram is not UTF-8.
    """
    data, remote = sock.recvfrom(BUFFER_SIZE)
    message = data.decode("utf-8")
    sock.sendto(SERVER_REPLY.encode("utf-8"), remote)
    return message, remote


def udp_request(
    message: str, address: tuple = SERVER_ADDRESS, timeout: float | None = None
) -> str:
    """Send ``message`` to ``address`` from a fresh local socket and return the reply."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(timeout)
        sock.bind(("localhost", 0))
        sock.sendto(message.encode("utf-8"), address)
        data, _ = sock.recvfrom(BUFFER_SIZE)
    return data.decode("utf-8")


def format_tick(moment: datetime | None = None) -> str:
    """Format ``moment`` (local now by default) as a tick message."""
    if moment is None:
        moment = datetime.now().astimezone()
    return moment.strftime(TICK_FORMAT)