import socket
from typing import Any, Protocol, Tuple

from common.protocol import BUFFER_SIZE


class Transport(Protocol):
    # What the server loop needs from the network
    def receive(self) -> Tuple[bytes, Any]:
        ...

    def send_to(self, data: bytes, address) -> None:
        ...


class UdpTransport:
    """Datagram transport bound to a local (host, port)."""

    def __init__(self, address: tuple, buffer_size: int = BUFFER_SIZE):
        self.buffer_size = buffer_size
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self.sock.bind(address)
        except OSError:
            self.sock.close()
            raise

    @property
    def address(self) -> tuple:
        return self.sock.getsockname()

    def receive(self) -> Tuple[bytes, tuple]:
        return self.sock.recvfrom(self.buffer_size)

    def send_to(self, data: bytes, address) -> None:
        self.sock.sendto(data, address)

    def close(self):
        self.sock.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
