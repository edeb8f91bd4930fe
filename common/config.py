import os


class Config:
    # "host:port" the server binds to and the client sends to by default
    SERVER_ADDRESS = os.environ.get('EVEN_ODD_SERVER_ADDRESS') or '127.0.0.1:34254'
    # Port 0 lets the OS pick an ephemeral port for the client
    CLIENT_BIND_ADDRESS = os.environ.get('EVEN_ODD_CLIENT_BIND_ADDRESS') or '127.0.0.1:0'
    LOG_LEVEL = os.environ.get('EVEN_ODD_LOG_LEVEL', 'INFO').upper()


def parse_address(address: str) -> tuple:
    # "host:port" -> (host, port)
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"Invalid address '{address}', expected host:port")
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"Invalid port in address '{address}'")
    if not (0 <= port_number <= 65535):
        raise ValueError(f"Port out of range in address '{address}'")
    return host, port_number
