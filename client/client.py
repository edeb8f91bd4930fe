import socket
import sys

from common.config import Config, parse_address
from common.protocol import BUFFER_SIZE, ENCODING


def read_input() -> str:
    print("Type the input:")
    return input()


def show_response(data: bytes):
    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        print(f"Error parsing: {e}")
        return
    print(f"Server response: {text}")


def run_client(server_address: str = None):
    server = parse_address(server_address or Config.SERVER_ADDRESS)

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(parse_address(Config.CLIENT_BIND_ADDRESS))
        sock.connect(server)

        while True:
            try:
                line = read_input()
            except (OSError, EOFError, UnicodeDecodeError) as e:
                print(f"The following error happened while reading from input: {e}")
                sys.exit(1)

            # Line goes out as typed; the server does the validation
            sock.send(line.encode(ENCODING))
            show_response(sock.recv(BUFFER_SIZE))
    except KeyboardInterrupt:
        print("\nClient stopped.")
    finally:
        sock.close()


def main():
    run_client(sys.argv[1] if len(sys.argv) > 1 else None)


if __name__ == "__main__":
    main()
