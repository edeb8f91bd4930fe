import argparse
import logging
import sys

from common.config import Config
from client.client import run_client
from server.server import run_server

MODES = ("client", "server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Even and Odd game over UDP")
    parser.add_argument("mode", nargs="?", help="Run mode: 'client' or 'server'")
    parser.add_argument("server_address", nargs="?", help="host:port of the server (client mode)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.mode is None:
        print("You did not provide a run mode. modes available are 'client' and 'server'.")
        sys.exit(1)
    if args.mode not in MODES:
        print(f"'{args.mode}' is not a valid run mode.")
        sys.exit(1)

    try:
        logging.basicConfig(level=Config.LOG_LEVEL)
        if args.mode == "client":
            run_client(args.server_address)
        else:
            run_server()
    except (OSError, ValueError) as e:
        print(f"An error happened: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
