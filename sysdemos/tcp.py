"""A one-shot TCP client and server exchanging a greeting each."""

from __future__ import annotations

import argparse
import socket
from collections.abc import Callable, Sequence

PORT = 32678
BUFFER_SIZE = 256
CLIENT_MESSAGE = "hello there, server !!!!,from client with love\n"
SERVER_MESSAGE = "Server: Nice to see you client\n"


def run_client(host: str = "127.0.0.1", port: int = PORT) -> str:
    """Connect, send the client greeting and return what the server answers."""
    with socket.create_connection((host, port)) as conn:
        conn.sendall(CLIENT_MESSAGE.encode())
        received = conn.recv(BUFFER_SIZE).decode(errors="replace")
    if received:
        print(f"Received {received}")
    return received


def run_server(
    host: str = "",
    port: int = PORT,
    ready: Callable[[tuple[str, int]], None] | None = None,
) -> str:
    """Accept one client, return its message after answering with the server greeting.

    ready, if given, is called with the bound address once the server listens.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(1)
        if ready is not None:
            ready(server.getsockname())
        conn, (client_host, client_port) = server.accept()
        with conn:
            print(
                f"Server: client port {socket.htons(client_port):x}, "
                f"client address {client_host}"
            )
            received = conn.recv(BUFFER_SIZE).decode(errors="replace")
            if received:
                print(f"Received: {received}")
            conn.sendall(SERVER_MESSAGE.encode())
    return received


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client or the server."""
    parser = argparse.ArgumentParser(description="TCP client and server demo.")
    roles = parser.add_subparsers(dest="role", required=True)
    client = roles.add_parser("client", help="connect and greet the server")
    client.add_argument("--host", default="127.0.0.1")
    client.add_argument("--port", type=int, default=PORT)
    server = roles.add_parser("server", help="wait for one client")
    server.add_argument("--host", default="")
    server.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)

    try:
        if args.role == "client":
            run_client(args.host, args.port)
        else:
            run_server(args.host, args.port)
    except OSError as error:
        print(f"{args.role}: {error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())