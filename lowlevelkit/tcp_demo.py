"""Minimal IPv4 TCP servers and a client that only connects."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import threading

PORT = 12345
BUFFER_SIZE = 1024


def open_listener(host: str = "", port: int = PORT, backlog: int = 3) -> socket.socket:
    """Return an IPv4 TCP socket bound to ``host:port`` and listening."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError:
        sock.close()
        raise
    return sock


def accept_client(listener: socket.socket) -> tuple[socket.socket, str]:
    """Wait for a connection; return the client socket and its IP address."""
    client, address = listener.accept()
    return client, address[0]


def receive_message(listener: socket.socket) -> tuple[str, str | None]:
    """Accept one client and read one message from it.

    Returns the client's IP address and the text received, or None if the
    client closed the connection without sending anything.
    """
    client, ip = accept_client(listener)
    with client:
        data = client.recv(BUFFER_SIZE)
    if not data:
        return ip, None
    return ip, data.decode("utf-8", "replace").split("\x00", 1)[0]


def connect(host: str, port: int | str) -> socket.socket:
    """Connect to the first IPv4 address of ``host`` that accepts a connection.

    Raises socket.gaierror if the name cannot be resolved and ConnectionError
    if no address accepts the connection.
    """
    infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)
    last_error: OSError | None = None
    for family, sock_type, proto, _name, address in infos:
        try:
            sock = socket.socket(family, sock_type, proto)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.connect(address)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        return sock
    raise ConnectionError(f"Failed to connect to {host}:{port}") from last_error


def client_main(argv: list[str] | None = None) -> int:
    """Connect to ``<host> <port>`` and report success; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
        print(f"Usage: {prog} <host> <port>")
        return 1
    host, port = argv[0], argv[1]
    try:
        sock = connect(host, port)
    except socket.gaierror as exc:
        print(f"getaddrinfo: {exc}", file=sys.stderr)
        return 1
    except OSError:
        print("Failed to connect", file=sys.stderr)
        return 1
    with sock:
        print(f"Connected to {host}:{port}", flush=True)
    return 0


def server_main(argv: list[str] | None = None) -> int:
    """Run a demo server: listen forever, accept one client, or receive one message."""
    parser = argparse.ArgumentParser(prog="tcp_server", description="Demo TCP server.")
    parser.add_argument("mode", nargs="?", choices=["listen", "accept", "receive"], default="receive")
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    try:
        listener = open_listener("", args.port)
    except OSError as exc:
        print(f"Bind failed: {exc}", file=sys.stderr)
        return 1
    with listener:
        print(f"Server listening on port {listener.getsockname()[1]}", flush=True)
        try:
            if args.mode == "listen":
                threading.Event().wait()
            elif args.mode == "accept":
                client, ip = accept_client(listener)
                client.close()
                print(f"Client connected: {ip}", flush=True)
            else:
                ip, message = receive_message(listener)
                print(f"Client connected: {ip}", flush=True)
                if message is not None:
                    print(f'Message received: "{message}"', flush=True)
        except KeyboardInterrupt:
            return 0
        except OSError as exc:
            print(f"Accept failed: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(server_main())