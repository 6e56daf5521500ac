"""Line-by-line TCP chat between one server and one client."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from typing import TextIO

BUFFER_SIZE = 1024
GREETING_TRAILER = "ITER.\n"


def greeting(now: float | None = None) -> str:
    """Text the server sends on connect: the local time in ctime form, then a marker line."""
    if now is None:
        now = time.time()
    return time.ctime(now) + "\n" + GREETING_TRAILER


def _read_line(stdin: TextIO) -> str | None:
    """Next input line without its newline, or None at end of input."""
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\n")


def _encode_message(text: str) -> bytes:
    return text.encode("utf-8")[: BUFFER_SIZE - 1]


def serve(listener: socket.socket, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Accept one client, greet it, then answer each message with a line from ``stdin``.

    The session ends when the client disconnects or ``stdin`` is exhausted.
    Returns the number of messages received from the client.
    """
    conn, _ = listener.accept()
    received = 0
    with conn:
        conn.sendall(greeting().encode("utf-8"))
        while True:
            try:
                data = conn.recv(BUFFER_SIZE)
            except OSError:
                data = b""
            if not data:
                stdout.write("Client disconnected or read error.\n")
                stdout.flush()
                break
            received += 1
            stdout.write("From client: " + data.decode("utf-8", errors="replace"))
            stdout.write("To client: ")
            stdout.flush()
            reply = _read_line(stdin)
            if reply is None:
                break
            conn.sendall(_encode_message(reply))
    return received


def chat(sock: socket.socket, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> list[str]:
    """Send each line of ``stdin`` to the server and print its answer.

    Stops at end of input or when the server goes away. Returns the answers received.
    """
    replies: list[str] = []
    while True:
        stdout.write("You: ")
        stdout.flush()
        message = _read_line(stdin)
        if message is None:
            break
        sock.sendall(_encode_message(message))
        try:
            data = sock.recv(BUFFER_SIZE - 1)
        except OSError:
            data = b""
        if not data:
            print("Disconnected from server or error reading response.", file=sys.stderr)
            break
        reply = data.decode("utf-8", errors="replace")
        replies.append(reply)
        stdout.write(f"Server: {reply}\n")
        stdout.flush()
    return replies


def server_main(argv: list[str] | None = None) -> int:
    """Listen on an ephemeral (or given) port and chat with the first client."""
    parser = argparse.ArgumentParser(prog="tcpchat-server", description="Chat with one TCP client.")
    parser.add_argument("--port", type=int, default=0, help="port to bind, 0 for any")
    parser.add_argument("--show-fd", action="store_true", help="print the listening socket's descriptor")
    args = parser.parse_args(argv)

    try:
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError:
        print("Socket creation failed", file=sys.stderr)
        return 1
    with listener:
        if args.show_fd:
            print(listener.fileno())
        try:
            listener.bind(("", args.port))
        except OSError:
            print("Bind failed", file=sys.stderr)
            return 1
        print(f"After bind, ephemeral port = {listener.getsockname()[1]}", flush=True)
        listener.listen(5)
        try:
            serve(listener, sys.stdin, sys.stdout)
        except OSError:
            print("Accept failed", file=sys.stderr)
            return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Connect to a chat server and exchange lines typed by the user."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: tcpchat-client <IP Address> <Port>", file=sys.stderr)
        return 1
    host, port_text = args
    try:
        port = int(port_text)
    except ValueError:
        print("Error: Connection failed", file=sys.stderr)
        return 1
    try:
        sock = socket.create_connection((host, port))
    except (OSError, OverflowError):
        print("Error: Connection failed", file=sys.stderr)
        return 1
    with sock:
        print("Connected to the server. Type messages and press Enter to send (Ctrl+C to quit):")
        chat(sock, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(server_main())