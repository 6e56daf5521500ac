"""Send a number to a UDP server and receive a short text answer."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from typing import Callable

REPLY_SIZE = 50
RECV_SIZE = 1024
DEFAULT_HOST = "127.0.0.1"
_NUMBER = struct.Struct("=i")


def encode_number(n: int) -> bytes:
    """The datagram carrying ``n`` as a native-order 32-bit integer."""
    try:
        return _NUMBER.pack(n)
    except struct.error as exc:
        raise OverflowError(f"{n} does not fit in a 32-bit integer") from exc


def decode_number(data: bytes) -> int:
    """The integer at the start of a datagram; extra bytes are ignored."""
    if len(data) < _NUMBER.size:
        raise ValueError(f"need {_NUMBER.size} bytes, got {len(data)}")
    return _NUMBER.unpack_from(data, 0)[0]


def encode_reply(text: str) -> bytes:
    """A fixed-size reply datagram: the text cut or zero-padded to 50 bytes."""
    raw = text.encode("utf-8")[:REPLY_SIZE]
    return raw.ljust(REPLY_SIZE, b"\0")


def decode_reply(data: bytes) -> str:
    """The text of a reply: at most 50 bytes, ending at the first zero byte."""
    raw = data[:REPLY_SIZE].split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace")


def serve_once(sock: socket.socket, reply_for: Callable[[int], str]) -> int:
    """Receive one number, answer the sender with ``reply_for(number)``; return the number."""
    data, address = sock.recvfrom(_NUMBER.size)
    number = decode_number(data)
    sock.sendto(encode_reply(reply_for(number)), address)
    return number


def ask(port: int, n: int, host: str = DEFAULT_HOST) -> str:
    """Send ``n`` to the server at ``host:port`` and return its text answer."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.sendto(encode_number(n), (host, port))
        data, _ = sock.recvfrom(RECV_SIZE - 1)
    return decode_reply(data)


def _read_word(prompt: str) -> str:
    print(prompt, end="", flush=True)
    tokens = sys.stdin.readline().split()
    return tokens[0] if tokens else ""


def server_main(argv: list[str] | None = None) -> int:
    """Wait for one number and answer it with a word typed by the user."""
    parser = argparse.ArgumentParser(prog="udpecho-server", description="Answer one UDP client.")
    parser.add_argument("--port", type=int, default=0, help="port to bind, 0 for any")
    args = parser.parse_args(argv)

    def reply_for(number: int) -> str:
        print(f"\nClient sent: {number}")
        return _read_word("\nGive a string to send to client: ")

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("", args.port))
        print(f"After bind, ephemeral port: {sock.getsockname()[1]}", flush=True)
        serve_once(sock, reply_for)
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Ask the user for a number, send it to the server and print the answer."""
    parser = argparse.ArgumentParser(prog="udpecho-client", description="Send a number to a UDP server.")
    parser.add_argument("port", type=int)
    parser.add_argument("--host", default=DEFAULT_HOST)
    args = parser.parse_args(argv)

    word = _read_word("Give a number for server: ")
    try:
        number = int(word)
    except ValueError:
        number = 0
    answer = ask(args.port, number, args.host)
    print(f"\nServer sent: {answer}")
    return 0


if __name__ == "__main__":
    raise SystemExit(server_main())