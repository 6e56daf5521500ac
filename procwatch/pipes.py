"""Pass messages between processes through anonymous pipes and named pipes."""

from __future__ import annotations

import argparse
import os
import sys

DEFAULT_MESSAGE = "Hello from parent proccess "
DEFAULT_FIFO = "bufferpipe"
_CHILD_BUFFER = 100


def send_to_child(message: str = DEFAULT_MESSAGE) -> str:
    """Send ``message`` to a forked child over a pipe; return what the child received.

    The child reads at most 100 bytes, as a fixed receive buffer would.
    """
    data = message.encode("utf-8")
    to_child_r, to_child_w = os.pipe()
    reply_r, reply_w = os.pipe()
    pid = os.fork()
    if pid == 0:
        try:
            os.close(to_child_w)
            os.close(reply_r)
            received = os.read(to_child_r, _CHILD_BUFFER)
            with os.fdopen(reply_w, "wb") as reply:
                reply.write(received)
        finally:
            os._exit(0)

    os.close(to_child_r)
    os.close(reply_w)
    try:
        with os.fdopen(to_child_w, "wb") as out:
            out.write(data)
    except BrokenPipeError:
        pass
    with os.fdopen(reply_r, "rb") as reply:
        received = reply.read()
    os.waitpid(pid, 0)
    return received.decode("utf-8", errors="replace")


def write_fifo(path: str | os.PathLike, message: str) -> None:
    """Write one line to a named pipe (or regular file) at ``path``."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(message + "\n")


def read_fifo(path: str | os.PathLike) -> str:
    """Read the first line from a named pipe (or regular file), without its newline."""
    with open(path, encoding="utf-8") as fh:
        return fh.readline().rstrip("\n")


def pipe_main(argv: list[str] | None = None) -> int:
    """Send a message from parent to child through a pipe and show both sides."""
    parser = argparse.ArgumentParser(prog="pipe", description="Send a message to a child over a pipe.")
    parser.add_argument("message", nargs="?", default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)
    received = send_to_child(args.message)
    print(f"Parent process send message : {args.message}")
    print(f"Child process received message : {received}")
    return 0


def fifo_writer_main(argv: list[str] | None = None) -> int:
    """Prompt for a message and write it to a named pipe."""
    parser = argparse.ArgumentParser(prog="fifo-writer", description="Write a message to a named pipe.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FIFO)
    args = parser.parse_args(argv)
    print("Enter message to send: ", end="", flush=True)
    message = sys.stdin.readline().rstrip("\n")
    write_fifo(args.path, message)
    print("Message sent!")
    return 0


def fifo_reader_main(argv: list[str] | None = None) -> int:
    """Read one message from a named pipe and print it."""
    parser = argparse.ArgumentParser(prog="fifo-reader", description="Read a message from a named pipe.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FIFO)
    args = parser.parse_args(argv)
    try:
        received = read_fifo(args.path)
    except OSError as exc:
        print(f"fifo-reader: {exc}", file=sys.stderr)
        return 1
    print(f"Received message: {received}")
    return 0


if __name__ == "__main__":
    raise SystemExit(pipe_main())