"""Share an integer between processes through shared memory."""

from __future__ import annotations

import argparse
import mmap
import os
import struct
import tempfile

SEGMENT_SIZE = 50
DEFAULT_NAME = "procwatch-shm"
_INT = struct.Struct("i")


def _segment_path(name: str | os.PathLike) -> str:
    name = os.fspath(name)
    if os.path.isabs(name):
        return name
    base = "/dev/shm" if os.path.isdir("/dev/shm") else tempfile.gettempdir()
    return os.path.join(base, name)


def shared_counter(initial: int = 10, child_add: int = 90, parent_add: int = 110) -> tuple[int, int]:
    """Share an integer with a forked child; the child adds first, then the parent.

    Returns the value after the child's update and after the parent's.
    """
    with mmap.mmap(-1, _INT.size) as shared:
        _INT.pack_into(shared, 0, initial)
        pid = os.fork()
        if pid == 0:
            try:
                (value,) = _INT.unpack_from(shared, 0)
                _INT.pack_into(shared, 0, value + child_add)
            finally:
                os._exit(0)
        os.waitpid(pid, 0)
        (child_value,) = _INT.unpack_from(shared, 0)
        _INT.pack_into(shared, 0, child_value + parent_add)
        (parent_value,) = _INT.unpack_from(shared, 0)
    return child_value, parent_value


def _open_segment(path: str) -> int:
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o664)
    if os.fstat(fd).st_size < SEGMENT_SIZE:
        os.ftruncate(fd, SEGMENT_SIZE)
    return fd


def write_value(name: str | os.PathLike, value: int) -> None:
    """Store an integer at the start of a named segment, creating it if needed."""
    try:
        packed = _INT.pack(value)
    except struct.error as exc:
        raise OverflowError(f"{value} does not fit in a shared int") from exc
    fd = _open_segment(_segment_path(name))
    try:
        with mmap.mmap(fd, SEGMENT_SIZE) as segment:
            segment[: _INT.size] = packed
    finally:
        os.close(fd)


def read_value(name: str | os.PathLike, remove: bool = True) -> int:
    """Read the integer from a named segment, creating it if needed; optionally remove it."""
    path = _segment_path(name)
    fd = _open_segment(path)
    try:
        with mmap.mmap(fd, SEGMENT_SIZE, access=mmap.ACCESS_READ) as segment:
            (value,) = _INT.unpack_from(segment, 0)
    finally:
        os.close(fd)
    if remove:
        os.unlink(path)
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the shared counter demo, or write or read a named segment."""
    parser = argparse.ArgumentParser(prog="shm", description="Shared memory demonstrations.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("counter", help="parent and child update one shared integer")
    writer = sub.add_parser("write", help="store a value in a named segment")
    writer.add_argument("value", type=int, nargs="?", default=50)
    writer.add_argument("--name", default=DEFAULT_NAME)
    reader = sub.add_parser("read", help="read and remove a named segment")
    reader.add_argument("--name", default=DEFAULT_NAME)
    reader.add_argument("--keep", action="store_true", help="do not remove the segment")
    args = parser.parse_args(argv)

    if args.command == "write":
        write_value(args.name, args.value)
        print(f"Shared memory segment={_segment_path(args.name)}")
    elif args.command == "read":
        print(f"Shared memory segment={_segment_path(args.name)}")
        print(f"Value in Shared memory ={read_value(args.name, remove=not args.keep)}")
    else:
        print("default initial value of shvar=0")
        child_value, parent_value = shared_counter()
        print(f"child update={child_value}")
        print(f"parent update={parent_value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())