"""Create chains and fans of child processes that report their ids."""

from __future__ import annotations

import argparse
import os
import sys
from typing import TextIO


def _say(out: TextIO, text: str) -> None:
    out.write(text + "\n")
    out.flush()


def _fan(n: int, out: TextIO) -> list[int]:
    """Fork n-1 children of the current process; each reports and exits."""
    children: list[int] = []
    for _ in range(1, n):
        out.flush()
        pid = os.fork()
        if pid == 0:
            try:
                _say(out, f"Child pid {os.getpid()} from the parent pid {os.getppid()}")
            finally:
                os._exit(0)
        children.append(pid)
    for pid in children:
        os.waitpid(pid, 0)
    return children


def _chain(n: int, out: TextIO, fan_at_end: bool) -> list[int]:
    """Fork a chain of n processes; each parent waits for its own child."""
    origin = os.getpid()
    children: list[int] = []
    try:
        for i in range(1, n):
            out.flush()
            pid = os.fork()
            if pid > 0:
                _say(out, f"Parent ID is {os.getpid()}")
                if os.getpid() == origin:
                    children.append(pid)
                os.waitpid(pid, 0)
                break
            if fan_at_end and i == n - 1:
                _fan(n, out)
            _say(out, f"Child process ID is {os.getpid()}")
    finally:
        if os.getpid() != origin:
            out.flush()
            os._exit(0)
    return children


def spawn_chain(n: int, out: TextIO | None = None) -> list[int]:
    """Build a chain of ``n`` processes, each the child of the previous one.

    Returns the pid of the caller's direct child, if any.
    """
    return _chain(n, out or sys.stdout, fan_at_end=False)


def spawn_fan(n: int, out: TextIO | None = None) -> list[int]:
    """Fork ``n - 1`` children directly from the caller; returns their pids."""
    return _fan(n, out or sys.stdout)


def spawn_chain_fan(n: int, out: TextIO | None = None) -> list[int]:
    """Build a chain whose last member forks a fan of ``n - 1`` children."""
    return _chain(n, out or sys.stdout, fan_at_end=True)


_MODES = {"chain": spawn_chain, "fan": spawn_fan, "chainfan": spawn_chain_fan}


def main(argv: list[str] | None = None) -> int:
    """Spawn a chain, fan or chain-with-fan of processes."""
    parser = argparse.ArgumentParser(prog="spawn", description="Spawn process chains and fans.")
    parser.add_argument("mode", choices=sorted(_MODES), help="shape of the process tree")
    parser.add_argument("n", type=int, nargs="?", help="number of processes")
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        print("Enter the number of process :", flush=True)
        try:
            n = int(sys.stdin.readline().split()[0])
        except (IndexError, ValueError):
            n = 0
    _MODES[args.mode](n, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())