"""Show the busiest processes and terminate one chosen by the user."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import TextIO

from procwatch.processes import PROC_ROOT, format_table, list_processes, sort_processes

KILL_PROMPT = "Enter PID to Kill : \n"
REFRESH_PROMPT = "\nPress 'q' to quit or Enter to refresh : "
_CLEAR_SCREEN = "\033[H\033[2J"


def kill_process(pid: int, sig: int = signal.SIGKILL) -> None:
    """Send ``sig`` to ``pid``; raises OSError when the signal cannot be delivered."""
    os.kill(pid, sig)


def _read_pid(stdin: TextIO) -> int:
    """First whitespace-separated integer on the next input line, or zero."""
    tokens = stdin.readline().split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def prompt_and_kill(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    proc_root: str | os.PathLike = PROC_ROOT,
) -> int | None:
    """Print the top processes, ask for a pid and kill it.

    Returns the pid that was terminated, or None when nothing was killed.
    """
    processes = sort_processes(list_processes(proc_root), by_cpu=True)
    stdout.write(format_table(processes, 10))
    stdout.write(KILL_PROMPT)
    stdout.flush()

    target = _read_pid(stdin)
    if not target:
        return None
    try:
        kill_process(target, signal.SIGKILL)
    except OSError as exc:
        print(f"Failed to kill Process: {exc.strerror or exc}", file=sys.stderr)
        return None
    stdout.write(f"Process {target} terminated successfully\n")
    stdout.flush()
    return target


def monitor_loop(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    proc_root: str | os.PathLike = PROC_ROOT,
) -> None:
    """Repeat the table and kill prompt until the user enters 'q' or input ends."""
    while True:
        stdout.write(_CLEAR_SCREEN)
        prompt_and_kill(stdin, stdout, proc_root)
        stdout.write(REFRESH_PROMPT)
        stdout.flush()
        answer = stdin.readline()
        if not answer or answer[:1] in ("q", "Q"):
            break


def main(argv: list[str] | None = None) -> int:
    """Show processes and kill one, once or repeatedly with --watch."""
    parser = argparse.ArgumentParser(prog="killer", description="Show processes and kill one by pid.")
    parser.add_argument("--watch", action="store_true", help="refresh until 'q' is entered")
    parser.add_argument("--proc-root", default=PROC_ROOT, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    if args.watch:
        monitor_loop(sys.stdin, sys.stdout, args.proc_root)
    else:
        prompt_and_kill(sys.stdin, sys.stdout, args.proc_root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())