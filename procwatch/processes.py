"""List running processes with their CPU and resident memory usage."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

PROC_ROOT = "/proc"
TABLE_HEADER = "PID\tCPU%\tMemory (kB)\tName\n"


@dataclass
class ProcessInfo:
    """One process: its id, name, average CPU share and resident memory in kB."""

    pid: int
    name: str = ""
    cpu_usage: float = 0.0
    memory_kb: int = 0


def is_pid_name(name: str) -> bool:
    """True when a directory name is a non-empty run of ASCII digits."""
    return bool(name) and name.isascii() and name.isdigit()


def _first_line(path: Path) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.readline()
    except OSError:
        return None


def _field(tokens: list[str], position: int) -> int:
    """Integer at a 1-based position, or zero when the line is too short."""
    if len(tokens) < position:
        return 0
    return int(tokens[position - 1])


def read_process_name(pid: int, proc_root: str | os.PathLike = PROC_ROOT) -> str:
    """Second field of the process's stat line, or an empty string."""
    line = _first_line(Path(proc_root) / str(pid) / "stat")
    if line is None:
        return ""
    tokens = line.split()
    return tokens[1] if len(tokens) > 1 else ""


def read_uptime(proc_root: str | os.PathLike = PROC_ROOT) -> float:
    """System uptime in seconds, or zero when it cannot be read."""
    line = _first_line(Path(proc_root) / "uptime")
    if not line or not line.split():
        return 0.0
    try:
        return float(line.split()[0])
    except ValueError:
        return 0.0


def _read_rss_kb(path: Path) -> int:
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            for line in fh:
                parts = line.split()
                if len(parts) > 1 and parts[0] == "VmRSS:":
                    return int(parts[1])
    except OSError:
        pass
    return 0


def read_process_info(
    pid: int,
    uptime: float,
    proc_root: str | os.PathLike = PROC_ROOT,
    clock_ticks: int | None = None,
) -> ProcessInfo:
    """Gather name, average CPU usage since start and resident memory of a process."""
    if clock_ticks is None:
        clock_ticks = os.sysconf("SC_CLK_TCK")
    base = Path(proc_root) / str(pid)
    info = ProcessInfo(pid=pid)

    utime = stime = starttime = 0
    line = _first_line(base / "stat")
    if line is not None:
        tokens = line.split()
        if len(tokens) > 1:
            info.name = tokens[1]
        utime = _field(tokens, 14)
        stime = _field(tokens, 15)
        starttime = _field(tokens, 22)

    info.memory_kb = _read_rss_kb(base / "status")

    seconds = uptime - (starttime // clock_ticks)
    if seconds > 0:
        info.cpu_usage = ((utime + stime) / clock_ticks) / seconds * 100.0
    return info


def list_processes(proc_root: str | os.PathLike = PROC_ROOT) -> list[ProcessInfo]:
    """Every process found under the proc root, in ascending pid order."""
    root = Path(proc_root)
    uptime = read_uptime(root)
    with os.scandir(root) as entries:
        pids = sorted(int(e.name) for e in entries if is_pid_name(e.name) and e.is_dir())
    return [read_process_info(pid, uptime, root) for pid in pids]


def sort_processes(processes: Iterable[ProcessInfo], by_cpu: bool = True) -> list[ProcessInfo]:
    """Processes ordered from heaviest to lightest by CPU or by memory."""
    if by_cpu:
        return sorted(processes, key=lambda p: p.cpu_usage, reverse=True)
    return sorted(processes, key=lambda p: p.memory_kb, reverse=True)


def format_table(processes: Iterable[ProcessInfo], limit: int = 10) -> str:
    """Tab-separated table of at most ``limit`` processes under a header."""
    rows = [TABLE_HEADER]
    for proc, _ in zip(processes, range(max(limit, 0))):
        rows.append(f"{proc.pid}\t{proc.cpu_usage:g}\t{proc.memory_kb}\t{proc.name}\n")
    return "".join(rows)


def main(argv: list[str] | None = None) -> int:
    """Print the busiest processes, or all process names with --names."""
    parser = argparse.ArgumentParser(prog="processes", description="Show running processes.")
    parser.add_argument("--names", action="store_true", help="list every pid and name only")
    parser.add_argument("--by", choices=("cpu", "memory"), default="cpu", help="sort key")
    parser.add_argument("--limit", type=int, default=10, help="rows to show")
    parser.add_argument("--proc-root", default=PROC_ROOT, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    if args.names:
        print("Active processes :")
        with os.scandir(args.proc_root) as entries:
            pids = sorted(int(e.name) for e in entries if is_pid_name(e.name) and e.is_dir())
        for pid in pids:
            print(f"PID: {pid} | Name: {read_process_name(pid, args.proc_root)}")
        return 0

    processes = sort_processes(list_processes(args.proc_root), by_cpu=args.by == "cpu")
    print(format_table(processes, args.limit), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())