"""Read aggregate CPU time counters and compute CPU usage between samples."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import astuple, dataclass, fields

STAT_PATH = "/proc/stat"

_LABELS = (
    "User Time",
    "Nice Time",
    "System Time",
    "Idle Time",
    "Iowait Time",
    "Irq Time",
    "Softirq Time",
    "Steal Time",
    "Guest Time",
    "Guest_nice Time",
)


@dataclass(frozen=True)
class CPUTimes:
    """Cumulative CPU time counters, in clock ticks."""

    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0
    guest: int = 0
    guest_nice: int = 0

    def total(self) -> int:
        """Sum of every counter."""
        return sum(astuple(self))

    def idle_total(self) -> int:
        """Time spent idle or waiting for I/O."""
        return self.idle + self.iowait


def parse_cpu_line(line: str) -> CPUTimes:
    """Parse a ``cpu`` line; counters that are missing or unreadable stay zero."""
    tokens = line.split()[1 : 1 + len(fields(CPUTimes))]
    values: list[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            break
    return CPUTimes(*values)


def read_cpu_times(path: str = STAT_PATH) -> CPUTimes:
    """Read the aggregate counters from the first line of a stat file."""
    try:
        with open(path, encoding="utf-8") as fh:
            line = fh.readline()
    except OSError:
        return CPUTimes()
    return parse_cpu_line(line)


def cpu_usage(prev: CPUTimes, current: CPUTimes) -> float:
    """Percentage of non-idle time between two samples."""
    total_diff = current.total() - prev.total()
    idle_diff = current.idle_total() - prev.idle_total()
    if total_diff == 0:
        raise ValueError("no CPU time elapsed between the two samples")
    return (total_diff - idle_diff) * 100.0 / total_diff


def format_cpu_times(times: CPUTimes) -> str:
    """Render each counter and the total, one per line."""
    lines = [f"{label}: {value}" for label, value in zip(_LABELS, astuple(times))]
    lines.append(f"Total CPU Time : {times.total()}")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print the CPU counters and the usage over a short interval."""
    parser = argparse.ArgumentParser(prog="cpustat", description="Show CPU time counters and usage.")
    parser.add_argument("--stat", default=STAT_PATH, help="path of the stat file")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between samples")
    args = parser.parse_args(argv)

    print(format_cpu_times(read_cpu_times(args.stat)), end="")
    prev = read_cpu_times(args.stat)
    time.sleep(args.interval)
    current = read_cpu_times(args.stat)
    try:
        usage = cpu_usage(prev, current)
    except ValueError as exc:
        print(f"cpustat: {exc}", file=sys.stderr)
        return 1
    print(f"{usage:g}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())