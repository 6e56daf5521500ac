"""Report total and free physical memory of the machine."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass

_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024


@dataclass(frozen=True)
class MemoryInfo:
    """Physical memory figures, in bytes."""

    total_ram: int
    free_ram: int


def get_memory_info() -> MemoryInfo:
    """Read total and free physical memory from the operating system."""
    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
        total_pages = os.sysconf("SC_PHYS_PAGES")
        free_pages = os.sysconf("SC_AVPHYS_PAGES")
    except (ValueError, OSError, AttributeError) as exc:
        raise OSError("system memory information is unavailable") from exc
    if page_size <= 0 or total_pages < 0 or free_pages < 0:
        raise OSError("system memory information is unavailable")
    return MemoryInfo(total_ram=total_pages * page_size, free_ram=free_pages * page_size)


def format_memory_info(info: MemoryInfo) -> str:
    """Render memory figures in whole megabytes and gigabytes, one per line."""
    lines = [
        f"total ram: {info.total_ram // _MIB}MB",
        f"total ram: {info.total_ram // _GIB}GB",
        f"free ram: {info.free_ram // _MIB}MB",
        f"free ram: {info.free_ram // _GIB}GB",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print the machine's memory figures."""
    parser = argparse.ArgumentParser(prog="meminfo", description="Show total and free RAM.")
    parser.parse_args(argv)
    try:
        info = get_memory_info()
    except OSError:
        return 0
    print(format_memory_info(info), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())