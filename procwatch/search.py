"""Search several files for a keyword, one grep child process per file."""

from __future__ import annotations

import argparse
import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class SearchResult:
    """Outcome of searching one file: grep's output and exit status."""

    filename: str
    output: str
    returncode: int
    pid: int | None = None
    error: str = ""

    def succeeded(self) -> bool:
        """True when grep exited normally with status zero."""
        return self.returncode == 0


def search_files(keyword: str, files: Iterable[str]) -> list[SearchResult]:
    """Run ``grep keyword file`` for every file concurrently; results keep file order."""
    launched: list[tuple[str, subprocess.Popen[bytes] | None, str]] = []
    for filename in files:
        try:
            proc = subprocess.Popen(
                ["grep", keyword, filename],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
            )
        except OSError as exc:
            launched.append((filename, None, f"Failed to execute grep for file: {filename}: {exc}"))
        else:
            launched.append((filename, proc, ""))

    results: list[SearchResult] = []
    for filename, proc, error in launched:
        if proc is None:
            results.append(SearchResult(filename, "", 1, None, error))
            continue
        out, _ = proc.communicate()
        results.append(
            SearchResult(filename, out.decode("utf-8", errors="replace"), proc.returncode, proc.pid)
        )
    return results


def _status_line(result: SearchResult) -> str:
    if result.pid is None:
        return f"Child process for {result.filename} could not start: {result.error}"
    if result.returncode < 0:
        return f"Child process {result.pid} did not terminate normally."
    if result.returncode == 0:
        return f"Child process {result.pid} completed successfully."
    return f"Child process {result.pid} exited with status {result.returncode}."


def format_results(results: Iterable[SearchResult]) -> str:
    """Each file's name followed by the lines grep found in it."""
    return "".join(f"Results from {r.filename}:\n{r.output}\n" for r in results)


def main(argv: list[str] | None = None) -> int:
    """Search the given files for a keyword and print the combined results."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: search <keyword> <file1> <file2> ...", file=sys.stderr)
        return 1
    parser = argparse.ArgumentParser(prog="search", description="Search files for a keyword.")
    parser.add_argument("keyword")
    parser.add_argument("files", nargs="+")
    parsed = parser.parse_args(args)

    print(f"Searching for keyword: {parsed.keyword}")
    print("Files to search:")
    for filename in parsed.files:
        print(f"-{filename}")
    sys.stdout.flush()

    results = search_files(parsed.keyword, parsed.files)
    for result in results:
        if result.pid is None:
            print(result.error, file=sys.stderr)
        else:
            print(f"Child process created for file: {result.filename}")
    for result in results:
        print(_status_line(result))

    print("\nCombined Results:")
    print(format_results(results), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())