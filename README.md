# procwatch

Small command-line tools for looking at a Linux system through `/proc`,
plus utilities that show process creation, pipes, named pipes, shared
memory and TCP/UDP sockets at work.

Only the Python standard library is used. The tools run on Linux (the
process and IPC ones need `os.fork`, and `procwatch-search` needs `grep`
on the `PATH`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Monitoring commands

| Command | What it does |
|---|---|
| `procwatch-meminfo` | Prints total and free RAM in whole MB and GB. |
| `procwatch-cpustat [--stat PATH] [--interval SECONDS]` | Prints the aggregate CPU time counters from the first line of `/proc/stat` and their total, then the CPU usage measured between two samples taken `--interval` seconds apart (default 1). |
| `procwatch-ps [--by cpu\|memory] [--limit N]` | Prints a tab-separated table of processes with their average CPU share since start and resident memory (VmRSS, kB), heaviest first, ten rows by default. |
| `procwatch-ps --names` | Lists every PID with its name instead. |
| `procwatch-kill` | Shows the top ten processes by CPU, asks for a PID and sends it `SIGKILL`. Entering `0`, nothing or a non-number skips the kill. |
| `procwatch-kill --watch` | Does the same in a loop, clearing the screen each time, until you answer `q` (or input ends). |

## Process and IPC commands

| Command | What it does |
|---|---|
| `procwatch-spawn {chain,fan,chainfan} [N]` | Creates a chain of N processes, a fan of N-1 children, or a chain whose last member forks a fan, and each process reports its PID. Without N it asks for the number. |
| `procwatch-search KEYWORD FILE...` | Runs `grep KEYWORD FILE` for every file in its own child process, reports each child's exit status and prints the combined results in file order. |
| `procwatch-pipe [MESSAGE]` | The parent sends a message to a forked child over a pipe (the child reads at most 100 bytes); both the sent and the received message are printed. |
| `procwatch-fifo-write [PATH]` | Reads a line from you and writes it to `PATH` (default `bufferpipe`). Create the named pipe beforehand, for example with `mkfifo bufferpipe`; otherwise a regular file is written. |
| `procwatch-fifo-read [PATH]` | Reads one line from `PATH` (default `bufferpipe`) and prints it. |
| `procwatch-shm` / `procwatch-shm counter` | Parent and forked child update one shared integer in turn (10, then +90 by the child, then +110 by the parent) and print each update. |
| `procwatch-shm write [VALUE] [--name NAME]` | Stores an integer (default 50) in a named segment, creating it. |
| `procwatch-shm read [--name NAME] [--keep]` | Prints the integer in a named segment and removes the segment unless `--keep` is given. |

Named segments are files under `/dev/shm` (or the temporary directory when
that does not exist) unless NAME is an absolute path; the default name is
`procwatch-shm`.

## Socket commands

| Command | What it does |
|---|---|
| `procwatch-tcp-server [--port PORT] [--show-fd]` | Binds to the given port (an ephemeral one by default), prints it, greets the first client with the current time and an `ITER.` line, then answers each client message with a line you type. `--show-fd` also prints the listening socket's descriptor. |
| `procwatch-tcp-client HOST PORT` | Connects to the server and sends each line you type, printing the server's answer. |
| `procwatch-udp-server [--port PORT]` | Binds a UDP port (ephemeral by default), prints it, receives one number and replies with a word you type, padded or cut to 50 bytes. |
| `procwatch-udp-client PORT [--host HOST]` | Asks for a number, sends it to the server (default host `127.0.0.1`) and prints the reply. |

## Using the library

The monitoring pieces are plain functions:

```python
from procwatch.processes import list_processes, sort_processes, format_table
from procwatch.cpustat import read_cpu_times, cpu_usage
from procwatch.meminfo import get_memory_info, format_memory_info

procs = sort_processes(list_processes("/proc"), True)
print(format_table(procs, 10))

print(format_memory_info(get_memory_info()))
```

`read_process_name`, `read_uptime`, `read_process_info` and
`list_processes` take the `/proc` root as an argument, so they can be
pointed at a prepared directory tree. `parse_cpu_line` and `cpu_usage`
work on plain strings and `CPUTimes` values; `cpu_usage` raises
`ValueError` when no time passed between the two samples.

Other reusable parts: `procwatch.search.search_files` (returns a
`SearchResult` per file), `procwatch.pipes.send_to_child`,
`write_fifo`/`read_fifo`, `procwatch.shm.shared_counter`,
`write_value`/`read_value`, `procwatch.tcpchat.serve`/`chat`/`greeting`,
and `procwatch.udpecho.serve_once`/`ask` with the `encode_*`/`decode_*`
helpers.

## What it does not do

- The tools read a single snapshot; `procwatch-ps` shows average CPU use
  since each process started, not current use.
- The TCP server serves exactly one client and then exits; the UDP server
  answers exactly one datagram.
- Shared-memory segments are memory-mapped files, not System V segments.