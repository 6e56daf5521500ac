[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procwatch"
version = "0.1.0"
description = "Small Linux process, CPU and memory monitoring tools, with process, pipe, shared-memory and socket utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["procfs", "monitoring", "processes", "cpu", "memory", "ipc", "sockets", "linux"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
procwatch-meminfo = "procwatch.meminfo:main"
procwatch-cpustat = "procwatch.cpustat:main"
procwatch-ps = "procwatch.processes:main"
procwatch-kill = "procwatch.killer:main"
procwatch-spawn = "procwatch.spawn:main"
procwatch-search = "procwatch.search:main"
procwatch-pipe = "procwatch.pipes:pipe_main"
procwatch-fifo-write = "procwatch.pipes:fifo_writer_main"
procwatch-fifo-read = "procwatch.pipes:fifo_reader_main"
procwatch-shm = "procwatch.shm:main"
procwatch-tcp-server = "procwatch.tcpchat:server_main"
procwatch-tcp-client = "procwatch.tcpchat:client_main"
procwatch-udp-server = "procwatch.udpecho:server_main"
procwatch-udp-client = "procwatch.udpecho:client_main"

[tool.hatch.build.targets.wheel]
packages = ["procwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
