"""Linux process, CPU and memory monitoring tools with process, pipe, shared-memory and socket utilities."""

__version__ = "0.1.0"