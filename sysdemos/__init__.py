"""Runnable demonstrations of sorting, data structures, threads, processes, signals, timers, progress output and sockets."""

__version__ = "0.1.0"