"""General-purpose binary streams, text parsing, debug logging, containers, pools, threads and timers."""

__version__ = "0.1.0"