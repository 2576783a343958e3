"""Heap-based non-preemptive task scheduler simulation."""

__version__ = "0.1.0"
