"""Core utilities for small game programs: vectors, matrices, hashing, containers, a simulated heap, input state and logging."""

__version__ = "0.1.9"

__all__ = ["vectors", "matrices", "hashing", "hash_table", "growing_array", "memory", "input", "logger"]