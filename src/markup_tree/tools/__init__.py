"""Tooling for inspecting node trees."""

from .memory import MemoryStats, TreeMemoryMonitor, tree_statistics

__all__ = ["MemoryStats", "TreeMemoryMonitor", "tree_statistics"]
