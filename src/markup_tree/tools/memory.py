"""Memory measurement for node trees.

Pairs process memory figures reported by psutil with the size and depth of a
tree, so the cost of building or transforming large documents can be tracked
over time.
"""

import gc
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

import psutil

from markup_tree.shared.config import MemoryMonitorConfig
from markup_tree.shared.logging import get_logger
from markup_tree.tree import Node

_MEGABYTE = 1024 * 1024


@dataclass
class MemoryStats:
    """Memory usage statistics."""

    # Process memory information
    resident_memory_mb: float = 0.0
    virtual_memory_mb: float = 0.0
    memory_percent: float = 0.0

    # Tree information, zero when no tree was measured
    node_count: int = 0
    max_depth: int = 0

    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        """Convert memory stats to dictionary representation."""
        return {
            "resident_memory_mb": self.resident_memory_mb,
            "virtual_memory_mb": self.virtual_memory_mb,
            "memory_percent": self.memory_percent,
            "node_count": self.node_count,
            "max_depth": self.max_depth,
            "timestamp": self.timestamp,
        }


def tree_statistics(root: Node) -> Tuple[int, int]:
    """Count the nodes of a tree and find its depth.

    Args:
        root: The node to start from; it counts as depth 0

    Returns:
        Tuple of (node_count, max_depth)
    """
    node_count = 0
    max_depth = 0
    stack: List[Tuple[Node, int]] = [(root, 0)]

    while stack:
        node, depth = stack.pop()
        node_count += 1
        if depth > max_depth:
            max_depth = depth
        stack.extend((child, depth + 1) for child in node.children)

    return node_count, max_depth


class TreeMemoryMonitor:
    """Take memory snapshots around tree operations.

    Examples:
        >>> monitor = TreeMemoryMonitor()
        >>> document, before, after = monitor.measure(build_document)
        >>> after.resident_memory_mb - before.resident_memory_mb
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        config: Optional[MemoryMonitorConfig] = None,
    ):
        """Initialize tree memory monitor.

        Args:
            correlation_id: Optional correlation ID for request tracking
            config: Monitor configuration, defaults to ``MemoryMonitorConfig()``
        """
        self.config = config or MemoryMonitorConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "tree_memory_monitor")

        self._process = psutil.Process()
        self._history: Deque[MemoryStats] = deque(maxlen=self.config.history_size)

    def snapshot(self, root: Optional[Node] = None) -> MemoryStats:
        """Record the current memory usage.

        Args:
            root: Optional tree whose size is recorded with the snapshot

        Returns:
            The recorded statistics
        """
        if self.config.collect_garbage:
            gc.collect()

        stats = MemoryStats()

        try:
            memory_info = self._process.memory_info()
            stats.resident_memory_mb = memory_info.rss / _MEGABYTE
            stats.virtual_memory_mb = memory_info.vms / _MEGABYTE
            stats.memory_percent = self._process.memory_percent()
        except psutil.Error as e:
            self.logger.warning(f"Failed to get process memory info: {e}")

        if root is not None:
            stats.node_count, stats.max_depth = tree_statistics(root)

        self._history.append(stats)

        self.logger.debug("Memory snapshot taken", extra=stats.to_dict())

        return stats

    def measure(
        self, operation: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> Tuple[Any, MemoryStats, MemoryStats]:
        """Run an operation between two snapshots.

        When the operation returns a ``Node`` the second snapshot includes its
        tree statistics.

        Returns:
            Tuple of (result, before, after)
        """
        before = self.snapshot()
        result = operation(*args, **kwargs)
        after = self.snapshot(result if isinstance(result, Node) else None)

        self.logger.info(
            "Operation measured",
            extra={
                "operation": getattr(operation, "__name__", repr(operation)),
                "resident_delta_mb": after.resident_memory_mb - before.resident_memory_mb,
                "node_count": after.node_count,
            },
        )

        return result, before, after

    def history(self, limit: int = 100) -> List[MemoryStats]:
        """Get recorded snapshots, oldest first.

        Args:
            limit: Maximum number of snapshots to return

        Returns:
            The most recent ``limit`` snapshots
        """
        if limit <= 0:
            return []
        return list(self._history)[-limit:]

    def clear_history(self) -> None:
        self._history.clear()
