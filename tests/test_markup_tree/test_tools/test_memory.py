"""Tests for tree memory measurement."""

from collections import namedtuple
from unittest.mock import MagicMock, patch

import psutil
import pytest

from markup_tree.shared.config import MemoryMonitorConfig
from markup_tree.tools.memory import MemoryStats, TreeMemoryMonitor, tree_statistics
from markup_tree.tree import ELEMENT, TEXT, Node

MemoryInfo = namedtuple("MemoryInfo", ["rss", "vms"])


def build_tree():
    return Node(ELEMENT, name="html", children=[
        Node(ELEMENT, name="body", children=[
            Node(ELEMENT, name="p", children=[Node(TEXT, value="hi")]),
        ]),
        Node(TEXT, value="tail"),
    ])


@pytest.fixture
def process():
    mock_process = MagicMock()
    mock_process.memory_info.return_value = MemoryInfo(rss=64 * 1024 * 1024, vms=128 * 1024 * 1024)
    mock_process.memory_percent.return_value = 1.5
    with patch("markup_tree.tools.memory.psutil.Process", return_value=mock_process):
        yield mock_process


class TestTreeStatistics:
    """Test suite for tree_statistics."""

    def test_counts(self):
        """Test node count and depth."""
        assert tree_statistics(build_tree()) == (5, 3)

    def test_single_node(self):
        """Test a lone node."""
        assert tree_statistics(Node(TEXT)) == (1, 0)

    def test_deep_tree(self):
        """Test that deep trees are handled without recursion."""
        current = Node(TEXT, value="x")
        for _ in range(3000):
            current = Node(ELEMENT).append_child(current)

        assert tree_statistics(current) == (3001, 3000)


class TestMemoryStats:
    """Test suite for MemoryStats."""

    def test_to_dict(self):
        """Test dictionary conversion."""
        stats = MemoryStats(resident_memory_mb=1.0, node_count=2, timestamp=10.0)

        assert stats.to_dict() == {
            "resident_memory_mb": 1.0,
            "virtual_memory_mb": 0.0,
            "memory_percent": 0.0,
            "node_count": 2,
            "max_depth": 0,
            "timestamp": 10.0,
        }


class TestTreeMemoryMonitor:
    """Test suite for TreeMemoryMonitor."""

    def test_snapshot(self, process):
        """Test process figures and tree statistics in a snapshot."""
        monitor = TreeMemoryMonitor()

        stats = monitor.snapshot(build_tree())

        assert stats.resident_memory_mb == 64.0
        assert stats.virtual_memory_mb == 128.0
        assert stats.memory_percent == 1.5
        assert stats.node_count == 5
        assert stats.max_depth == 3

    def test_snapshot_without_tree(self, process):
        """Test that tree figures stay zero without a tree."""
        stats = TreeMemoryMonitor().snapshot()

        assert stats.node_count == 0
        assert stats.max_depth == 0

    def test_psutil_failure_is_logged(self, process):
        """Test that a psutil failure leaves zeroed process figures."""
        process.memory_info.side_effect = psutil.AccessDenied()

        stats = TreeMemoryMonitor().snapshot()

        assert stats.resident_memory_mb == 0.0

    def test_measure(self, process):
        """Test measuring an operation that builds a tree."""
        monitor = TreeMemoryMonitor(correlation_id="run-1")

        result, before, after = monitor.measure(build_tree)

        assert Node.is_node(result)
        assert before.node_count == 0
        assert after.node_count == 5
        assert monitor.history() == [before, after]

    def test_measure_passes_arguments(self, process):
        """Test that arguments reach the operation."""
        monitor = TreeMemoryMonitor()

        result, _, after = monitor.measure(lambda a, b=0: a + b, 1, b=2)

        assert result == 3
        assert after.node_count == 0

    def test_history_limit_and_clear(self, process):
        """Test history bounds and clearing."""
        monitor = TreeMemoryMonitor(config=MemoryMonitorConfig(history_size=3))

        snapshots = [monitor.snapshot() for _ in range(5)]

        assert monitor.history() == snapshots[-3:]
        assert monitor.history(limit=1) == snapshots[-1:]
        assert monitor.history(limit=0) == []

        monitor.clear_history()
        assert monitor.history() == []

    def test_collect_garbage(self, process):
        """Test that garbage collection runs when configured."""
        monitor = TreeMemoryMonitor(config=MemoryMonitorConfig(collect_garbage=True))

        with patch("markup_tree.tools.memory.gc.collect") as collect:
            monitor.snapshot()

        collect.assert_called_once_with()
