"""
In-Memory Metrics Collector.

A simple metrics collector that stores metrics in memory.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Get a summary of all collected metrics."""
        summary = {}
        for name, entries in self._metrics.items():
            if entries:
                values = [e["value"] for e in entries]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
        return summary

    def get_entries(self, name: str) -> List[Dict[str, Any]]:
        """Raw entries recorded under a metric name."""
        return list(self._metrics.get(name, []))

    def clear(self) -> None:
        """Clear all metrics."""
        self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        """Internal recording method."""
        self._metrics.setdefault(name, []).append(
            {
                "type": metric_type,
                "value": value,
                "tags": tags or {},
                "timestamp": datetime.now().isoformat(),
            }
        )
