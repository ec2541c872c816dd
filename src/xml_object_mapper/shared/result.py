"""Metrics collected while mapping an object graph onto an entity tree."""

from dataclasses import dataclass


@dataclass
class BuildMetrics:
    """Counters for a single object-to-tree build."""

    entities_created: int = 0
    attributes_written: int = 0
    targets_ignored: int = 0
    processing_time_ms: float = 0.0

    @property
    def entities_per_second(self) -> float:
        """Calculate entities created per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.entities_created * 1000.0) / self.processing_time_ms

    def reset(self) -> None:
        self.entities_created = 0
        self.attributes_written = 0
        self.targets_ignored = 0
        self.processing_time_ms = 0.0
