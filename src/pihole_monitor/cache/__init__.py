"""Single-slot cache of the last known-good sample."""

from pihole_monitor.cache.store import SampleStore

__all__ = ["SampleStore"]
