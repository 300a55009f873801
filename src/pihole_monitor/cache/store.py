"""Persistence of the most recent successfully fetched Sample.

The cache is itself the fallback path, so storage problems never propagate:
they are logged and reported as an absent cache.
"""

from typing import Optional

import structlog
from pydantic import ValidationError

from pihole_monitor.models import Sample
from pihole_monitor.secrets.base import SecretStore, SecretStoreError

log = structlog.get_logger(__name__)


class SampleStore:
    """Durable single-slot storage for the last known-good Sample."""

    def __init__(self, store: SecretStore, key: str = "pihole_monitor_cache_v1") -> None:
        """Initialize the sample store.

        Args:
            store: Secret store holding the serialized sample
            key: Key of the cache entry
        """
        self.store = store
        self.key = key

    def save(self, sample: Sample) -> None:
        """Overwrite the cached sample.

        The whole sample is written in one store operation. The zero-state
        sample is never persisted.
        """
        if sample.is_zero_state:
            log.debug("sample_cache_skip_zero_state")
            return
        try:
            self.store.set(self.key, sample.to_json())
        except SecretStoreError as e:
            log.warning("sample_cache_write_failed", key=self.key, error=str(e))
            return
        log.debug("sample_cached", key=self.key, fetched_at=sample.fetched_at.isoformat())

    def load(self) -> Optional[Sample]:
        """Return the cached sample, or None if absent or unreadable."""
        try:
            if not self.store.has(self.key):
                return None
            raw = self.store.get(self.key)
        except (SecretStoreError, KeyError) as e:
            log.warning("sample_cache_unreadable", key=self.key, error=str(e))
            return None

        try:
            sample = Sample.from_json(raw)
        except ValidationError as e:
            log.warning("sample_cache_corrupted", key=self.key, error=str(e))
            return None

        if sample.is_zero_state:
            return None
        return sample

    def clear(self) -> None:
        """Remove the cached sample. Clearing an empty cache is a no-op."""
        try:
            self.store.remove(self.key)
        except SecretStoreError as e:
            log.warning("sample_cache_clear_failed", key=self.key, error=str(e))
            return
        log.info("sample_cache_cleared", key=self.key)
