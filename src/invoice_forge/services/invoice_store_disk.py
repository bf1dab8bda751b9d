"""
Disk-backed implementation of InvoiceStore.

Keeps the saved invoice in a diskcache directory so it survives process
restarts. diskcache is thread-safe and process-safe, which covers the
CLI being run from several shells at once.
"""

from pathlib import Path

import diskcache

from invoice_forge.lib import logs, paths
from invoice_forge.services.invoice_store import InvoiceStore

LOG = logs.logger(__file__)


class DiskInvoiceStore(InvoiceStore):
    """
    Saved-invoice slot stored on disk with diskcache.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path | None = None) -> None:
        """
        Open the store.

        Args:
            cache_dir: Directory for the cache files, created if missing.
                Defaults to paths.store_dir().
        """
        self.cache_dir = Path(cache_dir) if cache_dir else paths.store_dir()
        LOG.debug("DiskInvoiceStore - cache_dir:%s", self.cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def read_raw(self) -> object | None:
        return self._cache.get(self.key, default=None)

    def write_raw(self, text: str) -> None:
        self._cache.set(self.key, text)

    def clear(self) -> None:
        self._cache.delete(self.key)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
