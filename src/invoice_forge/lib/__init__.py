"""
Low level helpers shared across Invoice Forge.

Modules:
    ids: Line item identifier generation
    logs: Logging utilities
    objects: JSON serialization
    paths: Filesystem locations for on-disk state
"""

from invoice_forge.lib import ids, logs, objects, paths

__all__ = ["ids", "logs", "objects", "paths"]
