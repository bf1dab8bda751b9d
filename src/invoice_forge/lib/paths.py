"""
Path utilities for Invoice Forge.

Resolves where on-disk state such as the saved invoice slot lives.
"""

import os
import tempfile
from pathlib import Path

_STORE_DIR_KEY = "INVOICE_FORGE_STORE_DIR"


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def store_dir() -> Path:
    """
    Return the directory backing the local invoice store.

    Uses INVOICE_FORGE_STORE_DIR when set, otherwise a folder in the
    system temp directory.
    """
    configured = os.getenv(_STORE_DIR_KEY)
    if configured:
        return Path(configured).expanduser()
    return temp_dir() / "invoice_forge"
