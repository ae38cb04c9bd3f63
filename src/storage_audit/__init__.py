"""storage-audit - read-only audit of reclaimable disk space."""

__version__ = "1.0.0"
