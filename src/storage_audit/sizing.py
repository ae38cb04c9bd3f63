"""Disk usage measurement and size formatting for storage-audit."""

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

KIB = 1024
MIB = 1024**2
GIB = 1024**3

# st_blocks is always in 512-byte units, regardless of the filesystem block size
BLOCK_UNIT = 512


def allocated_size(st: os.stat_result) -> int:
    """Bytes actually allocated on disk for a stat result."""
    blocks = getattr(st, "st_blocks", None)
    if blocks is None:
        return st.st_size
    return blocks * BLOCK_UNIT


def get_directory_size(path: Path) -> int:
    """
    Sum the allocated size of everything below a directory.

    Uses os.scandir without following symlinks. Hard links are counted once.
    Directory entries themselves are not counted, only their contents.
    Unreadable entries and subtrees are skipped.

    Args:
        path: Directory to measure

    Returns:
        Total allocated bytes (best effort)
    """
    total = 0
    seen_inodes: set[tuple[int, int]] = set()
    pending = [path]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(Path(entry.path))
                            continue
                        st = entry.stat(follow_symlinks=False)
                    except OSError as e:
                        logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
                        continue

                    if st.st_nlink > 1:
                        key = (st.st_dev, st.st_ino)
                        if key in seen_inodes:
                            continue
                        seen_inodes.add(key)
                    total += allocated_size(st)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", current, e)

    return total


def measure_path(path: str | Path) -> int:
    """
    Measure the on-disk footprint of a file or directory.

    Missing paths are expected (tools that are not installed) and measure 0.
    Never raises.

    Args:
        path: File or directory to measure

    Returns:
        Allocated size in bytes
    """
    target = Path(path)
    try:
        st = target.stat()
    except OSError:
        return 0

    if stat.S_ISDIR(st.st_mode):
        return get_directory_size(target)
    if stat.S_ISREG(st.st_mode):
        return allocated_size(st)
    return 0


def format_size(size_bytes: int) -> str:
    """Format bytes to a human-readable string (binary units)."""
    size_bytes = max(size_bytes, 0)
    if size_bytes >= GIB:
        return f"{size_bytes * 100 // GIB / 100:.2f} GB"
    elif size_bytes >= MIB:
        return f"{size_bytes * 10 // MIB / 10:.1f} MB"
    elif size_bytes >= KIB:
        return f"{size_bytes // KIB} KB"
    else:
        return f"{size_bytes} B"
