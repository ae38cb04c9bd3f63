"""Bounded discovery of directories by name.

Walks a root directory looking for directories whose name matches one of a
set of names (like node_modules, build, target), skipping hidden segments and
any caller-supplied path fragments.
"""

import logging
import os
from collections.abc import Collection, Generator
from pathlib import Path

logger = logging.getLogger(__name__)

# Any path segment starting with a dot
HIDDEN_SEGMENT = "/."


def _is_excluded(relative: str, exclude: Collection[str]) -> bool:
    return any(fragment in relative for fragment in exclude)


def find_matching_directories(
    root: Path,
    names: Collection[str],
    max_depth: int,
    exclude: Collection[str] = (),
) -> Generator[Path, None, None]:
    """
    Find directories named like one of ``names`` below ``root``.

    Exclusion fragments are matched against the path relative to ``root``,
    written with a leading "/" (e.g. "/project/node_modules"). Hidden
    segments are always excluded. Matches are not descended into, and
    neither are directories whose path already contains an exclusion.

    Args:
        root: Directory to start from (depth 0)
        names: Directory names to match exactly
        max_depth: Deepest level evaluated; children of root are level 1
        exclude: Extra path fragments that disqualify a directory

    Yields:
        Matching directories in traversal order
    """
    fragments = {HIDDEN_SEGMENT, *exclude}
    yield from _walk(Path(root), "", frozenset(names), max_depth, fragments, 1)


def _walk(
    directory: Path,
    relative: str,
    names: frozenset[str],
    max_depth: int,
    exclude: set[str],
    depth: int,
) -> Generator[Path, None, None]:
    if depth > max_depth:
        return

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return

    for entry in entries:
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
        except OSError:
            continue

        entry_relative = f"{relative}/{entry.name}"

        if entry.name in names and not _is_excluded(entry_relative, exclude):
            yield Path(entry.path)
            # Don't look for more matches inside a match
            continue

        if _is_excluded(entry_relative + "/", exclude):
            continue

        yield from _walk(Path(entry.path), entry_relative, names, max_depth, exclude, depth + 1)
