"""Audit engine for storage-audit: measures the catalog and runs sweeps."""

import getpass
import logging
import os
from collections.abc import Callable, Iterable
from datetime import datetime
from itertools import islice
from pathlib import Path

from storage_audit.catalog import CATALOG
from storage_audit.config import MIN_REPORT_BYTES, MIN_SWEEP_BYTES, TOP_N, AuditConfig, SweepConfig
from storage_audit.finder import find_matching_directories
from storage_audit.models import (
    AuditReport,
    CatalogScan,
    CatalogSection,
    Finding,
    RankedMatch,
    RunTotals,
    SafetyTier,
    SectionFindings,
    SweepResult,
)
from storage_audit.sizing import measure_path

logger = logging.getLogger(__name__)

Measure = Callable[[str | Path], int]


def resolve_path(path: str, home: Path | str | None = None) -> Path:
    """
    Expand ~ and environment variables in a catalog path.

    Args:
        path: Path template, e.g. "~/Library/Caches" or "/private/var/log"
        home: Home directory to use for ~ (default: the current user's)

    Returns:
        Expanded path
    """
    expanded = os.path.expandvars(path)
    if home is not None and (expanded == "~" or expanded.startswith("~/")):
        return Path(home) / expanded[2:]
    return Path(os.path.expanduser(expanded))


def get_home() -> Path:
    return Path.home()


def get_user() -> str:
    """Login name of the invoking user."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def scan_catalog(
    catalog: Iterable[CatalogSection],
    measure: Measure = measure_path,
    home: Path | str | None = None,
    min_bytes: int = MIN_REPORT_BYTES,
) -> CatalogScan:
    """
    Measure every catalog entry, in catalog order.

    Entries at or below ``min_bytes`` produce no finding and add nothing to
    the totals. SAFE findings accumulate into the returned totals.

    Args:
        catalog: Sections to measure
        measure: Size function (bytes for a path)
        home: Home directory used to expand ~
        min_bytes: Report threshold

    Returns:
        Findings grouped by section, plus run totals
    """
    sections: list[SectionFindings] = []
    totals = RunTotals()

    for section in catalog:
        findings: list[Finding] = []
        for entry in section.entries:
            path = resolve_path(entry.path, home)
            size = measure(path)
            if size <= min_bytes:
                continue

            findings.append(
                Finding(
                    label=entry.label,
                    path=str(path),
                    size_bytes=size,
                    tier=entry.tier,
                    advisory=entry.advisory,
                )
            )
            if entry.tier == SafetyTier.SAFE:
                totals.reclaimable_safe_bytes += size

        logger.debug("Section %s: %d findings", section.name, len(findings))
        sections.append(SectionFindings(name=section.name, icon=section.icon, findings=findings))

    return CatalogScan(sections=sections, totals=totals)


def collect_candidates(
    root: Path,
    patterns: Iterable[str],
    max_depth: int,
    exclude: Iterable[str] = (),
    per_pattern_cap: int = 30,
) -> list[Path]:
    """
    Find sweep candidates, one pattern at a time.

    Each pattern contributes at most ``per_pattern_cap`` directories (the
    first ones found). Results are pooled in pattern order without
    duplicates.
    """
    exclude = list(exclude)
    candidates: list[Path] = []
    seen: set[Path] = set()

    for pattern in patterns:
        found = find_matching_directories(root, {pattern}, max_depth, exclude)
        for path in islice(found, per_pattern_cap):
            if path in seen:
                continue
            seen.add(path)
            candidates.append(path)

    return candidates


def rank_sweep(
    candidates: Iterable[Path | str],
    measure: Measure = measure_path,
    min_bytes: int = MIN_SWEEP_BYTES,
    top_n: int = TOP_N,
) -> tuple[list[RankedMatch], int, int]:
    """
    Measure candidates and rank the large ones.

    Args:
        candidates: Directories to measure
        measure: Size function
        min_bytes: Matches at or below this size are discarded
        top_n: Number of matches to return

    Returns:
        Tuple of (top matches by size descending, total over all retained
        matches, number of retained matches)
    """
    retained: list[RankedMatch] = []
    for candidate in candidates:
        size = measure(candidate)
        if size > min_bytes:
            retained.append(RankedMatch(path=str(candidate), size_bytes=size))

    total = sum(m.size_bytes for m in retained)

    # sorted() is stable, so equal sizes keep discovery order
    ranked = sorted(retained, key=lambda m: m.size_bytes, reverse=True)
    return ranked[:top_n], total, len(retained)


def run_sweep(
    sweep: SweepConfig,
    root: Path | str,
    measure: Measure = measure_path,
) -> SweepResult:
    """
    Run one directory-name sweep below ``root``.

    An unusable root skips the sweep instead of failing the audit.
    """
    root = Path(root)
    result = SweepResult(name=sweep.name, title=sweep.title, noun=sweep.noun, tip=sweep.tip)

    if not root.is_dir() or not os.access(root, os.R_OK | os.X_OK):
        logger.info("Skipping %s sweep: %s is not a readable directory", sweep.name, root)
        result.skipped = True
        return result

    candidates = collect_candidates(
        root,
        sweep.patterns,
        sweep.max_depth,
        sweep.exclude,
        sweep.per_pattern_cap,
    )
    logger.debug("Sweep %s: %d candidates under %s", sweep.name, len(candidates), root)

    matches, total, retained = rank_sweep(candidates, measure, sweep.min_bytes, sweep.top_n)
    result.matches = matches
    result.total_bytes = total
    result.retained_count = retained
    return result


def run_audit(
    config: AuditConfig,
    home: Path | str | None = None,
    measure: Measure = measure_path,
    catalog: Iterable[CatalogSection] = CATALOG,
    progress: Callable[[str], None] | None = None,
) -> AuditReport:
    """
    Perform a full audit: the catalog first, then every sweep in order.

    Args:
        config: Thresholds and sweep definitions
        home: Home directory (default: the current user's)
        measure: Size function
        catalog: Sections to measure
        progress: Optional callback(description) before each step

    Returns:
        AuditReport with catalog findings, totals, and sweep results
    """
    home = Path(home) if home is not None else get_home()
    report = AuditReport(user=get_user(), started_at=datetime.now())

    if progress:
        progress("Measuring known locations...")
    report.catalog = scan_catalog(catalog, measure, home, config.min_report_bytes)

    for sweep in config.sweeps:
        if progress:
            progress(f"Scanning for {sweep.noun}...")
        report.sweeps.append(run_sweep(sweep, home, measure))

    logger.info(
        "Audit done: %d findings, %d bytes reclaimable",
        len(report.catalog.findings),
        report.reclaimable_safe_bytes,
    )
    return report
