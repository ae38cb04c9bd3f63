"""Data models for storage-audit."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SafetyTier(str, Enum):
    """How safe a location is to reclaim."""

    SAFE = "safe"  # Regenerates on its own
    CAUTION = "caution"  # Deletable, minor side effect (re-download, rebuild)
    REVIEW = "review"  # Inspect first, may hold data you want


class CatalogEntry(BaseModel):
    """A well-known location checked on every audit."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Human-readable name")
    path: str = Field(..., min_length=1, description="Path to measure (supports ~ expansion)")
    tier: SafetyTier = Field(..., description="Safety tier for this location")
    advisory: str = Field("", description="Short cleanup hint, may be empty")


class CatalogSection(BaseModel):
    """A display group of catalog entries."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Section heading")
    icon: str = Field("", description="Icon shown before the heading")
    entries: list[CatalogEntry] = Field(default_factory=list)


class Finding(BaseModel):
    """A catalog entry whose measured size passed the report threshold."""

    label: str
    path: str
    size_bytes: int = Field(..., ge=0)
    tier: SafetyTier
    advisory: str = ""

    @property
    def is_safe(self) -> bool:
        return self.tier == SafetyTier.SAFE


class SectionFindings(BaseModel):
    """Findings for one catalog section, in catalog order."""

    name: str
    icon: str = ""
    findings: list[Finding] = Field(default_factory=list)


class RunTotals(BaseModel):
    """Totals accumulated over a single audit run."""

    reclaimable_safe_bytes: int = Field(0, ge=0)


class CatalogScan(BaseModel):
    """Result of measuring the whole catalog."""

    sections: list[SectionFindings] = Field(default_factory=list)
    totals: RunTotals = Field(default_factory=RunTotals)

    @property
    def findings(self) -> list[Finding]:
        """All findings across sections, in catalog order."""
        return [f for section in self.sections for f in section.findings]


class RankedMatch(BaseModel):
    """A directory found by a sweep, with its measured size."""

    path: str
    size_bytes: int = Field(..., ge=0)


class SweepResult(BaseModel):
    """Outcome of one directory-pattern sweep."""

    name: str = Field(..., description="Sweep identifier")
    title: str = Field(..., description="Section heading")
    noun: str = Field("directories", description="What was found, for summary lines")
    tip: str = Field("", description="Optional hint printed under the total")
    matches: list[RankedMatch] = Field(
        default_factory=list, description="Largest retained matches, size descending"
    )
    total_bytes: int = Field(0, ge=0, description="Sum over every retained match")
    retained_count: int = Field(0, ge=0, description="Retained matches before truncation")
    skipped: bool = Field(False, description="Search root was unavailable")


class CleanupTip(BaseModel):
    """One block of the cleanup cheat sheet."""

    model_config = ConfigDict(frozen=True)

    comment: str
    commands: list[str] = Field(default_factory=list)


class AuditReport(BaseModel):
    """Everything a single audit run produced."""

    user: str = Field(..., description="Login name of the invoking user")
    started_at: datetime = Field(default_factory=datetime.now)
    catalog: CatalogScan = Field(default_factory=CatalogScan)
    sweeps: list[SweepResult] = Field(default_factory=list)

    @property
    def reclaimable_safe_bytes(self) -> int:
        return self.catalog.totals.reclaimable_safe_bytes
