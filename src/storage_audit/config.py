"""Audit thresholds and sweep definitions for storage-audit."""

from pydantic import BaseModel, Field, field_validator

from storage_audit.sizing import MIB

# Catalog entries at or below this size are not reported
MIN_REPORT_BYTES = 1 * MIB

# Sweep matches at or below this size are discarded
MIN_SWEEP_BYTES = 50 * MIB

TOP_N = 10


class SweepConfig(BaseModel):
    """A directory-name sweep over the home directory."""

    name: str = Field(..., description="Sweep identifier")
    title: str = Field(..., description="Section heading")
    noun: str = Field(..., description="What the sweep finds, used in totals")
    patterns: list[str] = Field(..., min_length=1, description="Directory names to match")
    max_depth: int = Field(..., gt=0, description="Deepest level searched below the root")
    per_pattern_cap: int = Field(..., gt=0, description="Candidates kept per pattern")
    exclude: list[str] = Field(
        default_factory=list,
        description="Extra path fragments to skip (hidden segments are always skipped)",
    )
    min_bytes: int = Field(MIN_SWEEP_BYTES, ge=0, description="Minimum size to retain a match")
    top_n: int = Field(TOP_N, gt=0, description="Matches shown in the report")
    tip: str = Field("", description="Hint printed under the sweep total")

    @field_validator("patterns")
    @classmethod
    def _no_empty_patterns(cls, value: list[str]) -> list[str]:
        if any(not p or "/" in p for p in value):
            raise ValueError("patterns must be plain directory names")
        return value


class AuditConfig(BaseModel):
    """Settings for one audit run."""

    min_report_bytes: int = Field(MIN_REPORT_BYTES, ge=0)
    sweeps: list[SweepConfig] = Field(default_factory=list)


NODE_MODULES_SWEEP = SweepConfig(
    name="node_modules",
    title="LARGE node_modules SCAN",
    noun="node_modules",
    patterns=["node_modules"],
    max_depth=6,
    per_pattern_cap=30,
    tip="Use 'npx npkill' to interactively delete node_modules",
)

BUILD_ARTIFACTS_SWEEP = SweepConfig(
    name="build_artifacts",
    title="LARGE build/target DIRECTORY SCAN",
    noun="build artifacts",
    patterns=["target", "build", "dist", ".next", ".nuxt", "__pycache__"],
    max_depth=5,
    per_pattern_cap=20,
    exclude=["/node_modules/", "/Library/"],
)


def default_config() -> AuditConfig:
    """Build the default audit configuration."""
    return AuditConfig(
        sweeps=[
            NODE_MODULES_SWEEP.model_copy(deep=True),
            BUILD_ARTIFACTS_SWEEP.model_copy(deep=True),
        ],
    )
