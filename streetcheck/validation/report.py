"""ValidationResult model, result assembly and Markdown report generation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from streetcheck.config import MESSAGE_PRECISION
from streetcheck.geometry.schema import CrossSection
from streetcheck.rules.catalog import RuleKey
from streetcheck.rules.models import RuleSources, RuleTable, StandardSelection


class ViolationKind(str, Enum):
    """Category of a violation; every kind makes the result fail."""

    MISSING = "missing"
    BELOW_MINIMUM = "below_minimum"
    ADVISORY = "advisory"


class Violation(BaseModel):
    """A single failed check, tagged with the offending field."""

    model_config = ConfigDict(frozen=True)

    field: str
    """Request field or derived quantity the violation refers to."""

    message: str
    kind: ViolationKind = ViolationKind.BELOW_MINIMUM

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "kind": self.kind.value, "message": self.message}


class Summary(BaseModel):
    """Inputs as validated plus every derived width, in metres."""

    model_config = ConfigDict(frozen=True)

    input: CrossSection
    sidewalk_total_m: float
    cycle_width_per_side_m: float
    cycle_total_m: float
    parking_width_m: float
    lanes_min_width_m: float
    required_width_m: float
    approx_lane_width_m: float

    def computed(self) -> dict[str, float]:
        return self.model_dump(exclude={"input"})

    def to_dict(self) -> dict[str, Any]:
        return {"input": self.input.to_dict(), "computed": self.computed()}


class ValidationResult(BaseModel):
    """Complete, immutable verdict for one cross-section."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    violations: tuple[Violation, ...] = ()
    summary: Summary | None = None
    """Absent when required inputs were missing and no widths were computed."""

    rules: RuleTable
    standards: StandardSelection | None = None
    """Selection that produced *rules*; None for a hand-built table."""

    provenance: RuleSources | None = None
    """Source of every value in *rules*; None for a hand-built table."""

    @property
    def verdict(self) -> str:
        return "accepted" if self.ok else "rejected"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict representation."""
        return {
            "ok": self.ok,
            "verdict": self.verdict,
            "violations": [v.to_dict() for v in self.violations],
            "summary": self.summary.to_dict() if self.summary is not None else None,
            "rules": self.rules.as_dict(),
            "standards": self.standards.to_dict() if self.standards is not None else None,
            "provenance": self.provenance.as_dict() if self.provenance is not None else None,
        }

    def to_markdown(self) -> str:
        """Render the result as a Markdown report."""
        lines: list[str] = []

        lines.append("# Cross-Section Check")
        lines.append("")
        lines.append(f"**Verdict:** {self.verdict.upper()}")
        if self.standards is not None:
            applied = [s.label for s in self.standards.selected()]
            lines.append(f"**Standards:** {', '.join(applied) if applied else 'baseline only'}")
        lines.append("")

        if self.summary is not None:
            lines.append("## Widths")
            lines.append("")
            lines.append("| Quantity | Width (m) |")
            lines.append("|----------|-----------|")
            lines.append(f"| Available | {format_width(self.summary.input.total_width_m)} |")
            for name, width in self.summary.computed().items():
                lines.append(f"| {name} | {format_width(width)} |")
            lines.append("")

        if self.violations:
            lines.append("## Violations")
            lines.append("")
            for v in self.violations:
                lines.append(f"- **{v.field}** ({v.kind.value}): {v.message}")
            lines.append("")
        else:
            lines.append("No violations found.")
            lines.append("")

        lines.append("## Effective Rules")
        lines.append("")
        lines.append("| Rule | Width (m) | Source |")
        lines.append("|------|-----------|--------|")
        for key in RuleKey:
            source = self.provenance[key] if self.provenance is not None else ""
            lines.append(f"| {key.value} | {format_width(self.rules[key])} | {source} |")
        lines.append("")

        return "\n".join(lines)


def assemble_result(
    violations: list[Violation],
    summary: Summary | None,
    rules: RuleTable,
    standards: StandardSelection | None = None,
    provenance: RuleSources | None = None,
) -> ValidationResult:
    """Freeze the outcome of a validation run into a ValidationResult."""
    return ValidationResult(
        ok=not violations,
        violations=tuple(violations),
        summary=summary,
        rules=rules,
        standards=standards,
        provenance=provenance,
    )


def format_width(width: float) -> str:
    """Render a width in metres for messages and reports."""
    return f"{width:.{MESSAGE_PRECISION}f}"
