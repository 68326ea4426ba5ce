"""Audit summaries, per-rule guidance and priority filtering."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from ..remediation.models import AuditFinding, AuditReport


class IssueImpact(str, Enum):
    """Axe impact levels."""
    CRITICAL = "critical"
    SERIOUS = "serious"
    MODERATE = "moderate"
    MINOR = "minor"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


IMPACT_SCORES = {
    IssueImpact.CRITICAL: 4,
    IssueImpact.SERIOUS: 3,
    IssueImpact.MODERATE: 2,
    IssueImpact.MINOR: 1,
}

PRIORITY_IMPACTS = {
    Priority.HIGH: (IssueImpact.CRITICAL, IssueImpact.SERIOUS),
    Priority.MEDIUM: (IssueImpact.MODERATE,),
    Priority.LOW: (IssueImpact.MINOR,),
}

RULE_RECOMMENDATIONS = {
    "button-name": [
        "Add aria-label or visible text to the button",
        "Consider using title attribute for additional context",
    ],
    "link-in-text-block": [
        "Add underline or other visual distinction beyond color",
        "Ensure sufficient color contrast (minimum 3:1)",
    ],
    "meta-viewport": [
        "Remove user-scalable=no from viewport meta tag",
        "Allow users to zoom up to 200%",
    ],
    "label": [
        "Give every form field an aria-label or an associated <label>",
        "Do not rely on placeholder text as the only label",
    ],
    "color-contrast": [
        "Raise text contrast to at least 4.5:1 (3:1 for large text)",
        "Apply the suggested foreground color to the stylesheet rule for the element's classes",
    ],
    "link-name": [
        "Give links discernible text or an aria-label",
    ],
    "role-img-alt": [
        "Add alt text describing the image, or alt=\"\" if it is decorative",
    ],
    "select-name": [
        "Give the select an aria-label, title or associated <label>",
    ],
}

GENERIC_RECOMMENDATION = "Review the help URL for detailed guidance"

_IMPACT_VALUES = {i.value for i in IssueImpact}


@dataclass
class AuditSummary:
    """Counts over an audit report's findings."""
    total_issues: int = 0
    by_impact: dict[str, int] = field(default_factory=dict)
    by_rule: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "totalIssues": self.total_issues,
            "byImpact": dict(self.by_impact),
            "byRule": dict(self.by_rule),
        }


def _impact_of(finding: AuditFinding) -> str:
    impact = (finding.impact or "").lower()
    return impact if impact in _IMPACT_VALUES else "unknown"


def summarize(report: AuditReport) -> AuditSummary:
    by_impact = Counter(_impact_of(f) for f in report.all_issues)
    by_rule = Counter(f.rule_id for f in report.all_issues)
    return AuditSummary(
        total_issues=len(report.all_issues),
        by_impact=dict(by_impact),
        by_rule=dict(by_rule.most_common()),
    )


def severity_score(impact: str | None) -> int:
    """Numeric weight of an impact level for sorting; 0 when unknown."""
    try:
        return IMPACT_SCORES[IssueImpact((impact or "").lower())]
    except ValueError:
        return 0


def recommendations_for(rule_id: str) -> list[str]:
    return list(RULE_RECOMMENDATIONS.get(rule_id, [GENERIC_RECOMMENDATION]))


def filter_by_priority(report: AuditReport, priority: Priority | str) -> list[AuditFinding]:
    """Findings whose impact falls in the given priority band.

    Raises:
        ValueError: for an unknown priority name
    """
    impacts = {i.value for i in PRIORITY_IMPACTS[Priority(priority)]}
    return [f for f in report.all_issues if _impact_of(f) in impacts]
