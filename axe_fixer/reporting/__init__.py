"""Human-readable reporting over audits and remediation results."""

from .markdown import generate_report
from .summary import (
    AuditSummary,
    IssueImpact,
    Priority,
    filter_by_priority,
    recommendations_for,
    severity_score,
    summarize,
)

__all__ = [
    "generate_report",
    "AuditSummary",
    "IssueImpact",
    "Priority",
    "filter_by_priority",
    "recommendations_for",
    "severity_score",
    "summarize",
]
