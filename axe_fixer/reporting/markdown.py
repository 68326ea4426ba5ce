"""Markdown rendering of an audit and the remediation results for it."""

from typing import Mapping

from ..remediation.models import AuditReport, RemediationResult
from .summary import IssueImpact, recommendations_for, summarize


def _snippet(html: str) -> list[str]:
    return ["```html", html, "```"]


def _result_section(result: RemediationResult) -> list[str]:
    lines = [
        f"## {result.file_scanned}",
        "",
        f"- **Elements updated:** {len(result.changes_required)}",
        f"- **Elements not found:** {len(result.not_found)}",
        f"- **Color fixes:** {len(result.color_fixes)}",
        "",
    ]

    if result.changes_required:
        lines.extend([f"### Changes ({len(result.changes_required)})", ""])
        for change in result.changes_required:
            status = "updated" if change.changed else "no change"
            lines.append(f"#### `{change.rule_id}` on `{change.tag}[name=\"{change.name}\"]` ({status})")
            lines.append("")
            if change.description:
                lines.extend([change.description, ""])
            lines.append("Before:")
            lines.extend(_snippet(change.old_snippet))
            if change.changed:
                lines.append("After:")
                lines.extend(_snippet(change.new_snippet))
            lines.append("")

    if result.not_found:
        lines.extend([
            f"### Not Found ({len(result.not_found)})",
            "",
            "| Rule | Tag | Name | Component Tag |",
            "|------|-----|------|---------------|",
        ])
        for miss in result.not_found:
            lines.append(f"| {miss.rule_id} | {miss.tag} | {miss.name} | {miss.mapped_tag or '-'} |")
        lines.append("")

    if result.color_fixes:
        lines.extend([
            "### Suggested Color Fixes",
            "",
            "| Selector | Color |",
            "|----------|-------|",
        ])
        for selector, fix in result.color_fixes.items():
            lines.append(f"| `{selector}` | `{fix.color}` |")
        lines.append("")

    return lines


def generate_report(
    report: AuditReport,
    results: Mapping[str, RemediationResult] | RemediationResult,
) -> str:
    """Render an audit plus the remediation of one or more documents.

    Args:
        report: The audit report the results were produced from
        results: One result, or results keyed by fragment label

    Returns:
        Markdown text
    """
    if isinstance(results, RemediationResult):
        results = {results.file_scanned: results}

    summary = summarize(report)
    meta = report.metadata

    lines = ["# Accessibility Report", ""]
    if meta.get("url"):
        lines.append(f"**URL:** {meta['url']}")
    if meta.get("timestamp"):
        lines.append(f"**Test Date:** {meta['timestamp']}")
    if meta.get("axeVersion"):
        lines.append(f"**axe-core:** {meta['axeVersion']}")
    if meta.get("extensionVersion"):
        lines.append(f"**Extension:** {meta['extensionVersion']}")
    lines.append("")

    lines.extend([
        "## Summary",
        "",
        f"- **Total Issues:** {summary.total_issues}",
    ])
    for impact in IssueImpact:
        lines.append(f"- **{impact.value.title()}:** {summary.by_impact.get(impact.value, 0)}")
    lines.append("")

    if summary.by_rule:
        lines.extend(["## Failed Rules", ""])
        for rule_id, count in summary.by_rule.items():
            lines.append(f"- **{rule_id}:** {count} issues")
            for tip in recommendations_for(rule_id):
                lines.append(f"  - {tip}")
        lines.append("")

    for result in results.values():
        lines.extend(_result_section(result))

    lines.extend([
        "---",
        "*Generated by axe-html-fixer*",
    ])
    return "\n".join(lines)
