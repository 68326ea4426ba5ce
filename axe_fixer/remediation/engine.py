"""Remediation engine - apply an axe report to one HTML document.

For each finding the engine locates an element, fixes a clone of it, swaps
the clone in and records the before/after markup. The document is
serialized once at the end. Nothing here touches the filesystem.
"""

from typing import Mapping, Optional, Union

import structlog

from ..config import Settings
from ..utils.logging import LogContext
from .aliases import DEFAULT_RESOLVER, TagAliasResolver
from .document import HTMLDocument
from .locator import FindingTarget, IssueLocator, LocatedElement
from .models import (
    AuditFinding,
    AuditReport,
    ChangeRecord,
    ColorFix,
    NotFoundRecord,
    RemediationResult,
)
from .rules import RULES, VIEWPORT_SELECTOR, RuleContext, RuleRegistry

logger = structlog.get_logger()

ReportInput = Union[AuditReport, Mapping, str]

VIEWPORT_TARGET = FindingTarget(name="viewport", tag="meta")


def load_report(report: ReportInput) -> AuditReport:
    """Accept a parsed report, its dict form, or raw JSON text.

    Raises:
        ReportParseError: if the report cannot be read
    """
    if isinstance(report, AuditReport):
        return report
    if isinstance(report, str):
        return AuditReport.from_json(report)
    if isinstance(report, Mapping):
        return AuditReport.from_dict(dict(report))
    return AuditReport.from_dict(report)


class RemediationEngine:
    """Runs every finding of a report against one document.

    An engine instance owns its document; build a new one per document.
    Each run reports only its own findings, but the document keeps the
    mutations of earlier runs.
    """

    def __init__(
        self,
        html: str,
        file_name: str = "input.html",
        settings: Optional[Settings] = None,
        rules: RuleRegistry = RULES,
        resolver: TagAliasResolver = DEFAULT_RESOLVER,
    ):
        # Field defaults only; environment and .env are read by get_settings().
        self.settings = settings or Settings.model_construct()
        self.file_name = file_name
        self.document = HTMLDocument(html)
        self.locator = IssueLocator(self.document, resolver)
        self.resolver = resolver
        self.rules = rules

        self.changes: list[ChangeRecord] = []
        self.not_found: list[NotFoundRecord] = []
        self.color_fixes: dict[str, ColorFix] = {}

        self.log = logger.bind(component="remediation_engine", file=file_name)

    def run(self, report: AuditReport) -> RemediationResult:
        self.changes = []
        self.not_found = []
        self.color_fixes = {}

        for finding in report.all_issues:
            self.process(finding)

        result = RemediationResult(
            file_scanned=self.file_name,
            updated_content=self.document.serialize(),
            changes_required=list(self.changes),
            not_found=list(self.not_found),
            color_fixes=dict(self.color_fixes),
            jsonrpc_id=self.settings.jsonrpc_id,
        )
        self.log.info(
            "Document remediated",
            findings=len(report.all_issues),
            changes=len(result.changes_required),
            not_found=len(result.not_found),
            color_fixes=len(result.color_fixes),
        )
        return result

    def process(self, finding: AuditFinding) -> None:
        """Record exactly one change, one miss, or nothing for a finding."""
        if finding.rule_id == "meta-viewport":
            self._process_viewport(finding)
            return

        target = IssueLocator.target_for(finding.source)
        if target is None:
            self.log.debug("Finding skipped, no name or tag in source", rule_id=finding.rule_id, source=finding.source)
            return

        located = self.locator.locate(target)
        if located is None:
            self._record_not_found(finding, target)
            return

        self._apply(finding, located)

    def _process_viewport(self, finding: AuditFinding) -> None:
        element = self.document.query_one(VIEWPORT_SELECTOR)
        if element is None:
            self._record_not_found(finding, VIEWPORT_TARGET)
            return
        self._apply(finding, LocatedElement(element=element, selector=VIEWPORT_SELECTOR, target=VIEWPORT_TARGET))

    def _apply(self, finding: AuditFinding, located: LocatedElement) -> None:
        original = located.element
        old_snippet = HTMLDocument.outer_html(original)

        updated = HTMLDocument.clone(original)
        ctx = RuleContext(
            finding=finding,
            name=located.target.name,
            selector=located.selector,
            label_attribute=self.settings.accessible_label_attribute,
            contrast_target=self.settings.contrast_target_ratio,
            resolver=self.resolver,
            color_fixes=self.color_fixes,
        )
        self.rules.apply(updated, ctx)
        HTMLDocument.replace(original, updated)

        record = ChangeRecord(
            file_name=self.file_name,
            rule_id=finding.rule_id,
            name=located.target.name,
            tag=located.target.tag,
            description=finding.description,
            old_snippet=old_snippet,
            new_snippet=HTMLDocument.outer_html(updated),
            original_source_from_axe=finding.source,
        )
        self.changes.append(record)
        self.log.debug("Finding applied", rule_id=finding.rule_id, selector=located.selector, changed=record.changed)

    def _record_not_found(self, finding: AuditFinding, target: FindingTarget) -> None:
        self.not_found.append(NotFoundRecord(
            file_name=self.file_name,
            name=target.name,
            tag=target.tag,
            mapped_tag=self.resolver.first_component_tag(target.tag),
            rule_id=finding.rule_id,
            description=finding.description,
        ))
        self.log.debug("Element not found", rule_id=finding.rule_id, tag=target.tag, name=target.name)


def remediate(
    html: str,
    report: ReportInput,
    label: str = "input.html",
    settings: Optional[Settings] = None,
) -> RemediationResult:
    """Apply an axe report to an HTML document.

    Args:
        html: Document or fragment to remediate
        report: Audit report (``AuditReport``, dict, or JSON text)
        label: Name recorded as ``fileScanned`` and on every record
        settings: Overrides for label attribute, contrast target, JSON-RPC id

    Returns:
        The remediated fragment plus change, not-found and color-fix records

    Raises:
        ReportParseError: if the report is malformed
    """
    audit = load_report(report)
    return RemediationEngine(html, file_name=label, settings=settings).run(audit)


def remediate_fragments(
    fragments: Mapping[str, Optional[str]],
    report: ReportInput,
    settings: Optional[Settings] = None,
) -> dict[str, RemediationResult]:
    """Remediate several documents (page, header, footer...) independently.

    Each non-empty fragment gets its own tree and engine run. Keys are the
    fragment labels, which also become each result's ``fileScanned``.
    """
    audit = load_report(report)
    results: dict[str, RemediationResult] = {}
    for label, html in fragments.items():
        if not html:
            continue
        with LogContext(fragment=label):
            results[label] = RemediationEngine(html, file_name=label, settings=settings).run(audit)
    return results
