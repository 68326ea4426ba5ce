"""Data model for audit input and remediation output.

Findings come from an axe DevTools export (``allIssues``); the records here
are what the engine hands back for each of them.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from .exceptions import ReportParseError


@dataclass(frozen=True)
class AuditFinding:
    """One violation reported by the audit."""
    rule_id: str
    description: str = ""
    source: str = ""  # Raw opening tag, e.g. '<button name="x">'
    summary: str = ""
    impact: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AuditFinding":
        return cls(
            rule_id=data.get("ruleId") or "",
            description=data.get("description") or "",
            source=data.get("source") or "",
            summary=data.get("summary") or "",
            impact=data.get("impact"),
        )

    def to_dict(self) -> dict:
        data = {
            "ruleId": self.rule_id,
            "description": self.description,
            "source": self.source,
            "summary": self.summary,
        }
        if self.impact is not None:
            data["impact"] = self.impact
        return data


@dataclass
class AuditReport:
    """An axe report: the findings plus whatever metadata came with them."""
    all_issues: list[AuditFinding] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "AuditReport":
        if not isinstance(data, dict):
            raise ReportParseError("Audit report must be a JSON object")

        issues = data.get("allIssues")
        if not isinstance(issues, list):
            raise ReportParseError("Audit report has no 'allIssues' list")

        findings = []
        for index, issue in enumerate(issues):
            if not isinstance(issue, dict):
                raise ReportParseError(f"Issue {index} in 'allIssues' is not an object")
            findings.append(AuditFinding.from_dict(issue))

        metadata = {k: v for k, v in data.items() if k != "allIssues"}
        return cls(all_issues=findings, metadata=metadata)

    @classmethod
    def from_json(cls, text: str) -> "AuditReport":
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ReportParseError(f"Audit report is not valid JSON: {e}") from e
        return cls.from_dict(data)


@dataclass
class ChangeRecord:
    """A finding whose element was located in the document."""
    file_name: str
    rule_id: str
    name: str
    tag: str
    description: str
    old_snippet: str
    new_snippet: str
    original_source_from_axe: str

    @property
    def changed(self) -> bool:
        return self.old_snippet != self.new_snippet

    def to_dict(self) -> dict:
        return {
            "fileName": self.file_name,
            "ruleId": self.rule_id,
            "name": self.name,
            "tag": self.tag,
            "description": self.description,
            "oldSnippet": self.old_snippet,
            "newSnippet": self.new_snippet,
            "originalSourceFromAxe": self.original_source_from_axe,
        }


@dataclass
class NotFoundRecord:
    """A well-formed finding with no matching element."""
    file_name: str
    name: str
    tag: str
    mapped_tag: Optional[str]
    rule_id: str
    description: str

    def to_dict(self) -> dict:
        return {
            "fileName": self.file_name,
            "name": self.name,
            "tag": self.tag,
            "mappedTag": self.mapped_tag,
            "ruleId": self.rule_id,
            "description": self.description,
        }


@dataclass(frozen=True)
class ColorFix:
    """A stylesheet-level foreground color suggestion for a class chain."""
    selector: str
    color: str

    def to_dict(self) -> dict:
        return {"color": self.color}


@dataclass
class RemediationResult:
    """Everything one engine invocation produced for one document."""
    file_scanned: str
    updated_content: str
    changes_required: list[ChangeRecord] = field(default_factory=list)
    not_found: list[NotFoundRecord] = field(default_factory=list)
    color_fixes: dict[str, ColorFix] = field(default_factory=dict)
    jsonrpc_id: int = 1

    def final_result(self) -> dict:
        """JSON-RPC envelope carrying the side-channel color fixes."""
        return {
            "jsonrpc": "2.0",
            "id": self.jsonrpc_id,
            "result": {
                "fixes": {
                    selector: fix.to_dict()
                    for selector, fix in self.color_fixes.items()
                },
            },
        }

    def to_dict(self) -> dict:
        return {
            "fileScanned": self.file_scanned,
            "updatedContent": self.updated_content,
            "changesRequired": [c.to_dict() for c in self.changes_required],
            "notFound": [n.to_dict() for n in self.not_found],
            "finalResult": self.final_result(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
