"""Remediation engine: locate axe findings in HTML and fix them."""

from .aliases import COMPONENT_TAGS, DEFAULT_RESOLVER, TagAliasResolver
from .contrast import adjust_color_to_meet_contrast, contrast_ratio, relative_luminance
from .document import HTMLDocument
from .engine import RemediationEngine, load_report, remediate, remediate_fragments
from .exceptions import RemediationError, ReportParseError
from .locator import IssueLocator
from .models import (
    AuditFinding,
    AuditReport,
    ChangeRecord,
    ColorFix,
    NotFoundRecord,
    RemediationResult,
)
from .rules import RULES, RuleContext, RuleRegistry

__all__ = [
    # Engine
    "remediate",
    "remediate_fragments",
    "load_report",
    "RemediationEngine",
    # Building blocks
    "HTMLDocument",
    "IssueLocator",
    "TagAliasResolver",
    "COMPONENT_TAGS",
    "DEFAULT_RESOLVER",
    "RULES",
    "RuleContext",
    "RuleRegistry",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "adjust_color_to_meet_contrast",
    # Models
    "AuditFinding",
    "AuditReport",
    "ChangeRecord",
    "NotFoundRecord",
    "ColorFix",
    "RemediationResult",
    # Errors
    "RemediationError",
    "ReportParseError",
]
