"""Errors raised by the remediation engine."""


class RemediationError(Exception):
    """Base class for remediation failures."""


class ReportParseError(RemediationError):
    """The audit report could not be read as an axe JSON report."""
