"""Best-effort extraction from the free text in audit findings.

These are pattern matches over semi-structured text, not parsers. Each
helper returns None when nothing can be extracted; none of them raise.
"""

import re
from dataclasses import dataclass
from typing import Optional

_NAME_ATTR = re.compile(r"""name\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_TAG_NAME = re.compile(r"^<\s*([a-zA-Z0-9\-_]+)")

# e.g. "Element has insufficient color contrast of 2.51 (foreground color:
# #777777, background color: #ffffff, font size: 9.0pt ..."
_CONTRAST_SUMMARY = re.compile(
    r"contrast of\s+([\d.]+)\s*\(\s*foreground color:\s*(#[0-9a-fA-F]{6})\s*,"
    r"\s*background color:\s*(#[0-9a-fA-F]{6})",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ContrastMeasurement:
    """Colors and ratio the audit measured for a color-contrast finding."""
    ratio: float
    foreground: str
    background: str


def extract_name_attr(source: str) -> Optional[str]:
    """Value of the first ``name="..."`` attribute in a snippet."""
    match = _NAME_ATTR.search(source or "")
    return match.group(1) if match else None


def extract_tag_name(source: str) -> Optional[str]:
    """Lower-cased tag name of the snippet's opening tag."""
    match = _TAG_NAME.match(source or "")
    return match.group(1).lower() if match else None


def extract_contrast_measurement(summary: str) -> Optional[ContrastMeasurement]:
    match = _CONTRAST_SUMMARY.search(summary or "")
    if not match:
        return None
    try:
        ratio = float(match.group(1))
    except ValueError:
        return None
    return ContrastMeasurement(
        ratio=ratio,
        foreground=match.group(2),
        background=match.group(3),
    )
