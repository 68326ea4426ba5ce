"""Remediation rules keyed by axe rule id.

Each rule receives a detached clone of the matched element and edits it in
place; the engine swaps the clone into the document afterwards. Every edit
is guarded by a check on the attribute it writes, so running a rule on an
element it already fixed changes nothing.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

import structlog
from bs4 import Tag

from .aliases import DEFAULT_RESOLVER, TagAliasResolver
from .contrast import DEFAULT_TARGET_RATIO, adjust_color_to_meet_contrast
from .extraction import extract_contrast_measurement
from .models import AuditFinding, ColorFix

logger = structlog.get_logger()

DEFAULT_LABEL_ATTRIBUTE = "arialabel"
VIEWPORT_SELECTOR = 'meta[name="viewport"]'


@dataclass
class RuleContext:
    """Inputs a rule may read, plus the color-fix sink it may write to."""
    finding: AuditFinding
    name: Optional[str]
    selector: str = ""
    label_attribute: str = DEFAULT_LABEL_ATTRIBUTE
    contrast_target: float = DEFAULT_TARGET_RATIO
    resolver: TagAliasResolver = field(default=DEFAULT_RESOLVER)
    color_fixes: dict[str, ColorFix] = field(default_factory=dict)


RuleFunc = Callable[[Tag, RuleContext], None]


class RuleRegistry:
    """Maps rule ids to fix functions. Unknown ids are a no-op."""

    def __init__(self):
        self._rules: dict[str, RuleFunc] = {}

    def register(self, rule_id: str) -> Callable[[RuleFunc], RuleFunc]:
        def decorator(func: RuleFunc) -> RuleFunc:
            self._rules[rule_id] = func
            return func
        return decorator

    def get(self, rule_id: str) -> Optional[RuleFunc]:
        return self._rules.get(rule_id)

    def __contains__(self, rule_id: str) -> bool:
        return rule_id in self._rules

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules)

    def apply(self, element: Tag, ctx: RuleContext) -> None:
        rule = self._rules.get(ctx.finding.rule_id)
        if rule is None:
            logger.debug("No fix registered for rule", rule_id=ctx.finding.rule_id)
            return
        rule(element, ctx)


RULES = RuleRegistry()


def _has(element: Tag, attr: str) -> bool:
    return bool(element.get(attr))


@RULES.register("button-name")
def fix_button_name(element: Tag, ctx: RuleContext) -> None:
    if not _has(element, ctx.label_attribute):
        element[ctx.label_attribute] = ctx.name


@RULES.register("link-in-text-block")
def fix_link_in_text_block(element: Tag, ctx: RuleContext) -> None:
    style = element.get("style") or ""
    if "text-decoration" not in style.lower():
        element["style"] = style + ";text-decoration:underline;"


@RULES.register("meta-viewport")
def fix_meta_viewport(element: Tag, ctx: RuleContext) -> None:
    content = element.get("content")
    if content and "user-scalable=no" in content:
        element["content"] = content.replace("user-scalable=no", "user-scalable=yes")


@RULES.register("label")
def fix_label(element: Tag, ctx: RuleContext) -> None:
    label_attr = ctx.label_attribute

    if ctx.resolver.is_numeric_input(element.name):
        if not _has(element, label_attr):
            element[label_attr] = ctx.name or "Number field"
        return

    placeholder = element.get("placeholder")
    if not _has(element, label_attr):
        element[label_attr] = ctx.name or (placeholder or "").strip() or "Input field"

    # A blank placeholder is not a usable label even if one was copied earlier.
    if placeholder is not None and not placeholder.strip():
        element[label_attr] = ctx.name or "Input field"


@RULES.register("color-contrast")
def fix_color_contrast(element: Tag, ctx: RuleContext) -> None:
    """Record a foreground color for the element's class chain.

    The element is left untouched; its color comes from a stylesheet.
    """
    measurement = extract_contrast_measurement(ctx.finding.summary)
    if measurement is None:
        logger.debug("Contrast summary not recognised", source=ctx.finding.source)
        return

    color = adjust_color_to_meet_contrast(
        measurement.foreground,
        measurement.background,
        ctx.contrast_target,
    )
    selector = class_chain_selector(element) or ctx.selector
    ctx.color_fixes[selector] = ColorFix(selector=selector, color=color)
    logger.debug(
        "Contrast fix computed",
        selector=selector,
        measured_ratio=measurement.ratio,
        foreground=measurement.foreground,
        background=measurement.background,
        color=color,
    )


@RULES.register("link-name")
def fix_link_name(element: Tag, ctx: RuleContext) -> None:
    if not _has(element, ctx.label_attribute):
        element[ctx.label_attribute] = ctx.name or "Link"


@RULES.register("role-img-alt")
def fix_role_img_alt(element: Tag, ctx: RuleContext) -> None:
    if element.name == "img" and not _has(element, "alt"):
        element["alt"] = ctx.name or "Image"


@RULES.register("select-name")
def fix_select_name(element: Tag, ctx: RuleContext) -> None:
    if not _has(element, ctx.label_attribute) and not _has(element, "title"):
        element[ctx.label_attribute] = ctx.name or "Select an option"


def class_chain_selector(element: Tag) -> str:
    """``.a.b`` for ``class="a b"``; empty when the element has no classes."""
    classes = element.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    classes = [c for c in classes if c]
    if not classes:
        return ""
    return "." + ".".join(classes)
