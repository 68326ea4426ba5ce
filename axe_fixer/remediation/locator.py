"""Issue Locator - resolve an audit finding to one element of the document."""

from dataclasses import dataclass, field
from typing import Optional

import structlog
from bs4 import Tag

from .aliases import DEFAULT_RESOLVER, TagAliasResolver
from .document import HTMLDocument, attribute_selector
from .extraction import extract_name_attr, extract_tag_name

logger = structlog.get_logger()


@dataclass(frozen=True)
class FindingTarget:
    """Name and tag pulled out of a finding's ``source`` snippet."""
    name: str
    tag: str


@dataclass
class LocatedElement:
    """An element matched for a finding and the selector that matched it."""
    element: Tag
    selector: str
    target: FindingTarget


@dataclass
class IssueLocator:
    """Finds the element an audit finding refers to.

    Only ``name`` attribute equality counts as a match. The alias table adds
    component-tag candidates after the standard tag; there is no fallback to
    ids, classes, text or partial names.
    """
    document: HTMLDocument
    resolver: TagAliasResolver = field(default=DEFAULT_RESOLVER)

    @staticmethod
    def target_for(source: str) -> Optional[FindingTarget]:
        name = extract_name_attr(source)
        tag = extract_tag_name(source)
        if not name or not tag:
            return None
        return FindingTarget(name=name, tag=tag)

    def candidate_selectors(self, target: FindingTarget) -> list[str]:
        selectors = [attribute_selector(target.tag, "name", target.name)]
        for component_tag in self.resolver.component_tags(target.tag):
            selectors.append(attribute_selector(component_tag, "name", target.name))
        return selectors

    def locate(self, target: FindingTarget) -> Optional[LocatedElement]:
        """First element of the first candidate selector with any match."""
        for selector in self.candidate_selectors(target):
            matches = self.document.query(selector)
            if matches:
                logger.debug("Element located", selector=selector, matches=len(matches))
                return LocatedElement(element=matches[0], selector=selector, target=target)
        return None
