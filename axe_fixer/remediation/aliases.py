"""Tag Alias Resolver - component tags vs. the semantic tags they render as.

Pages built with the component framework use ``wm-*`` tags in their markup,
while the audit runs against the rendered DOM and reports standard tags.
The table is only used to widen a search; attribute equality still decides
whether an element matches.
"""

from collections import OrderedDict
from types import MappingProxyType
from typing import Mapping, Optional

# Declaration order matters: reverse lookups return component tags in it.
COMPONENT_TAGS: Mapping[str, str] = MappingProxyType(OrderedDict([
    ("wm-button", "button"),
    ("wm-label", "label"),
    ("wm-input", "input"),
    ("wm-number", "input"),
    ("wm-textarea", "textarea"),
    ("wm-select", "select"),
    ("wm-link", "a"),
    ("wm-icon", "img"),
    ("wm-container", "div"),
    ("wm-anchor", "a"),
]))

NUMERIC_INPUT_TAG = "wm-number"


class TagAliasResolver:
    """Forward and reverse lookups over a fixed component tag table."""

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self._forward = MappingProxyType(dict(table if table is not None else COMPONENT_TAGS))

        reverse: dict[str, list[str]] = {}
        for component_tag, standard_tag in self._forward.items():
            reverse.setdefault(standard_tag, []).append(component_tag)
        self._reverse = MappingProxyType({k: tuple(v) for k, v in reverse.items()})

    def standard_tag(self, component_tag: str) -> Optional[str]:
        """Standard tag a component tag renders as, or None."""
        return self._forward.get(component_tag.lower())

    def component_tags(self, standard_tag: str) -> tuple[str, ...]:
        """Component tags rendering as ``standard_tag``, in table order."""
        return self._reverse.get(standard_tag.lower(), ())

    def first_component_tag(self, standard_tag: str) -> Optional[str]:
        tags = self.component_tags(standard_tag)
        return tags[0] if tags else None

    def is_numeric_input(self, tag: str) -> bool:
        return tag.lower() == NUMERIC_INPUT_TAG and self.standard_tag(tag) == "input"


DEFAULT_RESOLVER = TagAliasResolver()
