"""Document Model Adapter over BeautifulSoup.

The tree is built with ``html.parser``, which keeps unknown (component) tags
as-is and does not wrap fragments in ``<html>``/``<body>``. Tag and attribute
names are lower-cased by the parser. Recovery from malformed markup is
whatever the tree builder does.

``html.parser`` decodes character references on the way in, so output is
written back with named entities and attributes in source order. Untouched
markup round-trips unless it held raw non-ASCII text that has a named
entity (``é`` comes out as ``&eacute;``) or numeric references
(``&#169;`` comes out as ``&copy;``).
"""

import copy
from typing import Optional

import soupsieve
from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

# CSS string escapes; line breaks need a hex escape plus a terminating space.
_CSS_STRING_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\a ",
    "\r": "\\d ",
    "\f": "\\c ",
})


class SourceOrderFormatter(HTMLFormatter):
    """HTML formatter that keeps attributes in the order they were parsed."""

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FORMATTER = SourceOrderFormatter(entity_substitution=EntitySubstitution.substitute_html)


def attribute_selector(tag: str, attr: str, value: str) -> str:
    """Build an exact-match ``tag[attr="value"]`` selector."""
    escaped = value.translate(_CSS_STRING_ESCAPES)
    return f'{soupsieve.escape(tag)}[{soupsieve.escape(attr)}="{escaped}"]'


class HTMLDocument:
    """A parsed, mutable HTML document owned by one remediation run."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")

    def query(self, selector: str) -> list[Tag]:
        """Elements matching ``selector``, in document order."""
        return self.soup.select(selector)

    def query_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    @staticmethod
    def clone(element: Tag) -> Tag:
        """Detached deep copy of ``element``."""
        return copy.copy(element)

    @staticmethod
    def replace(old: Tag, new: Tag) -> None:
        old.replace_with(new)

    @staticmethod
    def outer_html(element: Tag) -> str:
        return element.decode(formatter=FORMATTER)

    def serialize(self) -> str:
        """Body contents when the document has a body, else the whole tree."""
        body = self.soup.body
        if body is not None:
            return body.decode_contents(formatter=FORMATTER)
        return self.soup.decode(formatter=FORMATTER)
