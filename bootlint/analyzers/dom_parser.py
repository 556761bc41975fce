"""
DOM Parser - HTML parsing and element selection using BeautifulSoup.

This module is the query layer every lint rule works against. It wraps
BeautifulSoup (selectors via soupsieve) with the traversal helpers the rules
need and with start-offset tracking for source locations.

Usage:
    from bootlint.analyzers import DOMParser

    parser = DOMParser(html_string)
    for row in parser.select(".row"):
        print(parser.location_of(row))
"""

import re
from html import unescape
from typing import List, Optional

import soupsieve
from bs4 import BeautifulSoup, Tag
from bs4.element import Doctype

from ..contracts.problems import SourceLocation
from ..core.config import settings
from .location_index import LocationIndex


# A start tag from its "<" to the first ">" outside a quoted value
START_TAG_PATTERN = re.compile(r"""<[^\s/>]+(?P<attributes>(?:"[^"]*"|'[^']*'|[^"'>])*)>""")

ATTRIBUTE_PATTERN = re.compile(
    r"""([^\s="'/>]+)(?:\s*=\s*("[^"]*"|'[^']*'|[^\s"'>]+))?"""
)


class DOMParser:
    """
    HTML parser using BeautifulSoup for DOM analysis.

    Provides methods for:
    - CSS selector queries (document order)
    - Element traversal (parent, children, ancestors, closest)
    - Attribute and class access
    - Doctype lookup
    - Source offsets and locations
    """

    def __init__(self, html: str, features: Optional[str] = None):
        """
        Initialize parser with HTML content.

        Args:
            html: Raw HTML string to parse
            features: BeautifulSoup tree builder (defaults to settings.HTML_PARSER)
        """
        self._html: Optional[str] = html
        self._soup = BeautifulSoup(html, features or settings.HTML_PARSER)
        self._location_index: Optional[LocationIndex] = LocationIndex(html)

    @classmethod
    def from_soup(cls, soup: BeautifulSoup) -> "DOMParser":
        """
        Wrap an already-parsed tree that has no backing text.

        Elements of such a document never carry source locations.
        """
        parser = cls.__new__(cls)
        parser._html = None
        parser._soup = soup
        parser._location_index = None
        return parser

    @property
    def soup(self) -> BeautifulSoup:
        """Access the underlying BeautifulSoup object."""
        return self._soup

    @property
    def html(self) -> Optional[str]:
        """Access the original HTML string (None for wrapped trees)."""
        return self._html

    @property
    def has_source(self) -> bool:
        """Check if the raw text is available for location lookups."""
        return self._location_index is not None

    # =========================================================================
    # ELEMENT SELECTION
    # =========================================================================

    def get_all_elements(self) -> List[Tag]:
        """
        Get all Tag elements in the document.

        Returns:
            List of all Tag elements in document order
        """
        return [el for el in self._soup.descendants if isinstance(el, Tag)]

    def select(self, selector: str, root: Optional[Tag] = None) -> List[Tag]:
        """
        Get all elements matching a CSS selector.

        Args:
            selector: CSS selector string (selector lists allowed)
            root: Element to search under (defaults to the whole document)

        Returns:
            List of matching Tags in document order (may be empty)
        """
        return (root if root is not None else self._soup).select(selector)

    def select_one(self, selector: str, root: Optional[Tag] = None) -> Optional[Tag]:
        """
        Get first element matching a CSS selector.

        Returns:
            First matching Tag or None
        """
        return (root if root is not None else self._soup).select_one(selector)

    def matches(self, element: Tag, selector: str) -> bool:
        """
        Check if an element matches a CSS selector.

        Args:
            element: Element to test
            selector: CSS selector string

        Returns:
            True if the element itself matches
        """
        return soupsieve.match(selector, element)

    # =========================================================================
    # ELEMENT TRAVERSAL
    # =========================================================================

    def parent(self, element: Tag) -> Optional[Tag]:
        """
        Get the parent element (None at the document root).

        Args:
            element: Starting element

        Returns:
            Parent Tag, never the BeautifulSoup document object
        """
        parent = element.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return parent

    def get_parent_chain(self, element: Tag) -> List[Tag]:
        """
        Get all ancestors of an element (excluding document root).

        Args:
            element: Starting element

        Returns:
            List of parent Tags from immediate parent to <html>
        """
        parents = []
        current = self.parent(element)
        while current is not None:
            parents.append(current)
            current = self.parent(current)
        return parents

    def get_children(self, element: Tag, selector: Optional[str] = None) -> List[Tag]:
        """
        Get direct children of an element.

        Args:
            element: Parent element
            selector: Optional CSS selector the children must match

        Returns:
            List of direct child Tags
        """
        children = [child for child in element.children if isinstance(child, Tag)]
        if selector is None:
            return children
        return [child for child in children if self.matches(child, selector)]

    def closest(self, element: Tag, selector: str) -> Optional[Tag]:
        """
        Find the element itself or its nearest ancestor matching a selector.

        Args:
            element: Starting element
            selector: CSS selector string

        Returns:
            Matching Tag or None
        """
        current: Optional[Tag] = element
        while current is not None:
            if self.matches(current, selector):
                return current
            current = self.parent(current)
        return None

    def count_matching_ancestors(
        self, element: Tag, selector: str, include_self: bool = False
    ) -> int:
        """
        Count how many ancestors of an element match a selector.

        Args:
            element: Starting element
            selector: CSS selector string
            include_self: Also count the element itself

        Returns:
            Number of matching elements on the ancestor chain
        """
        chain = self.get_parent_chain(element)
        if include_self:
            chain.insert(0, element)
        return sum(1 for node in chain if self.matches(node, selector))

    # =========================================================================
    # ATTRIBUTES AND CLASSES
    # =========================================================================

    def get_text_content(self, element: Tag) -> str:
        """
        Get text content of an element (stripped).

        Returns:
            Text content with surrounding whitespace removed
        """
        return element.get_text().strip()

    def get_classes(self, element: Tag) -> List[str]:
        """
        Get all classes of an element.

        Returns:
            List of class names
        """
        classes = element.get("class", [])
        if isinstance(classes, str):
            return classes.split()
        return list(classes)

    def get_class_string(self, element: Tag) -> str:
        """Get the class attribute value as a single space-separated string."""
        return " ".join(self.get_classes(element))

    def has_class(self, element: Tag, class_name: str) -> bool:
        """Check if element has a specific class."""
        return class_name in self.get_classes(element)

    def get_attribute(self, element: Tag, attr: str) -> Optional[str]:
        """
        Get attribute value from element.

        Args:
            element: Target element
            attr: Attribute name

        Returns:
            Attribute value or None
        """
        value = element.get(attr)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def get_raw_attribute(self, element: Tag, attr: str) -> Optional[str]:
        """
        Get an attribute value exactly as written in the source.

        BeautifulSoup splits multi-valued attributes such as `class` into
        tokens; this reads the start tag from the raw text instead, keeping
        the original whitespace. Entity references are decoded.

        Args:
            element: Target element
            attr: Attribute name (lower-case)

        Returns:
            Raw attribute value, or get_attribute()'s value when the
            document has no raw text
        """
        offset = self.start_index(element)
        if offset is None:
            return self.get_attribute(element, attr)
        match = START_TAG_PATTERN.match(self._html, offset)
        if match is None:
            return self.get_attribute(element, attr)
        for name, value in ATTRIBUTE_PATTERN.findall(match.group("attributes")):
            if name.lower() != attr:
                continue
            if value[:1] in ('"', "'"):
                value = value[1:-1]
            return unescape(value)
        return None

    # =========================================================================
    # DOCUMENT METADATA
    # =========================================================================

    def doctype(self) -> Optional[str]:
        """
        Get the document's doctype declaration, normalized.

        The leading "doctype" keyword is dropped, whitespace collapsed and the
        value lower-cased: `<!DOCTYPE html>` yields "html".

        Returns:
            Normalized doctype string, or None if the document declares none
        """
        for node in self._soup.contents:
            if isinstance(node, Doctype):
                words = str(node).split()
                if words and words[0].lower() == "doctype":
                    words = words[1:]
                return " ".join(words).lower()
        return None

    # =========================================================================
    # SOURCE LOCATIONS
    # =========================================================================

    def start_index(self, element: Tag) -> Optional[int]:
        """
        Get the offset at which an element's start tag begins in the raw text.

        Args:
            element: Target element

        Returns:
            Zero-based character offset, or None if unknown
        """
        if self._location_index is None:
            return None
        line = getattr(element, "sourceline", None)
        column = getattr(element, "sourcepos", None)
        if line is None or column is None:
            return None
        return self._location_index.offset_of(line, column)

    def location_of(self, element: Tag) -> Optional[SourceLocation]:
        """
        Get the 1-based line/column of an element in the raw text.

        Args:
            element: Target element

        Returns:
            SourceLocation or None if the document has no raw text
        """
        offset = self.start_index(element)
        if offset is None:
            return None
        return self._location_index.location_of(offset)

    def __repr__(self) -> str:
        """String representation."""
        element_count = len(self.get_all_elements())
        return f"DOMParser({element_count} elements)"
