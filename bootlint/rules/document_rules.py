"""
Document rules - Checks on the document as a whole.

Covers the doctype, the `<head>` metadata and the scripts/stylesheets the
page links to.

Rules:
- E001 DoctypeRule
- E007 DuplicateBootstrapJsRule
- W001 CharsetRule
- W003 ViewportRule
- W005 JQueryRule
- W013 OutdatedBootstrapRule
"""

import re
from typing import List, Tuple

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..analyzers.versions import (
    filename_from_url,
    is_older_than,
    path_segments,
    version_in_url,
    versions_in,
)
from .base_rule import LintRule, Report


HTML5_DOCTYPES = frozenset({
    "html",
    'html system "about:legacy-compat"',
})

UTF8_CONTENT_TYPE = "text/html; charset=utf-8"

BOOTSTRAP_FILES = ",".join([
    'link[rel="stylesheet"][href$="/bootstrap.css"]',
    'link[rel="stylesheet"][href="bootstrap.css"]',
    'link[rel="stylesheet"][href$="/bootstrap.min.css"]',
    'link[rel="stylesheet"][href="bootstrap.min.css"]',
    'script[src$="/bootstrap.js"]',
    'script[src="bootstrap.js"]',
    'script[src$="/bootstrap.min.js"]',
    'script[src="bootstrap.min.js"]',
])

JQUERY_FILENAME_PATTERN = re.compile(r"^j[qQ]uery(\.min)?\.js$")


def bootstrap_scripts_in(document: DOMParser) -> Tuple[List[Tag], List[Tag]]:
    """
    Find the `<script>`s that load Bootstrap's JS.

    Query strings and fragments are ignored when matching filenames.

    Returns:
        (longhand bootstrap.js scripts, minified bootstrap.min.js scripts)
    """
    longhands = [
        script for script in document.select('script[src*="bootstrap.js"]')
        if filename_from_url(document.get_attribute(script, "src")) == "bootstrap.js"
    ]
    minifieds = [
        script for script in document.select('script[src*="bootstrap.min.js"]')
        if filename_from_url(document.get_attribute(script, "src")) == "bootstrap.min.js"
    ]
    return longhands, minifieds


class DoctypeRule(LintRule):
    """The document must declare the HTML5 doctype."""

    MISSING_DOCTYPE = "Document is missing a DOCTYPE declaration"
    NON_HTML5_DOCTYPE = "Document declares a non-HTML5 DOCTYPE"

    @property
    def rule_id(self) -> str:
        return "E001"

    def check(self, document: DOMParser, report: Report) -> None:
        doctype = document.doctype()
        if doctype is None:
            report(self.MISSING_DOCTYPE)
        elif doctype not in HTML5_DOCTYPES:
            report(self.NON_HTML5_DOCTYPE)


class DuplicateBootstrapJsRule(LintRule):
    """Only one of bootstrap.js and bootstrap.min.js may be included."""

    @property
    def rule_id(self) -> str:
        return "E007"

    def check(self, document: DOMParser, report: Report) -> None:
        longhands, minifieds = bootstrap_scripts_in(document)
        if longhands and minifieds:
            report(
                "Only one copy of Bootstrap's JS should be included; "
                "currently the webpage includes both bootstrap.js and bootstrap.min.js",
                longhands + minifieds,
            )


class CharsetRule(LintRule):
    """
    `<head>` must declare the UTF-8 charset.

    Either `<meta charset="utf-8">` or the equivalent
    `<meta http-equiv="Content-Type" content="text/html; charset=utf-8">`
    satisfies the rule; both are compared case-insensitively.
    """

    @property
    def rule_id(self) -> str:
        return "W001"

    def check(self, document: DOMParser, report: Report) -> None:
        metas = document.select("head>meta[charset]")
        charset = document.get_attribute(metas[0], "charset") if metas else None
        if charset:
            if charset.strip().lower() != "utf-8":
                report("charset `<meta>` tag is specifying a legacy, non-UTF-8 charset", metas)
            return

        if not any(self._is_utf8_content_type(document, meta)
                   for meta in document.select("head>meta[http-equiv][content]")):
            report("`<head>` is missing UTF-8 charset `<meta>` tag")

    @staticmethod
    def _is_utf8_content_type(document: DOMParser, meta: Tag) -> bool:
        http_equiv = (document.get_attribute(meta, "http-equiv") or "").strip().lower()
        content = " ".join((document.get_attribute(meta, "content") or "").lower().split())
        return http_equiv == "content-type" and content == UTF8_CONTENT_TYPE


class ViewportRule(LintRule):
    """`<head>` should carry the viewport `<meta>` that enables responsiveness."""

    @property
    def rule_id(self) -> str:
        return "W003"

    def check(self, document: DOMParser, report: Report) -> None:
        if not document.select('head>meta[name="viewport"][content]'):
            report("`<head>` is missing viewport `<meta>` tag that enables responsiveness")


class JQueryRule(LintRule):
    """
    jQuery must be loaded, in a version Bootstrap supports.

    Versions are read from the script URL's path; a script whose URL
    carries no version (or an unparseable one) is not judged.
    """

    NO_JQUERY_BUT_BS_JS = (
        "Unable to locate jQuery, which is required for Bootstrap's JavaScript plugins to work"
    )
    NO_JQUERY_NOR_BS_JS = (
        "Unable to locate jQuery, which is required for Bootstrap's JavaScript plugins to work; "
        "however, you might not be using Bootstrap's JavaScript"
    )

    @property
    def rule_id(self) -> str:
        return "W005"

    def check(self, document: DOMParser, report: Report) -> None:
        minimum = self.settings.MIN_JQUERY_VERSION
        old_jquery = (
            "Found what might be an outdated version of jQuery; "
            f"Bootstrap requires jQuery v{minimum} or higher"
        )

        jqueries = document.select('script[src*="jquery"], script[src*="jQuery"]')
        if not jqueries:
            longhands, minifieds = bootstrap_scripts_in(document)
            has_bs_js = bool(longhands or minifieds)
            report(self.NO_JQUERY_BUT_BS_JS if has_bs_js else self.NO_JQUERY_NOR_BS_JS)
            return

        for script in jqueries:
            segments = path_segments(document.get_attribute(script, "src") or "")
            if not JQUERY_FILENAME_PATTERN.match(segments[-1]):
                continue
            versions = versions_in(segments)
            if not versions:
                continue
            if is_older_than(versions[-1], minimum):
                report(old_jquery, [script])


class OutdatedBootstrapRule(LintRule):
    """Linked Bootstrap CSS/JS should be at least the version these rules target."""

    @property
    def rule_id(self) -> str:
        return "W013"

    def check(self, document: DOMParser, report: Report) -> None:
        current = self.settings.CURRENT_BOOTSTRAP_VERSION
        outdated = (
            "Bootstrap version does not seem to match the version this bootlint version is for "
            f"({current}); saw what appears to be usage of Bootstrap "
        )
        for element in document.select(BOOTSTRAP_FILES):
            url_attr = "href" if element.name == "link" else "src"
            version = version_in_url(document.get_attribute(element, url_attr))
            if version is None:
                continue
            if is_older_than(version, current):
                report(outdated + version, [element])


DOCUMENT_RULES = (
    DoctypeRule,
    DuplicateBootstrapJsRule,
    CharsetRule,
    ViewportRule,
    JQueryRule,
    OutdatedBootstrapRule,
)
