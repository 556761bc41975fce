"""
Versions - Detect library versions from the URLs of linked resources.

CDN URLs usually carry the version as a path segment, e.g.
`https://code.jquery.com/3.2.1/jquery.min.js`. Only segments that are a
plain three-part number count; the last one wins.
"""

import logging
import re
from typing import List, Optional
from urllib.parse import urlparse

from packaging.version import InvalidVersion, Version


logger = logging.getLogger(__name__)

VERSION_SEGMENT_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")


def filename_from_url(url: str) -> str:
    """
    Get the last path component of a URL, without query string or fragment.

    Args:
        url: Absolute or relative URL

    Returns:
        The filename part ("" if the URL ends with a slash)
    """
    filename = re.sub(r"[#?].*$", "", url)
    return filename.rsplit("/", 1)[-1]


def path_segments(url: str) -> List[str]:
    """Split the path of a URL into its segments."""
    return urlparse(url).path.split("/")


def versions_in(segments: List[str]) -> List[str]:
    """Keep the segments that look like a three-part version number."""
    return [segment for segment in segments if VERSION_SEGMENT_PATTERN.match(segment)]


def version_in_url(url: Optional[str]) -> Optional[str]:
    """
    Find the version embedded in a URL's path.

    Args:
        url: Value of an href/src attribute

    Returns:
        The last version-like path segment, or None
    """
    if not url:
        return None
    versions = versions_in(path_segments(url))
    if not versions:
        return None
    return versions[-1]


def is_older_than(version: str, minimum: str) -> Optional[bool]:
    """
    Compare a detected version against a threshold.

    Args:
        version: Version found in the document
        minimum: Required version (pre-release tags allowed, e.g. "4.0.0-beta")

    Returns:
        True if version < minimum, False otherwise, None if either is unparseable
    """
    try:
        return Version(version) < Version(minimum)
    except InvalidVersion:
        logger.debug(f"Skipping comparison of unparseable version {version!r}")
        return None
