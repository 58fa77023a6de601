"""
Domain Services

Pure helpers used by the discovery engine and the presentation layer.
"""

import math
from typing import Iterable, List

from cricut_finder.domain.value_objects import DiscoveredFile


def is_numeric(name: str) -> bool:
    """
    Check whether a directory name is a numeric identifier.

    Surrounding whitespace is ignored. Base-10 integers and floating-point
    literals are accepted; anything else, including the empty string,
    non-ASCII digits, underscore digit separators and literals too large
    for a float, is rejected.

    Args:
        name: Directory name to check

    Returns:
        True if the name parses as a number, False otherwise
    """
    value = name.strip()
    if not value or not value.isascii() or "_" in value:
        return False

    try:
        int(value, 10)
        return True
    except ValueError:
        pass

    try:
        number = float(value)
    except ValueError:
        return False

    # Out-of-range literals such as "1e400" overflow to inf
    if math.isinf(number):
        return value.lstrip("+-").lower() in ("inf", "infinity")
    return True


def matches_image_token(name: str, token: str = ".png") -> bool:
    """
    Check whether a file name contains the image extension token.

    The token is matched as a substring in its lowercase or uppercase form
    only, so ``photo.PNG`` and ``photo.png`` match, ``a.pngfile.txt`` also
    matches, and mixed case such as ``photo.Png`` does not.
    """
    return token.lower() in name or token.upper() in name


def sort_by_recency_descending(files: Iterable[DiscoveredFile]) -> List[DiscoveredFile]:
    """Return a new list ordered by last_modified, most recent first."""
    return sorted(files, key=lambda f: f.last_modified, reverse=True)
