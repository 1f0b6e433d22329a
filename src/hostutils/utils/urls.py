"""URL parsing with a scheme check.

``urllib.parse.urlparse`` accepts nearly anything: ``host/path`` parses as a
bare path. `parse_url` rejects results without a scheme so callers never get
a half-valid URL back.
"""

from urllib.parse import ParseResult, urlparse

from hostutils.errors import InvalidURLError


def parse_url(raw: str) -> ParseResult:
    """Parse *raw* and require a non-empty scheme.

    Args:
        raw: The URL string to parse.

    Returns:
        ParseResult: The parsed URL.

    Raises:
        InvalidURLError: If the parsed URL has no scheme.
        ValueError: Propagated unchanged from `urlparse` (e.g. unbalanced
            IPv6 brackets).
    """
    result = urlparse(raw)
    if not result.scheme:
        raise InvalidURLError(raw)
    return result
