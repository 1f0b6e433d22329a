"""Suffix helpers for host names.

Cluster node names usually share a long domain tail
(``node1.example.com``, ``node2.example.com``). These helpers find that
shared tail and strip it so names can be shown compactly.

Examples:
    ```py
    >>> find_common_suffix(["node1.example.com", "node2.example.com"])
    '.example.com'
    >>> cleanup_host("node1.example.com", ".example.com")
    'node1'
    ```
"""

from collections.abc import Sequence


def find_common_suffix(strings: Sequence[str]) -> str:
    """Return the longest suffix shared by every string in *strings*.

    Candidate suffixes are taken from the first string, longest first, so the
    first candidate every string ends with is the answer. This is a plain
    character-wise match, not a split on ``.``.

    Args:
        strings: The strings to compare.

    Returns:
        The longest common suffix, or ``""`` when fewer than two strings are
        given or nothing is shared.
    """
    if len(strings) < 2:
        return ""
    first = strings[0]
    for start in range(len(first)):
        suffix = first[start:]
        if all(s.endswith(suffix) for s in strings):
            return suffix
    return ""


def cleanup_host(host: str, suffix: str) -> str:
    """Return *host* with a trailing *suffix* removed, if present.

    An absent (or empty) suffix is not an error; *host* is returned unchanged.
    """
    if suffix and host.endswith(suffix):
        return host[: -len(suffix)]
    return host


def shorten_hosts(hosts: Sequence[str]) -> list[str]:
    """Strip the common suffix of *hosts* from each of them, preserving order."""
    suffix = find_common_suffix(hosts)
    return [cleanup_host(host, suffix) for host in hosts]
