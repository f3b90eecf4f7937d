"""Semantic version parsing and ordering, backed by the semver library.

Accepts strict SemVer 2.0.0 (MAJOR.MINOR.PATCH with optional pre-release
and build metadata) plus a single leading "v", as git tags are often
written. Ordering ignores build metadata.
"""

from typing import Callable, Iterable, Optional

import semver

# Longer inputs are rejected without parsing
MAX_LENGTH = 256


def parse_version(text: Optional[str]) -> Optional[semver.Version]:
    """Parse text as a semantic version. Returns None if it is not one."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    if len(text) > MAX_LENGTH:
        return None
    if text.startswith("v"):
        text = text[1:]
    try:
        return semver.Version.parse(text)
    except ValueError:
        return None


def is_semver(text: Optional[str]) -> bool:
    return parse_version(text) is not None


def compare_versions(a: str, b: str) -> int:
    """Total order over valid version strings: -1, 0 or 1.

    Raises ValueError if either side does not parse.
    """
    left = parse_version(a)
    right = parse_version(b)
    if left is None or right is None:
        raise ValueError(f"cannot compare {a!r} and {b!r}: not a semantic version")
    return left.compare(right)


def max_version(
    items: Iterable[str], key: Optional[Callable[[str], str]] = None
) -> Optional[str]:
    """Item with the highest version, or None if items is empty.

    key maps each item to the version string to compare. On ties the
    first occurrence wins.
    """
    key = key or (lambda item: item)
    best = None
    for item in items:
        if best is None or compare_versions(key(item), key(best)) > 0:
            best = item
    return best

