"""Naming convention checks for tag, release and version names.

Pure functions, no GitHub API dependency.

A name is in convention when it carries the configured prefix and suffix
and what lies between them is a semantic version.
"""

from typing import Iterable, List, Optional

from .affixes import strip_affixes
from .semver_support import is_semver


def is_valid_name(prefix: str, suffix: str, name: Optional[str]) -> bool:
    """Check a single name against the prefix/suffix convention.

    Missing names (releases without a title) are never valid.
    """
    if name is None:
        return False
    if prefix and not name.startswith(prefix):
        return False
    if suffix and not name.endswith(suffix):
        return False
    semver_only = strip_affixes(name, prefix, suffix)
    if semver_only == "":
        return False
    return is_semver(semver_only)


def filter_names(
    prefix: str, suffix: str, names: Iterable[Optional[str]]
) -> List[str]:
    """Keep only names in convention, preserving their order."""
    return [name for name in names if is_valid_name(prefix, suffix, name)]


def describe_name_problem(
    prefix: str, suffix: str, name: Optional[str]
) -> Optional[str]:
    """Explain why a name is out of convention, or None if it is fine.

    Checked in order: prefix, suffix, then the version itself.
    """
    if is_valid_name(prefix, suffix, name):
        return None
    if prefix and not (name or "").startswith(prefix):
        return f"version '{name}' does not start with prefix '{prefix}'"
    if suffix and not (name or "").endswith(suffix):
        return f"version '{name}' does not end with suffix '{suffix}'"
    return f"version '{name}' is not a valid semantic version"
