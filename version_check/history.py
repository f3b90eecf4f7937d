"""Compare a proposed version against a tag or release history.

No GitHub API dependency: operates on already fetched name lists.
"""

import logging
from typing import Iterable, Optional

from .affixes import strip_affixes
from .models import HistoryOutcome, HistoryResult
from .name_matcher import filter_names
from .semver_support import compare_versions, max_version

logger = logging.getLogger(__name__)


def evaluate_history(
    prefix: str,
    suffix: str,
    target: str,
    names: Iterable[Optional[str]],
) -> HistoryResult:
    """Decide whether target may be published given existing names.

    Steps:
    1. Names out of convention (or missing) are ignored.
    2. A verbatim match of target fails as ALREADY_EXISTS.
    3. Otherwise target must be strictly greater than the highest
       existing version, compared with affixes stripped. A tie is a
       NOT_HIGHER failure, not a duplicate.
    4. An empty history accepts any target.

    Args:
        prefix: Required literal prefix, or "" for none.
        suffix: Required literal suffix, or "" for none.
        target: Proposed name, already known to be in convention.
        names: Raw tag or release names.

    Returns:
        HistoryResult; on NOT_HIGHER, existing is the raw name of the maximum.
    """
    candidates = filter_names(prefix, suffix, names)
    logger.debug("%d of the existing names follow the convention", len(candidates))

    if target in candidates:
        return HistoryResult(
            ok=False, outcome=HistoryOutcome.ALREADY_EXISTS, existing=target,
        )

    if not candidates:
        return HistoryResult(ok=True)

    highest = max_version(
        candidates, key=lambda name: strip_affixes(name, prefix, suffix),
    )
    logger.debug("Highest existing version: %s", highest)

    if compare_versions(
        strip_affixes(target, prefix, suffix),
        strip_affixes(highest, prefix, suffix),
    ) > 0:
        return HistoryResult(ok=True)

    return HistoryResult(
        ok=False, outcome=HistoryOutcome.NOT_HIGHER, existing=highest,
    )
