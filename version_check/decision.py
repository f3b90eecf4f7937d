"""Decision engine: three ordered gates with early exit.

Gates run in GATES order and the first failure ends the evaluation:

    SELF      the version itself follows the naming convention
    TAGS      (check_tags) newer than every tag, and not already a tag
    RELEASES  (check_releases) newer than every release, and not already one

Histories are requested from the source only when their gate is entered,
so releases are never fetched after the tag gate has failed.
"""

import logging
from typing import List, Optional, Protocol

from .history import evaluate_history
from .models import (
    VALID_MESSAGE,
    CheckConfig,
    Gate,
    HistoryOutcome,
    HistoryResult,
    Verdict,
)
from .name_matcher import describe_name_problem

logger = logging.getLogger(__name__)


class HistorySource(Protocol):
    """Supplies fully paginated tag and release names for a repository."""

    def list_tag_names(self, owner: str, repo: str) -> List[str]:
        ...

    def list_release_names(self, owner: str, repo: str) -> List[Optional[str]]:
        ...


def decide(config: CheckConfig, source: Optional[HistorySource] = None) -> Verdict:
    """Evaluate config against the naming convention and repository history.

    Args:
        config: Version, convention and which histories to check.
        source: Repository history provider. Only needed when
            check_tags or check_releases is set.

    Returns:
        Verdict carrying the first failing gate's message, or the
        valid message when every entered gate passed.
    """
    for gate, enabled, check_fn in GATES:
        if not enabled(config):
            logger.debug("Skipping %s gate", gate.value)
            continue
        logger.debug("Entering %s gate", gate.value)
        message = check_fn(config, source)
        if message is not None:
            logger.info("Version rejected at %s gate: %s", gate.value, message)
            return Verdict(valid=False, message=message, failed_gate=gate)
    return Verdict(valid=True, message=VALID_MESSAGE)


def history_message(kind: str, version: str, result: HistoryResult) -> Optional[str]:
    """Render a failed HistoryResult for a tag or release history."""
    if result.ok:
        return None
    if result.outcome == HistoryOutcome.ALREADY_EXISTS:
        return f"{kind} '{version}' already exists"
    return (
        f"version '{version}' is not higher than existing {kind} "
        f"'{result.existing}'"
    )


def _require_source(
    source: Optional[HistorySource], config: CheckConfig
) -> HistorySource:
    if source is None:
        raise ValueError("a history source is required to check tags or releases")
    if not config.owner or not config.repo:
        raise ValueError("a repository is required to check tags or releases")
    return source


def _check_self(
    config: CheckConfig, source: Optional[HistorySource]
) -> Optional[str]:
    return describe_name_problem(config.prefix, config.suffix, config.version)


def _check_tags(
    config: CheckConfig, source: Optional[HistorySource]
) -> Optional[str]:
    names = _require_source(source, config).list_tag_names(config.owner, config.repo)
    logger.debug("Found %d tags in %s", len(names), config.repository)
    result = evaluate_history(config.prefix, config.suffix, config.version, names)
    return history_message("tag", config.version, result)


def _check_releases(
    config: CheckConfig, source: Optional[HistorySource]
) -> Optional[str]:
    names = _require_source(source, config).list_release_names(
        config.owner, config.repo,
    )
    logger.debug("Found %d releases in %s", len(names), config.repository)
    result = evaluate_history(config.prefix, config.suffix, config.version, names)
    return history_message("release", config.version, result)


# Evaluation order: (gate, entered when, check returning a failure message)
GATES = [
    (Gate.SELF, lambda config: True, _check_self),
    (Gate.TAGS, lambda config: config.check_tags, _check_tags),
    (Gate.RELEASES, lambda config: config.check_releases, _check_releases),
]
