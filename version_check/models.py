"""Data models for release version checking.

Frozen dataclasses: one evaluation reads a CheckConfig and produces a
single Verdict. Each class has a to_dict() method for YAML serialization.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


VALID_MESSAGE = "version is valid"


class Gate(Enum):
    """Sequential decision stages, in evaluation order."""
    SELF = "self"
    TAGS = "tags"
    RELEASES = "releases"


class HistoryOutcome(Enum):
    """Why a version was rejected against a tag or release history."""
    ALREADY_EXISTS = "already exists"
    NOT_HIGHER = "not higher than existing maximum"


@dataclass(frozen=True)
class CheckConfig:
    """Inputs for a single evaluation."""
    version: str
    prefix: str = ""
    suffix: str = ""
    check_tags: bool = False
    check_releases: bool = False
    token: str = ""
    owner: Optional[str] = None
    repo: Optional[str] = None

    @property
    def repository(self) -> Optional[str]:
        if self.owner and self.repo:
            return f"{self.owner}/{self.repo}"
        return None

    def to_dict(self) -> Dict:
        # never includes the token
        return {
            "version": self.version,
            "prefix": self.prefix,
            "suffix": self.suffix,
            "check_tags": self.check_tags,
            "check_releases": self.check_releases,
            "repository": self.repository,
        }


@dataclass(frozen=True)
class HistoryResult:
    """Result of comparing a version against one history list."""
    ok: bool
    outcome: Optional[HistoryOutcome] = None
    existing: Optional[str] = None  # raw name of the current maximum

    @property
    def reason(self) -> str:
        return self.outcome.value if self.outcome else ""


@dataclass(frozen=True)
class Verdict:
    """Final answer for one evaluation."""
    valid: bool
    message: str
    failed_gate: Optional[Gate] = None

    def to_dict(self) -> Dict:
        d = {
            "valid": self.valid,
            "message": self.message,
        }
        if self.failed_gate:
            d["failed_gate"] = self.failed_gate.value
        return d
