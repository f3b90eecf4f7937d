"""Tests for comparing a version against tag/release history."""

from version_check.history import evaluate_history
from version_check.models import HistoryOutcome


class TestEvaluateHistory:
    def test_empty_history_accepts(self):
        result = evaluate_history("", "", "0.0.1", [])
        assert result.ok
        assert result.reason == ""

    def test_no_names_in_convention_accepts(self):
        """First release under a new prefix is always accepted."""
        result = evaluate_history("cli-", "", "cli-0.1.0", ["5.0.0", "nightly", None])
        assert result.ok

    def test_higher_accepts(self):
        result = evaluate_history("", "", "0.2.0", ["0.1.0", "0.1.1"])
        assert result.ok

    def test_verbatim_duplicate(self):
        result = evaluate_history("cli-", "", "cli-0.1.2", ["cli-0.1.0", "cli-0.1.2"])
        assert not result.ok
        assert result.outcome == HistoryOutcome.ALREADY_EXISTS
        assert result.reason == "already exists"

    def test_duplicate_wins_over_ordering(self):
        """An exact match is a duplicate even when a v-prefixed twin exists."""
        result = evaluate_history("", "", "v1.0.0", ["1.0.0", "v1.0.0", "2.0.0"])
        assert result.outcome == HistoryOutcome.ALREADY_EXISTS

    def test_lower_rejected(self):
        result = evaluate_history("", "", "0.10.0", ["0.9.0", "0.10.1"])
        assert not result.ok
        assert result.outcome == HistoryOutcome.NOT_HIGHER
        assert result.existing == "0.10.1"
        assert result.reason == "not higher than existing maximum"

    def test_tie_after_stripping_is_not_a_duplicate(self):
        result = evaluate_history("", "", "1.0.0", ["v1.0.0"])
        assert not result.ok
        assert result.outcome == HistoryOutcome.NOT_HIGHER
        assert result.existing == "v1.0.0"

    def test_build_metadata_tie(self):
        result = evaluate_history("", "", "1.0.0+build.2", ["1.0.0+build.1"])
        assert result.outcome == HistoryOutcome.NOT_HIGHER

    def test_release_after_prerelease(self):
        result = evaluate_history("", "", "1.0.0", ["1.0.0-rc.1", "0.9.0"])
        assert result.ok

    def test_prerelease_after_release_rejected(self):
        result = evaluate_history("", "", "1.0.0-rc.2", ["1.0.0"])
        assert result.outcome == HistoryOutcome.NOT_HIGHER

    def test_compares_with_affixes_stripped(self):
        names = ["cli-0.9.0-linux", "cli-0.10.0-linux", "0.99.0", "cli-0.11.0"]
        result = evaluate_history("cli-", "-linux", "cli-0.10.1-linux", names)
        assert result.ok

    def test_other_convention_ignored_for_maximum(self):
        result = evaluate_history("cli-", "", "cli-0.2.0", ["cli-0.1.0", "9.9.9"])
        assert result.ok

    def test_null_release_names_ignored(self):
        result = evaluate_history("", "", "0.2.0", [None, "0.1.0", None])
        assert result.ok
