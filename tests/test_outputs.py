"""Tests for step outputs, annotations and the YAML report."""

import yaml

from version_check.models import CheckConfig, Gate, Verdict
from version_check.outputs import (
    annotate_error,
    escape_annotation,
    verdict_outputs,
    write_outputs,
    write_report,
)


class TestVerdictOutputs:
    def test_valid(self):
        assert verdict_outputs(Verdict(True, "version is valid")) == {
            "valid": "true",
            "message": "version is valid",
        }

    def test_invalid(self):
        assert verdict_outputs(Verdict(False, "nope"))["valid"] == "false"


class TestWriteOutputs:
    def test_appends_to_output_file(self, tmp_path):
        output = tmp_path / "github_output"
        output.write_text("earlier=1\n")
        write_outputs(Verdict(False, "tag '1.0.0' already exists"), str(output))
        assert output.read_text() == (
            "earlier=1\n"
            "valid=false\n"
            "message=tag '1.0.0' already exists\n"
        )

    def test_uses_github_output_env(self, tmp_path, monkeypatch):
        output = tmp_path / "github_output"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output))
        write_outputs(Verdict(True, "version is valid"))
        assert "valid=true\n" in output.read_text()

    def test_multiline_uses_delimiter(self, tmp_path):
        output = tmp_path / "github_output"
        write_outputs(Verdict(False, "line one\nline two"), str(output))
        lines = output.read_text().splitlines()
        assert lines[0] == "valid=false"
        assert lines[1].startswith("message<<ghadelimiter_")
        delimiter = lines[1].split("<<", 1)[1]
        assert lines[2:] == ["line one", "line two", delimiter]

    def test_stdout_without_output_file(self, capsys):
        write_outputs(Verdict(True, "version is valid"))
        assert capsys.readouterr().out == "valid=true\nmessage=version is valid\n"


class TestAnnotations:
    def test_escape(self):
        assert escape_annotation("100%\r\ndone") == "100%25%0D%0Adone"

    def test_annotate_error(self, capsys):
        annotate_error("Bad credentials")
        assert capsys.readouterr().out == "::error::Bad credentials\n"


class TestWriteReport:
    def test_report_contents(self, tmp_path):
        path = tmp_path / "report.yaml"
        config = CheckConfig(
            version="cli-0.1.0", prefix="cli-", check_tags=True,
            token="ghp_secret", owner="octo-org", repo="octo-repo",
        )
        verdict = Verdict(False, "tag 'cli-0.1.0' already exists", Gate.TAGS)
        write_report(verdict, config, str(path))

        text = path.read_text()
        assert "ghp_secret" not in text
        report = yaml.safe_load(text)
        assert report["verdict"] == {
            "valid": False,
            "message": "tag 'cli-0.1.0' already exists",
            "failed_gate": "tags",
        }
        assert report["config"]["repository"] == "octo-org/octo-repo"
        assert report["metadata"]["schema_version"] == "1.0.0"
