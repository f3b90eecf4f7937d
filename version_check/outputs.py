"""Step outputs, error annotations and the optional YAML report."""

import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

import yaml

from .models import CheckConfig, Verdict

logger = logging.getLogger(__name__)

REPORT_SCHEMA_VERSION = "1.0.0"


def verdict_outputs(verdict: Verdict) -> Dict[str, str]:
    return {
        "valid": "true" if verdict.valid else "false",
        "message": verdict.message,
    }


def _format_output(key: str, value: str) -> str:
    if "\n" not in value:
        return f"{key}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"


def write_outputs(verdict: Verdict, output_path: Optional[str] = None) -> None:
    """Publish valid/message as step outputs.

    Appends to the $GITHUB_OUTPUT file when running under Actions,
    otherwise prints key=value lines to stdout.
    """
    path = output_path or os.environ.get("GITHUB_OUTPUT")
    outputs = verdict_outputs(verdict)
    if not path:
        for key, value in outputs.items():
            print(f"{key}={value}")
        return

    with open(path, "a", encoding="utf-8") as f:
        for key, value in outputs.items():
            f.write(_format_output(key, value))
    logger.debug("Wrote outputs to %s", path)


def escape_annotation(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def annotate_error(message: str) -> None:
    """Emit a workflow ::error:: annotation."""
    print(f"::error::{escape_annotation(message)}", file=sys.stdout)


def write_report(verdict: Verdict, config: CheckConfig, path: str) -> Dict:
    """Write the verdict and the evaluated configuration as YAML."""
    report = {
        "metadata": {
            "checked_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "schema_version": REPORT_SCHEMA_VERSION,
        },
        "config": config.to_dict(),
        "verdict": verdict.to_dict(),
    }
    with open(path, "w") as f:
        yaml.dump(report, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    logger.info("Report written to %s", path)
    return report
