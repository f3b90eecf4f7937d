"""Entry point for the release version check.

Reads the action inputs, checks the version against the naming convention
and, when requested, the repository's tags and releases, then publishes
the valid/message step outputs.

Usage:
    python3 -m version_check \
        --version-to-check cli-1.4.0 \
        [--prefix cli-] [--suffix ""] \
        [--check-tags] [--check-releases] \
        [--repository owner/repo] [--token TOKEN] \
        [--report report.yaml] [--debug]

Inside GitHub Actions every flag may instead come from its INPUT_* variable.
A rejected version is a normal result (exit 0, valid=false); only input or
GitHub API errors fail the process.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .decision import decide
from .github_api import GitHubAPI
from .inputs import load_config
from .models import CheckConfig, Verdict
from .outputs import annotate_error, write_outputs, write_report

logger = logging.getLogger(__name__)


def run(config: CheckConfig, api: Optional[GitHubAPI] = None) -> Verdict:
    """Evaluate one configuration.

    Args:
        config: Loaded inputs.
        api: GitHubAPI instance (created from the config token if a
            history check is requested and none is provided).

    Returns:
        The Verdict for config.version.
    """
    if api is None and (config.check_tags or config.check_releases):
        api = GitHubAPI(token=config.token)

    logger.info("Checking version %s", config.version)
    verdict = decide(config, api)
    logger.info("valid=%s: %s", str(verdict.valid).lower(), verdict.message)

    if api is not None:
        logger.debug("%d GitHub API calls", api.api_calls)
    return verdict


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-version-check",
        description="Check that a release version follows the naming "
                    "convention and is newer than existing tags and releases",
    )
    parser.add_argument(
        "--version-to-check", dest="version",
        help="Version or tag name to validate (INPUT_VERSION)",
    )
    parser.add_argument(
        "--token",
        help="GitHub token, required for tag or release checks "
             "(INPUT_TOKEN, GITHUB_TOKEN)",
    )
    parser.add_argument(
        "--repository",
        help="Repository as owner/repo (INPUT_REPOSITORY, GITHUB_REPOSITORY)",
    )
    parser.add_argument(
        "--check-tags", dest="check_tags", nargs="?", const="true",
        help="Compare against existing tags (INPUT_CHECK_TAGS)",
    )
    parser.add_argument(
        "--check-releases", dest="check_releases", nargs="?", const="true",
        help="Compare against existing releases (INPUT_CHECK_RELEASES)",
    )
    parser.add_argument(
        "--prefix",
        help="Literal prefix every version name carries (INPUT_PREFIX)",
    )
    parser.add_argument(
        "--suffix",
        help="Literal suffix every version name carries (INPUT_SUFFIX)",
    )
    parser.add_argument(
        "--report",
        help="Path to write a YAML report of the verdict",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None, api: Optional[GitHubAPI] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    debug = args.debug or os.environ.get("RUNNER_DEBUG") == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
        verdict = run(config, api=api)
    except Exception as e:
        logger.error("Version check failed: %s", e)
        annotate_error(str(e))
        sys.exit(1)

    write_outputs(verdict)
    if args.report:
        write_report(verdict, config, args.report)


if __name__ == "__main__":
    main()
