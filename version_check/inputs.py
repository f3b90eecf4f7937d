"""Action inputs: command line flags, INPUT_* environment, defaults.

The GitHub Actions runner exports each action input as INPUT_<NAME>.
Command line flags take precedence so the check can also run locally.
"""

import argparse
import logging
import os
import re
from typing import Mapping, Optional, Tuple

from .models import CheckConfig

logger = logging.getLogger(__name__)

REPOSITORY_PATTERN = re.compile(r"^[\w.-]+/[\w.-]+$")

# YAML 1.2 core schema booleans, as accepted by the Actions toolkit
TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


class InputError(ValueError):
    """Raised when an input is missing or malformed."""


def get_input(
    name: str,
    args: Optional[argparse.Namespace] = None,
    env: Optional[Mapping[str, str]] = None,
) -> str:
    """Read one input, trimmed. Returns "" when it is not set anywhere."""
    env = os.environ if env is None else env
    value = getattr(args, name, None) if args is not None else None
    if value is None:
        value = env.get(f"INPUT_{name.replace(' ', '_').upper()}", "")
    return value.strip()


def get_boolean_input(
    name: str,
    args: Optional[argparse.Namespace] = None,
    env: Optional[Mapping[str, str]] = None,
) -> bool:
    """Read a boolean input. Unset means False."""
    value = get_input(name, args, env)
    if not value:
        return False
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InputError(
        f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def parse_repository(repository: str) -> Tuple[str, str]:
    """Split "owner/repo" into its parts."""
    if not REPOSITORY_PATTERN.match(repository):
        raise InputError("repository must be in the form owner/repo")
    owner, repo = repository.split("/")
    return owner, repo


def load_config(
    args: Optional[argparse.Namespace] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CheckConfig:
    """Build the immutable configuration for one evaluation.

    Raises:
        InputError: version missing, a boolean input malformed, token
            missing while checks are requested, or repository malformed
            or undeterminable.
    """
    env = os.environ if env is None else env

    version = get_input("version", args, env)
    if not version:
        raise InputError("Input required and not supplied: version")

    check_tags = get_boolean_input("check_tags", args, env)
    check_releases = get_boolean_input("check_releases", args, env)
    checks_requested = check_tags or check_releases

    token = get_input("token", args, env) or env.get("GITHUB_TOKEN", "")
    if checks_requested and not token:
        raise InputError("token is required when checking tags or releases")

    # Default to the repository the workflow runs in
    repository = get_input("repository", args, env)
    owner = repo = None
    if repository:
        owner, repo = parse_repository(repository)
    elif env.get("GITHUB_REPOSITORY"):
        owner, repo = parse_repository(env["GITHUB_REPOSITORY"])
    elif checks_requested:
        raise InputError(
            "repository is required when checking tags or releases "
            "outside of GitHub Actions"
        )

    config = CheckConfig(
        version=version,
        prefix=get_input("prefix", args, env),
        suffix=get_input("suffix", args, env),
        check_tags=check_tags,
        check_releases=check_releases,
        token=token,
        owner=owner,
        repo=repo,
    )
    logger.debug("Loaded configuration: %s", config.to_dict())
    return config
