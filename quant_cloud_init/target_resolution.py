"""
Target Resolution Module

Pure functions mapping a classified ref and user overrides to the
deployment environment, production flag and image tag suffix.
No I/O happens here.
"""

import re
from typing import Optional, Tuple

from .config import (
    DEFAULT_PRODUCTION_BRANCHES,
    DEVELOP_BRANCH,
    LATEST_SUFFIX,
    PRODUCTION_ENVIRONMENT,
)
from .exceptions import InputError
from .models import Overrides, RefDescriptor, ResolvedTarget

ENVIRONMENT_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9]")
IMAGE_TAG_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9.]")


def environment_slug(value: str) -> str:
    """Lowercase and replace everything but letters and digits with '-'."""
    return ENVIRONMENT_UNSAFE_RE.sub("-", value).lower()


def image_tag_slug(value: str) -> str:
    """Lowercase and replace everything but letters, digits and '.' with '-'."""
    return IMAGE_TAG_UNSAFE_RE.sub("-", value).lower()


def production_branches(master_branch_name: Optional[str] = None) -> Tuple[str, ...]:
    """Branches that deploy to production."""
    if master_branch_name:
        return (master_branch_name,)
    return DEFAULT_PRODUCTION_BRANCHES


def is_production_branch(branch: str, master_branch_name: Optional[str] = None) -> bool:
    return branch in production_branches(master_branch_name)


def resolve_environment(ref: RefDescriptor, overrides: Overrides) -> Tuple[str, bool]:
    """
    Determine the environment name and whether it is production.

    An environment override keeps tags in production but disables the
    branch based production detection.

    Args:
        ref: Classified Git ref
        overrides: User overrides

    Returns:
        Tuple of (environment name, is production)
    """
    if overrides.environment_name:
        return overrides.environment_name, ref.is_tag

    if ref.is_tag:
        return PRODUCTION_ENVIRONMENT, True

    if ref.is_pull_request:
        return f"pr-{ref.pr_id}", False

    if is_production_branch(ref.name, overrides.master_branch_name):
        return PRODUCTION_ENVIRONMENT, True
    if ref.name == DEVELOP_BRANCH:
        return DEVELOP_BRANCH, False
    return environment_slug(ref.name), False


def resolve_image_suffix(ref: RefDescriptor, overrides: Overrides) -> str:
    """
    Determine the image tag suffix, including its leading '-'.

    Tag names are used verbatim, branch names are slugged.
    """
    if overrides.environment_name:
        return f"-{environment_slug(overrides.environment_name)}"

    if ref.is_tag:
        return f"-{ref.name}"

    if ref.is_pull_request:
        return f"-pr-{ref.pr_id}"

    if is_production_branch(ref.name, overrides.master_branch_name):
        return LATEST_SUFFIX
    if ref.name == DEVELOP_BRANCH:
        return f"-{DEVELOP_BRANCH}"
    return f"-{image_tag_slug(ref.name)}"


def resolve_application_name(repository: str, application_override: Optional[str] = None) -> str:
    """
    Determine the Quant Cloud application name.

    Args:
        repository: GitHub repository in 'owner/repo' format
        application_override: Explicit application name, wins when set

    Returns:
        Application name

    Raises:
        InputError: If no override is set and the repository is malformed
    """
    if application_override:
        return application_override

    parts = repository.split("/")
    if len(parts) != 2 or not parts[1]:
        raise InputError(f"Invalid repository format '{repository}', expected 'owner/repo'")
    return parts[1]


def resolve_target(ref: RefDescriptor, overrides: Overrides, application_name: str) -> ResolvedTarget:
    """Resolve everything downstream steps need to know about the deployment target."""
    environment_name, is_production = resolve_environment(ref, overrides)
    return ResolvedTarget(
        application_name=application_name,
        environment_name=environment_name,
        is_production=is_production,
        image_suffix=resolve_image_suffix(ref, overrides),
    )
