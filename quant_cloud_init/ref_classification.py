"""
Ref Classification Module

Pure functions for classifying Git refs.
This module contains no side effects - only ref analysis logic.
"""

import re

from .config import BRANCH_REF_PREFIX, PULL_REQUEST_REF_PREFIX, TAG_REF_PREFIX
from .exceptions import InputError
from .models import RefDescriptor, RefKind

PULL_REQUEST_ID_RE = re.compile(r"^(\d+)(?:/|$)")


def classify_ref(raw_ref: str) -> RefDescriptor:
    """
    Classify a Git ref as a tag, pull request or branch head.

    Args:
        raw_ref: Full ref, e.g. refs/heads/main, refs/tags/v1.2.0
            or refs/pull/42/merge

    Returns:
        RefDescriptor for the ref

    Raises:
        InputError: If the ref is empty or has an unknown format
    """
    if not raw_ref:
        raise InputError("Git ref is empty")

    if raw_ref.startswith(TAG_REF_PREFIX):
        return RefDescriptor(raw_ref=raw_ref, kind=RefKind.TAG, name=raw_ref[len(TAG_REF_PREFIX):])

    if raw_ref.startswith(PULL_REQUEST_REF_PREFIX):
        match = PULL_REQUEST_ID_RE.match(raw_ref[len(PULL_REQUEST_REF_PREFIX):])
        if not match:
            raise InputError(f"Could not extract pull request number from ref: {raw_ref}")
        pr_id = match.group(1)
        return RefDescriptor(raw_ref=raw_ref, kind=RefKind.PULL_REQUEST, name=f"pr-{pr_id}", pr_id=pr_id)

    if raw_ref.startswith(BRANCH_REF_PREFIX):
        # An empty branch name is passed through on purpose
        return RefDescriptor(raw_ref=raw_ref, kind=RefKind.BRANCH, name=raw_ref[len(BRANCH_REF_PREFIX):])

    raise InputError(f"Unknown ref format: {raw_ref}")
