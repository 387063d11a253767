"""
Configuration Module for Quant Cloud Init

This module contains constants used throughout the application.
They control how refs are recognised, which branches deploy to production
and which step outputs are published.

Constants:
    DEFAULT_BASE_URL: Quant Cloud API root used when no base_url input is given
    DEFAULT_PRODUCTION_BRANCHES: Branches that deploy to production by default
    PRODUCTION_ENVIRONMENT: Environment name used for production deployments
    DEVELOP_BRANCH: Branch mapped to the develop environment
    TAG_REF_PREFIX / BRANCH_REF_PREFIX / PULL_REQUEST_REF_PREFIX: Git ref prefixes
    OUTPUT_NAMES: Names of all step outputs, in publishing order
"""

DEFAULT_BASE_URL = "https://dashboard.quantcdn.io/api/v3"
REQUEST_TIMEOUT_SECONDS = 30

DEFAULT_PRODUCTION_BRANCHES = ("main", "master")
PRODUCTION_ENVIRONMENT = "production"
DEVELOP_BRANCH = "develop"
LATEST_SUFFIX = "-latest"

TAG_REF_PREFIX = "refs/tags/"
BRANCH_REF_PREFIX = "refs/heads/"
PULL_REQUEST_REF_PREFIX = "refs/pull/"

# Returned by the API when the organization is unknown or not accessible
UNMATCHED_RESULT_MESSAGE = "Unable to find matching result"
ORGANIZATION_ACCESS_MESSAGE = "Either the organization does not exist or you do not have access to it"

DOCKER_BINARY = "docker"

OUTPUT_NAMES = (
    "project_exists",
    "environment_exists",
    "quant_application",
    "environment_name",
    "is_production",
    "stripped_endpoint",
    "image_suffix",
    "image_suffix_clean",
)
