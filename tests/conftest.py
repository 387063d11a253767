"""Test fixtures for Quant Cloud Init.

This module provides shared fixtures used across multiple test modules.
It sets up the environment variables GitHub Actions would provide and
fake HTTP responses for the Quant Cloud API.

Fixtures:
    github_env: Environment of a push to main with all required inputs
    make_response: Factory for fake requests.Response objects
    registry_credentials: Sample registry credentials
"""

import json
from unittest.mock import Mock

import pytest

from quant_cloud_init.models import RegistryCredentials


@pytest.fixture
def github_env(tmp_path):
    """Environment variables of a push to main with all required inputs.

    Args:
        tmp_path (Path): Built-in pytest fixture providing a temporary directory path

    Returns:
        dict: Environment variables, GITHUB_OUTPUT points to a file in tmp_path
    """
    return {
        "INPUT_QUANT_API_KEY": "secret-api-key",
        "INPUT_QUANT_ORGANIZATION": "acme",
        "GITHUB_REF": "refs/heads/main",
        "GITHUB_REPOSITORY": "acme-org/website",
        "GITHUB_EVENT_NAME": "push",
        "GITHUB_OUTPUT": str(tmp_path / "github_output"),
    }


@pytest.fixture
def make_response():
    """Factory building fake requests.Response objects."""

    def _make(status_code=200, body=None):
        response = Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        if body is None:
            response.content = b""
            response.json = Mock(side_effect=ValueError("No JSON object could be decoded"))
        else:
            response.content = json.dumps(body).encode()
            response.json = Mock(return_value=body)
        return response

    return _make


@pytest.fixture
def registry_credentials():
    return RegistryCredentials(
        endpoint="https://registry.quantcdn.io",
        username="quant-user",
        password="registry-password",
    )
