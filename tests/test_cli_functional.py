#!/usr/bin/env python3

"""
Functional tests for the CLI module.

These tests run the whole CLI without making actual external calls.
They verify that the CLI correctly:
1. Reads inputs and GitHub context from environment variables
2. Resolves environment, production flag and image suffix for the ref
3. Logs Docker in unless told to skip it
4. Writes all step outputs to the GITHUB_OUTPUT file

Note: The Quant Cloud client and the docker subprocess are mocked, the
output file is a real file in a temporary directory.
"""

import os
from unittest.mock import Mock, patch

import pytest

from quant_cloud_init import cli
from quant_cloud_init.exceptions import QuantApiError
from quant_cloud_init.models import RegistryCredentials

# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def mock_client():
    """Provides a mock Quant Cloud client where application and environment exist."""
    client = Mock()
    client.list_applications.return_value = [{"name": "website"}]
    client.get_registry_credentials.return_value = RegistryCredentials(
        endpoint="https://registry.quantcdn.io",
        username="quant-user",
        password="registry-password",
    )
    client.get_application.return_value = {"name": "website"}
    client.get_environment.return_value = {"name": "production"}
    return client


@pytest.fixture
def cli_test_env(github_env, mock_client):
    """Setup test environment for CLI tests."""
    with (
        patch.dict(os.environ, github_env, clear=True),
        patch("quant_cloud_init.cli.QuantClient", return_value=mock_client) as client_class,
        patch("quant_cloud_init.io_layer.subprocess.run") as mock_run,
    ):
        yield {
            "env": github_env,
            "client": mock_client,
            "client_class": client_class,
            "run": mock_run,
        }


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def read_outputs(env):
    """Parse the GITHUB_OUTPUT file into a dict."""
    with open(env["GITHUB_OUTPUT"], encoding="utf-8") as f:
        return dict(line.split("=", 1) for line in f.read().splitlines())


def run_cli():
    """Run the CLI and return its exit code (0 when it returns normally)."""
    try:
        cli.main()
    except SystemExit as e:
        return e.code
    return 0


# -----------------------------------------------------------------------------
# Tests
# -----------------------------------------------------------------------------


def test_push_to_main(cli_test_env):
    """Test a push to main deploys to production and logs Docker in."""
    assert run_cli() == 0

    cli_test_env["client_class"].assert_called_once_with("secret-api-key", "https://dashboard.quantcdn.io/api/v3")
    cli_test_env["run"].assert_called_once()
    assert read_outputs(cli_test_env["env"]) == {
        "project_exists": "true",
        "environment_exists": "true",
        "quant_application": "website",
        "environment_name": "production",
        "is_production": "true",
        "stripped_endpoint": "registry.quantcdn.io",
        "image_suffix": "-latest",
        "image_suffix_clean": "latest",
    }


def test_tag_push(cli_test_env):
    """Test a tag push deploys to production with the tag as image suffix."""
    os.environ["GITHUB_REF"] = "refs/tags/v1.2.0"

    assert run_cli() == 0

    outputs = read_outputs(cli_test_env["env"])
    assert outputs["environment_name"] == "production"
    assert outputs["is_production"] == "true"
    assert outputs["image_suffix"] == "-v1.2.0"
    assert outputs["image_suffix_clean"] == "v1.2.0"


def test_pull_request_for_new_environment(cli_test_env):
    """Test a pull request whose environment does not exist yet."""
    os.environ["GITHUB_REF"] = "refs/pull/42/merge"
    os.environ["GITHUB_EVENT_NAME"] = "pull_request"
    cli_test_env["client"].get_environment.side_effect = QuantApiError("Not found", status=404)

    assert run_cli() == 0

    cli_test_env["client"].get_environment.assert_called_once_with("acme", "website", "pr-42")
    outputs = read_outputs(cli_test_env["env"])
    assert outputs["project_exists"] == "true"
    assert outputs["environment_exists"] == "false"
    assert outputs["environment_name"] == "pr-42"
    assert outputs["is_production"] == "false"
    assert outputs["image_suffix"] == "-pr-42"


def test_overrides(cli_test_env):
    """Test application and environment overrides."""
    os.environ["GITHUB_REF"] = "refs/heads/main"
    os.environ["INPUT_QUANT_APPLICATION"] = "marketing"
    os.environ["INPUT_ENVIRONMENT_NAME_OVERRIDE"] = "qa.env"

    assert run_cli() == 0

    cli_test_env["client"].get_application.assert_called_once_with("acme", "marketing")
    outputs = read_outputs(cli_test_env["env"])
    assert outputs["quant_application"] == "marketing"
    assert outputs["environment_name"] == "qa.env"
    assert outputs["is_production"] == "false"
    assert outputs["image_suffix"] == "-qa-env"


def test_skip_docker_login_without_credentials(cli_test_env):
    """Test skipping Docker login is fine even when no credentials are available."""
    os.environ["INPUT_SKIP_DOCKER_LOGIN"] = "true"
    cli_test_env["client"].get_registry_credentials.side_effect = QuantApiError("Forbidden", status=403)

    assert run_cli() == 0

    cli_test_env["run"].assert_not_called()
    assert read_outputs(cli_test_env["env"])["stripped_endpoint"] == ""


def test_missing_credentials_without_skip_fails(cli_test_env, capsys):
    """Test Docker login without credentials stops the run."""
    cli_test_env["client"].get_registry_credentials.return_value = None

    assert run_cli() == 1

    cli_test_env["run"].assert_not_called()
    assert "Failed to retrieve Quant Cloud Image Registry credentials" in capsys.readouterr().out
    assert not os.path.exists(cli_test_env["env"]["GITHUB_OUTPUT"])


def test_invalid_organization_fails(cli_test_env, capsys):
    """Test organization validation failure surfaces a clear message."""
    cli_test_env["client"].list_applications.side_effect = QuantApiError(
        "x", status=404, api_message="Unable to find matching result"
    )

    assert run_cli() == 1

    out = capsys.readouterr().out
    assert "Error: Either the organization does not exist or you do not have access to it" in out
    assert "secret-api-key" not in out


def test_missing_inputs_fail_before_api_calls(cli_test_env, capsys):
    """Test missing required inputs are reported without calling the API."""
    del os.environ["INPUT_QUANT_API_KEY"]

    assert run_cli() == 1

    cli_test_env["client_class"].assert_not_called()
    assert "Error: Input required and not supplied: quant_api_key" in capsys.readouterr().out


def test_unknown_ref_fails_before_api_calls(cli_test_env, capsys):
    """Test an unknown ref format stops the run before any remote call."""
    os.environ["GITHUB_REF"] = "refs/remotes/origin/main"

    assert run_cli() == 1

    cli_test_env["client"].list_applications.assert_not_called()
    assert "Error: Unknown ref format: refs/remotes/origin/main" in capsys.readouterr().out


def test_line_break_in_override_fails_without_outputs(cli_test_env, capsys):
    """Test an override with a line break cannot add forged step outputs."""
    os.environ["INPUT_ENVIRONMENT_NAME_OVERRIDE"] = "qa\nis_production=true"

    assert run_cli() == 1

    cli_test_env["client_class"].assert_not_called()
    assert not os.path.exists(cli_test_env["env"]["GITHUB_OUTPUT"])
    assert "Error: environment_name_override must not contain line breaks" in capsys.readouterr().out


def test_docker_login_failure(cli_test_env, capsys):
    """Test a rejected Docker login fails the run."""
    import subprocess
    cli_test_env["run"].side_effect = subprocess.CalledProcessError(1, ["docker", "login"])

    assert run_cli() == 1

    out = capsys.readouterr().out
    assert "docker login to https://registry.quantcdn.io failed" in out
    assert "registry-password" not in out


def test_runs_without_github_output(cli_test_env):
    """Test the CLI succeeds when GITHUB_OUTPUT is not set."""
    del os.environ["GITHUB_OUTPUT"]

    assert run_cli() == 0
    assert not os.path.exists(cli_test_env["env"]["GITHUB_OUTPUT"])
