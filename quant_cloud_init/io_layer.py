"""
I/O Layer for Quant Cloud Init

This module contains the local side effects (Docker login, GitHub step
outputs) separated from business logic. This is the "imperative shell"
next to the Quant Cloud API client.
"""

import logging
import subprocess
from pathlib import Path
from typing import Dict, Optional

from .config import DOCKER_BINARY
from .exceptions import InputError, RegistryLoginError
from .models import RegistryCredentials

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles the local I/O operations of the application."""

    def __init__(self, github_output: Optional[str] = None, docker_binary: str = DOCKER_BINARY):
        """Initialize the I/O layer.

        Args:
            github_output: Path of the GitHub Actions step output file, None outside a runner
            docker_binary: Docker CLI executable
        """
        self.github_output = github_output
        self.docker_binary = docker_binary

    # -----------------------------------------------------------------------------
    # Docker Operations
    # -----------------------------------------------------------------------------

    def docker_login(self, credentials: RegistryCredentials) -> None:
        """Log the Docker CLI into the image registry.

        The password goes through stdin and the command output is captured,
        so neither ends up in the workflow log.

        Args:
            credentials: Registry endpoint, username and password

        Raises:
            RegistryLoginError: If docker is missing or the login is rejected
        """
        logger.info(f"Logging into Docker registry: {credentials.endpoint}")
        command = [
            self.docker_binary,
            "login",
            credentials.endpoint,
            "--username", credentials.username,
            "--password-stdin",
        ]
        try:
            subprocess.run(
                command,
                input=credentials.password,
                text=True,
                check=True,
                capture_output=True,
            )
        except FileNotFoundError as err:
            logger.error("Docker login failed")
            raise RegistryLoginError(f"Docker CLI '{self.docker_binary}' was not found") from err
        except subprocess.CalledProcessError as err:
            logger.error("Docker login failed")
            raise RegistryLoginError(
                f"docker login to {credentials.endpoint} failed with exit code {err.returncode}"
            ) from err

        logger.info("Docker login successful")

    # -----------------------------------------------------------------------------
    # GitHub Operations
    # -----------------------------------------------------------------------------

    def write_outputs(self, outputs: Dict[str, str]) -> bool:
        """Append step outputs to the GitHub Actions output file.

        Args:
            outputs: Output names and values

        Returns:
            True if written, False when not running on a GitHub Actions runner
        """
        if not self.github_output:
            logger.info("GITHUB_OUTPUT is not set, skipping step outputs")
            return False

        for key, value in outputs.items():
            if "\n" in value or "\r" in value:
                raise InputError(f"Output {key} must not contain line breaks")

        with Path(self.github_output).open("a", encoding="utf-8") as f:
            for key, value in outputs.items():
                f.write(f"{key}={value}\n")

        return True
