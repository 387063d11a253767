"""
Environment Configuration Module

Handles parsing and validation of environment variables.
GitHub Actions passes step inputs as INPUT_<NAME> variables next to the
GITHUB_* context variables. This is a pure module - no side effects, just
data transformation.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from .config import DEFAULT_BASE_URL
from .models import Overrides

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes")


def _input(env: Dict[str, str], name: str) -> str:
    return env.get(f"INPUT_{name.upper()}", "").strip()


def _optional(value: str) -> Optional[str]:
    return value or None


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    api_key: str = field(repr=False)
    organization: str
    application_override: Optional[str] = None
    master_branch_override: Optional[str] = None
    environment_name_override: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    skip_docker_login: bool = False
    github_ref: str = ""
    github_repository: str = ""
    github_event_name: str = ""
    github_output: Optional[str] = None

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        base_url = _input(env, "base_url")
        if base_url:
            logger.warning(f"Using non-default base URL: {base_url}")
        else:
            base_url = DEFAULT_BASE_URL

        return cls(
            api_key=_input(env, "quant_api_key"),
            organization=_input(env, "quant_organization"),
            application_override=_optional(_input(env, "quant_application")),
            master_branch_override=_optional(_input(env, "master_branch_override")),
            environment_name_override=_optional(_input(env, "environment_name_override")),
            base_url=base_url.rstrip("/"),
            skip_docker_login=_input(env, "skip_docker_login").lower() in TRUE_VALUES,
            github_ref=env.get("GITHUB_REF", "").strip(),
            github_repository=env.get("GITHUB_REPOSITORY", "").strip(),
            github_event_name=env.get("GITHUB_EVENT_NAME", "").strip(),
            github_output=_optional(env.get("GITHUB_OUTPUT", "").strip()),
        )

    @property
    def overrides(self) -> Overrides:
        return Overrides(
            application_name=self.application_override,
            master_branch_name=self.master_branch_override,
            environment_name=self.environment_name_override,
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.api_key:
            errors.append("Input required and not supplied: quant_api_key")

        if not self.organization:
            errors.append("Input required and not supplied: quant_organization")

        if not self.github_ref or not self.github_repository:
            errors.append(
                "GitHub context not available. This action must run in a GitHub Actions workflow "
                "(GITHUB_REF and GITHUB_REPOSITORY are required)."
            )

        # These values end up in step outputs, which are newline separated
        published = {
            "quant_application": self.application_override,
            "master_branch_override": self.master_branch_override,
            "environment_name_override": self.environment_name_override,
            "GITHUB_REF": self.github_ref,
            "GITHUB_REPOSITORY": self.github_repository,
        }
        for name, value in published.items():
            if value and ("\n" in value or "\r" in value):
                errors.append(f"{name} must not contain line breaks")

        return errors
