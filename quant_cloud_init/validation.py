"""
Remote validation.

Confirms the organization and API key work, looks up the application and
environment, and fetches registry credentials. Lookups that end in 404 are
recorded as flags; every other failure stops the run.
"""

import logging
from typing import Optional, Tuple

from .config import ORGANIZATION_ACCESS_MESSAGE, UNMATCHED_RESULT_MESSAGE
from .exceptions import QuantApiError, ValidationError
from .models import RegistryCredentials, ValidationState
from .quant_client import QuantClient

logger = logging.getLogger(__name__)


def describe_api_error(err: Exception) -> str:
    """
    Turn an API failure into a message fit for the workflow log.

    The API's own message is used verbatim when there is one, except the
    generic lookup failure which is reworded to point at organization access.
    """
    if isinstance(err, QuantApiError):
        if err.api_message:
            if err.api_message == UNMATCHED_RESULT_MESSAGE:
                return ORGANIZATION_ACCESS_MESSAGE
            return err.api_message
        if err.status is not None:
            return f"Quant Cloud API request failed with HTTP {err.status}"
        return str(err)
    return f"An unknown error occurred during validation ({type(err).__name__})"


def validate_organization(client: QuantClient, organization: str) -> None:
    """Fail unless the applications of the organization can be listed."""
    logger.info(f"Validating organization and API key for {organization}...")
    try:
        applications = client.list_applications(organization)
    except QuantApiError as err:
        logger.error("Organization and API key validation failed")
        raise ValidationError(describe_api_error(err)) from err
    logger.info(f"Organization and API key validation successful ({len(applications)} applications)")


def fetch_registry_credentials(client: QuantClient, organization: str) -> Optional[RegistryCredentials]:
    """
    Fetch registry credentials, warning instead of failing.

    The organization was already validated, so a failure here only means
    Docker cannot be logged in.
    """
    logger.info("Getting Quant Cloud Image Registry login credentials...")
    try:
        credentials = client.get_registry_credentials(organization)
    except QuantApiError as err:
        logger.warning(f"Could not retrieve Quant Cloud Image Registry credentials: {describe_api_error(err)}")
        return None

    if credentials is None:
        logger.warning("Quant Cloud Image Registry credentials are incomplete (endpoint, username or password missing)")
        return None

    logger.info("Quant Cloud Image Registry login credentials retrieved successfully")
    return credentials


def application_exists(client: QuantClient, organization: str, application: str) -> bool:
    try:
        client.get_application(organization, application)
    except QuantApiError as err:
        if err.is_not_found:
            logger.info(f"Application {application} does not exist yet - this is normal for new projects")
            return False
        raise ValidationError(f"Failed to look up application {application}: {describe_api_error(err)}") from err
    logger.info(f"Application {application} exists")
    return True


def environment_exists(client: QuantClient, organization: str, application: str, environment: str) -> bool:
    try:
        client.get_environment(organization, application, environment)
    except QuantApiError as err:
        if err.is_not_found:
            logger.info(f"Environment {environment} does not exist yet - this is normal for new environments")
            return False
        raise ValidationError(f"Failed to look up environment {environment}: {describe_api_error(err)}") from err
    logger.info(f"Environment {environment} exists")
    return True


def validate_remote_state(
    client: QuantClient,
    organization: str,
    application: str,
    environment: str,
) -> Tuple[ValidationState, Optional[RegistryCredentials]]:
    """
    Run all remote checks in order.

    Args:
        client: Quant Cloud API client
        organization: Organization to validate
        application: Application name to look up
        environment: Environment name to look up

    Returns:
        Tuple of (validation state, registry credentials or None)

    Raises:
        ValidationError: If the organization, API key or a lookup fails
    """
    validate_organization(client, organization)
    credentials = fetch_registry_credentials(client, organization)

    state = ValidationState()
    state.application_exists = application_exists(client, organization, application)
    if not state.application_exists:
        logger.info(f"Skipping environment lookup, application {application} does not exist")
    elif not environment:
        # An empty name would address the environments list, not an environment
        logger.info("Skipping environment lookup, environment name is empty")
    else:
        state.environment_exists = environment_exists(client, organization, application, environment)

    return state, credentials
