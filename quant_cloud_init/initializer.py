"""Init runner - resolves the target, validates it remotely and logs Docker in."""

import logging

from .environment import EnvironmentConfig
from .exceptions import RegistryLoginError
from .io_layer import IOLayer
from .models import InitResult
from .quant_client import QuantClient
from .ref_classification import classify_ref
from .target_resolution import resolve_application_name, resolve_target
from .validation import validate_remote_state

logger = logging.getLogger(__name__)


def run_init(config: EnvironmentConfig, client: QuantClient, io_layer: IOLayer) -> InitResult:
    """
    Run the whole init sequence.

    The target is resolved before any remote call, so malformed input never
    reaches the API.

    Args:
        config: Validated environment configuration
        client: Quant Cloud API client
        io_layer: I/O layer used for Docker login

    Returns:
        InitResult describing the run

    Raises:
        InputError: If the ref or repository cannot be parsed
        ValidationError: If the organization, API key or a lookup fails
        RegistryLoginError: If Docker login is required but impossible or fails
    """
    logger.info(
        f"GitHub Context - Ref: {config.github_ref}, Repository: {config.github_repository}, "
        f"Event: {config.github_event_name}"
    )

    ref = classify_ref(config.github_ref)
    overrides = config.overrides
    application_name = resolve_application_name(config.github_repository, overrides.application_name)
    if overrides.application_name:
        logger.info(f"Using provided application name: {application_name}")
    else:
        logger.info(f"Using repository name as application name: {application_name}")

    target = resolve_target(ref, overrides, application_name)
    logger.info(f"Ref: {ref.name} ({ref.kind.value})")
    logger.info(f"Environment: {target.environment_name}")
    logger.info(f"Is production: {target.is_production}")
    logger.info(f"Image suffix: {target.image_suffix}")

    validation, credentials = validate_remote_state(
        client, config.organization, target.application_name, target.environment_name
    )
    result = InitResult(target=target, validation=validation, credentials=credentials)

    if config.skip_docker_login:
        logger.info("Skipping Docker login (skip_docker_login=true)")
    elif credentials is None:
        raise RegistryLoginError("Failed to retrieve Quant Cloud Image Registry credentials")
    else:
        io_layer.docker_login(credentials)
        result.logged_in = True

    log_summary(result)
    return result


def log_summary(result: InitResult) -> None:
    target = result.target
    logger.info("Quant Cloud initialization completed successfully!")
    logger.info(f"Application: {target.application_name} (exists: {result.validation.application_exists})")
    logger.info(f"Environment: {target.environment_name} (exists: {result.validation.environment_exists})")
    logger.info(f"Production: {target.is_production}")
    logger.info(f"Stripped Endpoint: {result.stripped_endpoint or '-'}")
    logger.info(f"Image Suffix: {target.image_suffix}")
    if result.logged_in:
        logger.info("Docker registry login completed")
