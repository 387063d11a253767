"""
Output Generation Module

Pure functions that render a run result as GitHub step outputs.
Registry credentials are never part of the outputs.
"""

from typing import Dict

from .models import InitResult


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def build_outputs(result: InitResult) -> Dict[str, str]:
    """
    Build the step outputs for a finished run.

    Args:
        result: Result of the init run

    Returns:
        Output names mapped to their text values
    """
    target = result.target
    return {
        "project_exists": format_bool(result.validation.application_exists),
        "environment_exists": format_bool(result.validation.environment_exists),
        "quant_application": target.application_name,
        "environment_name": target.environment_name,
        "is_production": format_bool(target.is_production),
        "stripped_endpoint": result.stripped_endpoint,
        "image_suffix": target.image_suffix,
        "image_suffix_clean": target.image_suffix_clean,
    }
