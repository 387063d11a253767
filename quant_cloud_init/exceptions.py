"""Custom exceptions for Quant Cloud Init."""

from typing import Optional


class QuantInitError(Exception):
    """Base class for errors that stop the run."""


class InputError(QuantInitError):
    """Raised when configuration or the GitHub context is missing or malformed."""


class QuantApiError(QuantInitError):
    """Raised when a Quant Cloud API call fails."""

    def __init__(self, message: str, status: Optional[int] = None, api_message: Optional[str] = None):
        self.status = status
        self.api_message = api_message
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class ValidationError(QuantInitError):
    """Raised when the organization, API key or a lookup fails validation."""


class RegistryLoginError(QuantInitError):
    """Raised when Docker cannot be logged into the image registry."""
