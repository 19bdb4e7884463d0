"""Provider-agnostic exceptions.

Services translate provider failures into ``ResourceResult`` values. These
exceptions cover the few failures that happen before any call is attempted.
"""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for provider failures."""


class ProviderConfigurationError(ProviderError):
    """Raised when a provider client cannot be constructed or rebound.

    Parameters
    ----------
    message : str
        Human-readable explanation
    region : str | None
        Region the client was being bound to
    """

    def __init__(self, message: str, region: str | None = None) -> None:
        super().__init__(message)
        self.region = region


class ProviderCredentialsError(ProviderError):
    """Raised when the provider's credential chain yields no credentials."""


class ProviderAPIError(ProviderError):
    """Provider API call failure carrying the provider's error code.

    Parameters
    ----------
    message : str
        Provider error message
    error_code : str
        Structured error code reported by the provider
    """

    def __init__(self, message: str, error_code: str = "") -> None:
        super().__init__(message)
        self.error_code = error_code
