"""Uniform outcome record returned by every resource operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Recognized failure kinds carried in ``ResourceResult.error``."""

    VALIDATION = "ValidationError"
    CONFIGURATION = "ConfigurationError"
    SERVICE = "ServiceError"
    CREDENTIALS = "CredentialsError"
    CREATION = "CreationError"
    BUCKET_ALREADY_EXISTS = "BucketAlreadyExists"
    BUCKET_ALREADY_OWNED_BY_YOU = "BucketAlreadyOwnedByYou"
    INVALID_AMI_ID = "InvalidAMIID"
    INVALID_KEY_PAIR = "InvalidKeyPair"
    UNKNOWN = "UnknownError"


@dataclass(frozen=True)
class ResourceResult:
    """Result of a resource creation operation.

    Attributes
    ----------
    success : bool
        Whether the resource was created
    message : str
        Human-readable summary; never empty for failures
    data : dict[str, Any] | None
        Resource details on success
    error : str | None
        Failure kind, one of the ``ErrorKind`` values
    """

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.success and not self.message:
            raise ValueError("A failed ResourceResult requires a message")

    @classmethod
    def ok(cls, message: str, data: dict[str, Any] | None = None) -> ResourceResult:
        """Build a successful result."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind | str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> ResourceResult:
        """Build a failed result.

        Parameters
        ----------
        kind : ErrorKind | str
            Failure kind
        message : str
            Human-readable explanation
        data : dict[str, Any] | None
            Optional context for the failure

        Returns
        -------
        ResourceResult
            Result with ``success=False``
        """
        error = kind.value if isinstance(kind, ErrorKind) else str(kind)
        return cls(success=False, message=message, data=data, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-equivalent mapping, omitting unset optional fields.

        Returns
        -------
        dict[str, Any]
            Mapping with ``success`` and ``message`` plus ``data``/``error``
            when present
        """
        payload: dict[str, Any] = {"success": self.success, "message": self.message}

        if self.data is not None:
            payload["data"] = self.data

        if self.error:
            payload["error"] = self.error

        return payload
