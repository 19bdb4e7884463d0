"""Translation of botocore exceptions into provider errors and failure kinds."""

from __future__ import annotations

from collections.abc import Iterable

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from aws_resources.core.result import ErrorKind
from aws_resources.providers.exceptions import (
    ProviderAPIError,
    ProviderCredentialsError,
    ProviderError,
)

BUCKET_ERROR_CODES: tuple[tuple[str, ErrorKind], ...] = (
    ("BucketAlreadyExists", ErrorKind.BUCKET_ALREADY_EXISTS),
    ("BucketAlreadyOwnedByYou", ErrorKind.BUCKET_ALREADY_OWNED_BY_YOU),
)
"""S3 create_bucket codes, in match order (owned by another account first)."""

INSTANCE_ERROR_CODES: tuple[tuple[str, ErrorKind], ...] = (
    ("InvalidAMIID", ErrorKind.INVALID_AMI_ID),
    ("InvalidKeyPair", ErrorKind.INVALID_KEY_PAIR),
)
"""EC2 run_instances code families (e.g. InvalidAMIID.NotFound, InvalidKeyPair.Format)."""


def translate_boto_error(error: ClientError | BotoCoreError) -> ProviderError:
    """Convert a botocore exception into a provider error.

    Parameters
    ----------
    error : ClientError | BotoCoreError
        Exception raised by a boto3 call

    Returns
    -------
    ProviderError
        ``ProviderCredentialsError`` for missing credentials, otherwise
        ``ProviderAPIError`` carrying the structured error code when the
        provider returned one
    """
    if isinstance(error, (NoCredentialsError, PartialCredentialsError)):
        return ProviderCredentialsError(str(error))

    if isinstance(error, ClientError):
        error_response = error.response.get("Error") if error.response else None
        error_code = error_response.get("Code", "") if error_response else ""
        error_msg = error_response.get("Message") if error_response else None
        return ProviderAPIError(error_msg or str(error), error_code=error_code)

    return ProviderAPIError(str(error))


def classify_error_code(
    error_code: str, known_codes: Iterable[tuple[str, ErrorKind]]
) -> ErrorKind | None:
    """Match a provider error code against known code families.

    A code matches a family when it equals the family name or extends it with
    a dotted suffix.

    Parameters
    ----------
    error_code : str
        Structured error code from the provider
    known_codes : Iterable[tuple[str, ErrorKind]]
        Code family names and the kind each maps to, checked in order

    Returns
    -------
    ErrorKind | None
        First matching kind, or None when the code is not recognized
    """
    if not error_code:
        return None

    for family, kind in known_codes:
        if error_code == family or error_code.startswith(f"{family}."):
            return kind

    return None
