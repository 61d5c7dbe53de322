from .security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password
)

from .exceptions import (
    PriismeException,
    StyleAnalysisError,
    ImageMissingError,
    InvalidRequestBodyError,
    ServiceNotConfiguredError,
    UpstreamRateLimitError,
    UpstreamCreditsExhaustedError,
    UpstreamServiceError,
    EmptyAnalysisError,
    AnalysisParseError,
    bad_request,
    unauthorized
)

__all__ = [
    # Security
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
    # Exceptions
    "PriismeException",
    "StyleAnalysisError",
    "ImageMissingError",
    "InvalidRequestBodyError",
    "ServiceNotConfiguredError",
    "UpstreamRateLimitError",
    "UpstreamCreditsExhaustedError",
    "UpstreamServiceError",
    "EmptyAnalysisError",
    "AnalysisParseError",
    "bad_request",
    "unauthorized"
]
