"""
Osch Error Model

This module provides the error handling framework for the osch client library.
Every failure is raised synchronously at the call that violates a
precondition, and every kind of failure has its own class and error code so
callers can branch on it.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Osch client error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    UNMARSHAL_ERROR = 101

    # Network selection errors (200-299)
    NETWORK_NOT_SELECTED = 200
    INVALID_NETWORK = 201

    # Identity and account errors (300-399)
    INVALID_IDENTITY = 300
    INVALID_SEQUENCE_FORMAT = 301
    MISSING_SOURCE_ACCOUNT = 302

    # Asset errors (400-499)
    INVALID_ASSET_CODE = 400
    MISSING_ISSUER = 401
    INVALID_ISSUER = 402
    INVALID_ASSET_TYPE = 403

    # Builder input errors (500-599)
    NEGATIVE_TIMEOUT = 500
    INVALID_TIMEOUT = 501
    INVALID_MEMO = 502
    INVALID_BUILDER_OPTIONS = 503

    # Builder state conflicts (600-699)
    TIME_BOUNDS_CONFLICT = 600
    MISSING_TIME_BOUNDS = 601
    BUILDER_CONSUMED = 602


class OschError(Exception):
    """
    Base class for all osch client errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an osch error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "kind": type(self).__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(OschError):
    """Input validation errors. The caller must correct the input and retry."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class StateConflictError(OschError):
    """Builder protocol misuse. Resolved only by changing the call order."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MissingSourceAccountError(ValidationError):
    """No usable source account was given to the builder."""

    def __init__(self, message: str = "must specify source account for the transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_SOURCE_ACCOUNT, details, cause)


class InvalidIdentityError(ValidationError):
    """Account identity failed the StrKey check."""

    def __init__(self, message: str = "accountId is invalid",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_IDENTITY, details, cause)


class InvalidSequenceFormatError(ValidationError):
    """Sequence number is not a non-negative integer string."""

    def __init__(self, message: str = "sequence must be a string of decimal digits",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_SEQUENCE_FORMAT, details, cause)


class InvalidAssetCodeError(ValidationError):
    """Asset code is not 1-12 ASCII alphanumerics."""

    def __init__(self, message: str = "Asset code is invalid (maximum alphanumeric, 12 characters at max)",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ASSET_CODE, details, cause)


class MissingIssuerError(ValidationError):
    """Non-native asset without an issuer."""

    def __init__(self, message: str = "Issuer cannot be null",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_ISSUER, details, cause)


class InvalidIssuerError(ValidationError):
    """Asset issuer failed the StrKey check."""

    def __init__(self, message: str = "Issuer is invalid",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ISSUER, details, cause)


class InvalidAssetTypeError(ValidationError):
    """Unrecognized asset discriminant in a canonical form."""

    def __init__(self, message: str = "Invalid asset type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ASSET_TYPE, details, cause)


class NegativeTimeoutError(ValidationError):
    """Timeout below zero."""

    def __init__(self, message: str = "timeout cannot be negative",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NEGATIVE_TIMEOUT, details, cause)


class InvalidTimeoutError(ValidationError):
    """Timeout that is not a whole number of seconds."""

    def __init__(self, message: str = "timeout must be an integer number of seconds",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_TIMEOUT, details, cause)


class InvalidMemoError(ValidationError):
    """Memo value does not fit its memo type."""

    def __init__(self, message: str = "Memo is invalid",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_MEMO, details, cause)


class InvalidBuilderOptionsError(ValidationError):
    """Unrecognized or malformed builder options."""

    def __init__(self, message: str = "Builder options are invalid",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_BUILDER_OPTIONS, details, cause)


class InvalidNetworkError(ValidationError):
    """Network passphrase or selection that is not a Network."""

    def __init__(self, message: str = "network is invalid",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_NETWORK, details, cause)


class TimeBoundsConflictError(StateConflictError):
    """A timeout would overwrite an already decided validity window."""

    def __init__(self, message: str = "TimeBounds.max_time has been already set - setting timeout would overwrite it.",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TIME_BOUNDS_CONFLICT, details, cause)


class MissingTimeBoundsError(StateConflictError):
    """Build attempted before a validity window was decided."""

    def __init__(self, message: str = "TimeBounds has to be set or you must call set_timeout(TIMEOUT_INFINITE).",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_TIME_BOUNDS, details, cause)


class BuilderConsumedError(StateConflictError):
    """Builder used again after build()."""

    def __init__(self, message: str = "TransactionBuilder has already built its transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.BUILDER_CONSUMED, details, cause)


class NetworkNotSelectedError(OschError):
    """Signing requested with no network to bind the signature to."""

    def __init__(self, message: str = "No network selected. Pass a network or call Network.use() first.",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NETWORK_NOT_SELECTED, details, cause)


class EncodingError(OschError):
    """Value cannot be represented in its XDR wire form."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnmarshalError(EncodingError):
    """Truncated or malformed XDR input."""

    def __init__(self, message: str = "Unmarshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause)


class ErrorHandler:
    """
    Utility class for categorizing errors.
    """

    @staticmethod
    def is_input_error(error: Exception) -> bool:
        """
        Check if an error was caused by bad input.

        Args:
            error: Exception to check

        Returns:
            True if retrying with corrected input can succeed
        """
        return isinstance(error, ValidationError)

    @staticmethod
    def is_state_conflict(error: Exception) -> bool:
        """
        Check if an error signals misuse of the builder protocol.

        Args:
            error: Exception to check

        Returns:
            True if the caller has to change the order of its calls
        """
        return isinstance(error, StateConflictError)


__all__ = [
    "ErrorCode",
    "OschError",
    "ValidationError",
    "StateConflictError",
    "MissingSourceAccountError",
    "InvalidIdentityError",
    "InvalidSequenceFormatError",
    "InvalidAssetCodeError",
    "MissingIssuerError",
    "InvalidIssuerError",
    "InvalidAssetTypeError",
    "NegativeTimeoutError",
    "InvalidTimeoutError",
    "InvalidMemoError",
    "InvalidBuilderOptionsError",
    "InvalidNetworkError",
    "TimeBoundsConflictError",
    "MissingTimeBoundsError",
    "BuilderConsumedError",
    "NetworkNotSelectedError",
    "EncodingError",
    "UnmarshalError",
    "ErrorHandler",
]
