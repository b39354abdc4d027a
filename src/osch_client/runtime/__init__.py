"""Runtime helpers for the osch client library"""

from .errors import OschError, ErrorCode, ErrorHandler

__all__ = [
    "OschError",
    "ErrorCode",
    "ErrorHandler",
]
