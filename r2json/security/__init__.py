"""
r2json Errors and Limits.

This module provides the exception hierarchy and parse limit validation.
"""

from .exceptions import (
    ErrorReporter,
    InvalidArgumentError,
    ParseError,
    R2JSONError,
    RegistrationError,
    SecurityError,
    SerializationError,
    UnsupportedTypeError,
)
from .limits import LimitValidator

__all__ = [
    'R2JSONError', 'ParseError', 'SecurityError', 'SerializationError',
    'UnsupportedTypeError', 'RegistrationError', 'InvalidArgumentError',
    'ErrorReporter', 'LimitValidator',
]
