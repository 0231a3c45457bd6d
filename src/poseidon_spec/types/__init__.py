"""Reusable type definitions for the Poseidon hash specification."""

from .base import StrictBaseModel
from .exceptions import (
    FieldMismatchError,
    OutputLengthError,
    ParameterFormatError,
    PoseidonError,
    PoseidonValueError,
    RateError,
    StateLengthError,
)

__all__ = [
    # Core types
    "StrictBaseModel",
    # Exceptions
    "PoseidonError",
    "PoseidonValueError",
    "RateError",
    "OutputLengthError",
    "StateLengthError",
    "FieldMismatchError",
    "ParameterFormatError",
]
