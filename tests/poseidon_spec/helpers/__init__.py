"""Test helpers for the Poseidon specification unit tests."""

from .builders import (
    make_cauchy_params,
    make_elements,
    make_identity_matrix,
    make_params,
    make_toy_params,
)

__all__ = [
    "make_cauchy_params",
    "make_elements",
    "make_identity_matrix",
    "make_params",
    "make_toy_params",
]
