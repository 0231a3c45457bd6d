"""
Factory functions for constructing test parameter sets.

None of these instances are secure Poseidon parameters. They are small,
deterministic configurations whose outputs were cross-checked against an
independent implementation of the same permutation and sponge.
"""

from __future__ import annotations

from typing import Sequence, Type

from poseidon_spec.subspecs.field import PrimeFieldElement
from poseidon_spec.subspecs.poseidon import ParameterSet


def make_elements(field: Type[PrimeFieldElement], values: Sequence[int]) -> list[PrimeFieldElement]:
    """Lift plain integers into field elements."""
    return [field(value=v) for v in values]


def make_identity_matrix(
    field: Type[PrimeFieldElement], width: int
) -> tuple[tuple[PrimeFieldElement, ...], ...]:
    """The `width` x `width` identity matrix over `field`."""
    return tuple(
        tuple(field(value=1 if i == j else 0) for j in range(width)) for i in range(width)
    )


def make_params(
    field: Type[PrimeFieldElement],
    *,
    width: int,
    full_rounds: int,
    partial_rounds: int,
    alpha: int = 5,
) -> ParameterSet:
    """
    Build a parameter set with distinct constants and an identity MDS matrix.

    Round constant `k` is `k + 1`, so every constant is distinct and nonzero.
    """
    count = (full_rounds + partial_rounds) * width
    return ParameterSet(
        state_width=width,
        full_rounds=full_rounds,
        partial_rounds=partial_rounds,
        alpha=alpha,
        round_constants=tuple(field(value=k + 1) for k in range(count)),
        mds_matrix=make_identity_matrix(field, width),
    )


def make_toy_params(field: Type[PrimeFieldElement]) -> ParameterSet:
    """
    Width 3, 8 full and 57 partial rounds, alpha 5.

    Round `i` adds `i + j + 1` to slot `j`; the MDS matrix is `I + J`.
    """
    width, full_rounds, partial_rounds = 3, 8, 57
    return ParameterSet(
        state_width=width,
        full_rounds=full_rounds,
        partial_rounds=partial_rounds,
        alpha=5,
        round_constants=tuple(
            field(value=i + j + 1)
            for i in range(full_rounds + partial_rounds)
            for j in range(width)
        ),
        mds_matrix=(
            tuple(field(value=v) for v in (2, 1, 1)),
            tuple(field(value=v) for v in (1, 2, 1)),
            tuple(field(value=v) for v in (1, 1, 2)),
        ),
    )


def make_cauchy_params(field: Type[PrimeFieldElement]) -> ParameterSet:
    """
    Width 5, 8 full and 56 partial rounds, alpha 5.

    Round constant `k` is `(k + 1) * 0x9e3779b97f4a7c15`; the MDS matrix is
    the Cauchy matrix `M[i][j] = 1 / (i + j + 5)`.
    """
    width, full_rounds, partial_rounds = 5, 8, 56
    count = (full_rounds + partial_rounds) * width
    return ParameterSet(
        state_width=width,
        full_rounds=full_rounds,
        partial_rounds=partial_rounds,
        alpha=5,
        round_constants=tuple(field(value=(k + 1) * 0x9E3779B97F4A7C15) for k in range(count)),
        mds_matrix=tuple(
            tuple(field.one() / field(value=i + j + width) for j in range(width))
            for i in range(width)
        ),
    )
