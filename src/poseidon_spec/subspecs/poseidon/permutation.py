"""
A minimal Python specification for the Poseidon permutation.

The design is based on the paper "Poseidon: A New Hash Function for
Zero-Knowledge Proof Systems" (https://eprint.iacr.org/2019/458).

Every round applies, in order:

1. Add-Round-Key (ARK): add the round's constants to the state.
2. S-box: raise the state to the power `alpha`. Full rounds do this for
   every slot, partial rounds for the first slot only.
3. Linear layer: multiply the state by the MDS matrix.

Half of the full rounds run before the partial rounds and half after.
Rounds are numbered globally, so round `i` always uses the constants at
`[t * i, t * (i + 1))` regardless of its kind.
"""

import logging
from typing import List

from poseidon_spec import config
from poseidon_spec.types import StateLengthError

from ..field import F
from .params import ParameterSet

logger = logging.getLogger(__name__)


def add_round_constants(state: List[F], params: ParameterSet, round_index: int) -> None:
    """
    Adds the constants of round `round_index` to the state, in place.

    Args:
        state: The current state vector.
        params: The parameter set holding the round constants.
        round_index: The absolute (0-based) round number.
    """
    for i, constant in enumerate(params.round_constants_for(round_index)):
        state[i] += constant


def apply_sbox(state: List[F], params: ParameterSet, round_index: int) -> None:
    """
    Applies the S-box layer of round `round_index`, in place.

    Rounds inside the partial window `[R_F / 2, R_F / 2 + R_P)` only raise
    the first slot to `alpha`; every other round raises the whole state.

    Args:
        state: The current state vector.
        params: The parameter set defining the round structure.
        round_index: The absolute (0-based) round number.
    """
    alpha = params.alpha
    if params.is_partial_round(round_index):
        state[0] = state[0] ** alpha
    else:
        state[:] = [s**alpha for s in state]


def apply_mds(state: List[F], params: ParameterSet) -> None:
    """
    Multiplies the state by the MDS matrix, in place.

    Computes `new_state[i] = sum_j state[j] * M[i][j]`.

    Args:
        state: The current state vector.
        params: The parameter set holding the MDS matrix.
    """
    zero = params.field.zero()
    width = params.state_width

    # For each row in the matrix, calculate the dot product of that row with the state vector.
    new_state = [sum((state[j] * row[j] for j in range(width)), zero) for row in params.mds_matrix]

    state[:] = new_state


def permute(state: List[F], params: ParameterSet) -> None:
    """
    Performs the full Poseidon permutation on the given state, in place.

    Args:
        state: A list of field elements representing the current state.
            It is overwritten with the permuted state.
        params: The object defining the permutation's configuration.

    Raises:
        StateLengthError: If the state does not have `params.state_width` elements.
    """
    # Ensure the input state has the correct dimensions.
    if len(state) != params.state_width:
        raise StateLengthError(expected=params.state_width, actual=len(state))

    for round_index in range(params.total_rounds):
        add_round_constants(state, params, round_index)
        apply_sbox(state, params, round_index)
        apply_mds(state, params)

        if config.TRACE_ROUNDS:
            logger.debug(
                "Round %d (%s): state[0]=%r",
                round_index,
                "partial" if params.is_partial_round(round_index) else "full",
                state[0],
            )
