"""
The Poseidon hash in sponge mode.

### Sponge Algorithm

1.  **Initialization**: The state holds `t` field elements, all zero. The
    first `rate` slots exchange data with the caller; the remaining
    `t - rate` slots form the capacity and never receive input directly.

2.  **Absorbing**: The input is zero-padded to a multiple of `rate` and
    processed in `rate`-sized blocks. Each block is added into the rate
    part of the state, then the whole state is permuted.

3.  **Squeezing**: The rate part of the state is appended to the output and
    the state is permuted again, until at least `output_length` elements
    have been produced. The surplus is then popped off the end.

.. note::
   Padding is driven by length alone: no terminator or length block is
   appended. Two inputs that differ only by trailing zero elements absorb
   to the same state and therefore produce the same hash.
"""

import logging
from typing import List, Sequence

from poseidon_spec.types import (
    FieldMismatchError,
    OutputLengthError,
    RateError,
)

from ..field import F
from .params import ParameterSet
from .permutation import permute

logger = logging.getLogger(__name__)


def validate_rate(rate: int, params: ParameterSet) -> None:
    """
    Checks that `rate` leaves a valid split of the state.

    Raises:
        RateError: If `rate` is outside `[1, state_width]`.
    """
    if not 1 <= rate <= params.state_width:
        raise RateError(rate, params.state_width)


def validate_output_length(output_length: int) -> None:
    """
    Checks that at least one output element is requested.

    Raises:
        OutputLengthError: If `output_length` is zero or negative.
    """
    if output_length < 1:
        raise OutputLengthError(output_length)


def validate_input(input_vec: Sequence[F], params: ParameterSet) -> None:
    """
    Checks that every input element belongs to the parameter set's field.

    Raises:
        FieldMismatchError: On the first element of a different type.
    """
    field = params.field
    for element in input_vec:
        if type(element) is not field:
            raise FieldMismatchError(field.__name__, type(element).__name__)


def pad(input_vec: Sequence[F], rate: int, zero: F) -> List[F]:
    """
    Pads the input with zeros to a multiple of `rate`.

    If the length is already a multiple of `rate`, no padding takes place.

    Args:
        input_vec: The input elements.
        rate: The block size.
        zero: The additive identity of the input's field.

    Returns:
        A new list whose length is a multiple of `rate`.
    """
    num_extra = (rate - (len(input_vec) % rate)) % rate
    return list(input_vec) + [zero] * num_extra


def absorb(input_vec: Sequence[F], params: ParameterSet, rate: int) -> List[F]:
    """
    Absorbs the input into a fresh, all-zero state.

    Args:
        input_vec: The input data of arbitrary length.
        params: The permutation parameters.
        rate: Number of state slots receiving input per block.

    Returns:
        The state after the last block has been permuted. An empty input
        absorbs no block and leaves the state all-zero.
    """
    validate_rate(rate, params)

    zero = params.field.zero()
    padded_input = pad(input_vec, rate, zero)

    state: List[F] = [zero] * params.state_width

    # Absorb the input in rate-sized chunks.
    for i in range(0, len(padded_input), rate):
        chunk = padded_input[i : i + rate]
        # Add the chunk to the rate part of the state.
        for j in range(rate):
            state[j] += chunk[j]
        # Apply the cryptographic permutation to mix the state.
        permute(state, params)

    logger.debug(
        "Absorbed %d elements (%d after padding) in %d blocks of rate %d",
        len(input_vec),
        len(padded_input),
        len(padded_input) // rate,
        rate,
    )
    return state


def squeeze(state: List[F], params: ParameterSet, output_length: int, rate: int) -> List[F]:
    """
    Squeezes output elements from an absorbed state.

    The state is permuted in place after each extraction.

    Truncation is not a plain slice. For `output_length > 1`, trailing
    elements are popped until the length is a multiple of `output_length`,
    which can leave more than `output_length` elements when `rate` exceeds
    it (e.g. rate 5 and length 2 yield 4 elements). For `output_length == 1`
    exactly one element is kept.

    Args:
        state: The state returned by `absorb`. Mutated.
        params: The permutation parameters.
        output_length: The number of field elements requested.
        rate: Number of state slots extracted per permutation.

    Returns:
        The squeezed output.
    """
    validate_rate(rate, params)
    validate_output_length(output_length)

    # Squeeze the output until enough elements have been generated.
    output: List[F] = []
    while len(output) < output_length:
        # Extract the rate part of the state as output.
        output.extend(state[:rate])
        # Permute the state.
        permute(state, params)

    squeezed = len(output)
    if output_length > 1:
        while len(output) % output_length != 0:
            output.pop()
    else:
        del output[1:]

    logger.debug("Squeezed %d elements, returning %d", squeezed, len(output))
    return output


def hash(
    input_vec: Sequence[F], params: ParameterSet, output_length: int, rate: int
) -> List[F]:
    """
    Hashes a sequence of field elements with the Poseidon sponge.

    This is a pure function of its arguments: the state is created per call
    and the parameter set is only read, so concurrent calls may share it.

    Args:
        input_vec: The elements to hash.
        params: The permutation parameters.
        output_length: The number of field elements requested (at least 1).
        rate: Number of state slots used for input and output.

    Returns:
        The hash output (see `squeeze` for its exact length).

    Raises:
        RateError: If `rate` is outside `[1, state_width]`.
        OutputLengthError: If `output_length` is less than 1.
        FieldMismatchError: If an input element is not in the parameters' field.
    """
    # Reject bad arguments before any round runs.
    validate_rate(rate, params)
    validate_output_length(output_length)
    validate_input(input_vec, params)

    state = absorb(input_vec, params, rate)
    return squeeze(state, params, output_length, rate)


class PoseidonSponge:
    """A Poseidon sponge bound to one parameter set and rate."""

    def __init__(self, params: ParameterSet, rate: int):
        """
        Initializes the sponge.

        Raises:
            RateError: If `rate` is outside `[1, params.state_width]`.
        """
        validate_rate(rate, params)
        self.params = params
        self.rate = rate

    @property
    def capacity(self) -> int:
        """Number of state slots held back from input and output."""
        return self.params.state_width - self.rate

    def absorb(self, input_vec: Sequence[F]) -> List[F]:
        """Absorbs `input_vec` into a fresh state and returns it."""
        validate_input(input_vec, self.params)
        return absorb(input_vec, self.params, self.rate)

    def squeeze(self, state: List[F], output_length: int) -> List[F]:
        """Squeezes `output_length` elements from `state`, permuting it in place."""
        return squeeze(state, self.params, output_length, self.rate)

    def hash(self, input_vec: Sequence[F], output_length: int = 1) -> List[F]:
        """Hashes `input_vec` into `output_length` field elements."""
        return hash(input_vec, self.params, output_length, self.rate)
