"""
Parameter sets for the Poseidon permutation.

A parameter set fixes one Poseidon instantiation: the state width, the
number of full and partial rounds, the S-box exponent, the round
constants and the MDS matrix. It is produced once by a loader and then
shared read-only by every hash call that uses it.
"""

from typing import Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..field import PrimeFieldElement


class ParameterSet(BaseModel):
    """Parameters for a specific Poseidon instance."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    state_width: int = Field(ge=1, description="The size of the state (t).")
    full_rounds: int = Field(ge=0, description="Total number of 'full' rounds.")
    partial_rounds: int = Field(ge=0, description="Total number of 'partial' rounds.")
    alpha: int = Field(ge=1, description="The S-box exponent.")
    round_constants: Tuple[PrimeFieldElement, ...] = Field(
        description="Constants for all rounds, `state_width` per round, in round order.",
    )
    mds_matrix: Tuple[Tuple[PrimeFieldElement, ...], ...] = Field(
        description="The `state_width` x `state_width` matrix of the linear layer.",
    )

    @model_validator(mode="after")
    def check_shapes(self) -> "ParameterSet":
        """Ensures the constants and the matrix match the configuration."""
        width = self.state_width

        if len(self.mds_matrix) != width or any(len(row) != width for row in self.mds_matrix):
            raise ValueError(f"MDS matrix must be {width}x{width}.")

        expected_constants = (self.full_rounds + self.partial_rounds) * width
        if len(self.round_constants) != expected_constants:
            raise ValueError(
                f"Incorrect number of round constants provided: "
                f"expected {expected_constants}, got {len(self.round_constants)}."
            )

        # Every element must come from one and the same field.
        field = type(self.mds_matrix[0][0])
        elements = [*self.round_constants, *(x for row in self.mds_matrix for x in row)]
        if any(type(x) is not field for x in elements):
            raise ValueError("Round constants and MDS matrix must belong to a single field.")

        return self

    @property
    def field(self) -> Type[PrimeFieldElement]:
        """The field element type this instance operates over."""
        return type(self.mds_matrix[0][0])

    @property
    def total_rounds(self) -> int:
        """Number of rounds applied by one permutation call."""
        return self.full_rounds + self.partial_rounds

    @property
    def partial_round_start(self) -> int:
        """Index of the first partial round; half the full rounds come before it."""
        return self.full_rounds // 2

    @property
    def partial_round_end(self) -> int:
        """Index one past the last partial round."""
        return self.partial_round_start + self.partial_rounds

    def is_partial_round(self, round_index: int) -> bool:
        """Whether round `round_index` applies the S-box to the first slot only."""
        return self.partial_round_start <= round_index < self.partial_round_end

    def round_constants_for(self, round_index: int) -> Tuple[PrimeFieldElement, ...]:
        """The `state_width` constants added during round `round_index`."""
        if not 0 <= round_index < self.total_rounds:
            raise IndexError(f"Round index {round_index} out of range [0, {self.total_rounds})")
        offset = self.state_width * round_index
        return self.round_constants[offset : offset + self.state_width]
