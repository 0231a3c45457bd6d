"""
The capability set the Poseidon core requires from a field element.

The permutation and the sponge never look inside an element. They only
add, multiply, raise to a small power, and ask for the additive identity.
Any prime field providing these four operations can be plugged in.
"""

from typing import Protocol, Self, TypeVar


class FieldElement(Protocol):
    """An element of a prime field, as seen by the permutation and the sponge."""

    @classmethod
    def zero(cls) -> Self:
        """The additive identity of the field."""
        ...

    def __add__(self, other: Self) -> Self: ...

    def __mul__(self, other: Self) -> Self: ...

    def __pow__(self, exponent: int) -> Self: ...


F = TypeVar("F", bound=FieldElement)
"""A concrete field element type, fixed for the duration of one hash call."""
