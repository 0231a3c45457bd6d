"""Prime field elements and the concrete fields used with Poseidon."""

from typing import Any, ClassVar, Self

from pydantic import Field, field_validator

from poseidon_spec.types import FieldMismatchError, StrictBaseModel

# =================================================================
# Generic Prime Field
#
# A single model implements F_p for any prime p. Concrete fields only
# fix the modulus, so elements of different fields are distinct types
# and never mix silently.
# =================================================================


class PrimeFieldElement(StrictBaseModel):
    """
    An element of the prime field F_p.

    This class is abstract: subclasses set `MODULUS`.
    All arithmetic is performed modulo `MODULUS`.
    """

    MODULUS: ClassVar[int]
    """The field prime p."""

    value: int = Field(ge=0, description="Field element value in the range [0, MODULUS)")

    @field_validator("value", mode="before")
    @classmethod
    def reduce_modulo_p(cls, v: Any) -> Any:
        """Reduces an integer input modulo the field prime before validation."""
        # Non-integers are left for strict validation to reject.
        if isinstance(v, bool) or not isinstance(v, int):
            return v
        return v % cls.MODULUS

    @classmethod
    def zero(cls) -> Self:
        """The additive identity."""
        return cls(value=0)

    @classmethod
    def one(cls) -> Self:
        """The multiplicative identity."""
        return cls(value=1)

    @classmethod
    def byte_length(cls) -> int:
        """The size of a serialized element in bytes."""
        return (cls.MODULUS.bit_length() + 7) // 8

    def _check_same_field(self, other: Any) -> None:
        if type(other) is not type(self):
            raise FieldMismatchError(type(self).__name__, type(other).__name__)

    def __add__(self, other: Self) -> Self:
        """Field addition."""
        self._check_same_field(other)
        return self.__class__(value=self.value + other.value)

    def __sub__(self, other: Self) -> Self:
        """Field subtraction."""
        self._check_same_field(other)
        return self.__class__(value=self.value - other.value)

    def __neg__(self) -> Self:
        """Field negation."""
        return self.__class__(value=-self.value)

    def __mul__(self, other: Self) -> Self:
        """Field multiplication."""
        self._check_same_field(other)
        return self.__class__(value=self.value * other.value)

    def __pow__(self, exponent: int) -> Self:
        """Field exponentiation."""
        return self.__class__(value=pow(self.value, exponent, self.MODULUS))

    def inverse(self) -> Self:
        """Computes the multiplicative inverse."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert the zero element.")
        # a^(p-2) is the multiplicative inverse of a in F_p
        return self ** (self.MODULUS - 2)

    def __truediv__(self, other: Self) -> Self:
        """Field division."""
        self._check_same_field(other)
        return self * other.inverse()

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value})"

    def __bytes__(self) -> bytes:
        """
        Serialize the field element using Python's bytes protocol.

        Returns:
            Fixed-width little-endian representation of the field element.

        Example:
            >>> data = bytes(KoalaBearFp(value=42))
            >>> len(data) == KoalaBearFp.byte_length()
            True
        """
        return self.value.to_bytes(self.byte_length(), byteorder="little")

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Deserialize a field element from bytes.

        This is the inverse of `__bytes__()`.

        Args:
            data: Fixed-width little-endian representation of a field element.

        Returns:
            Deserialized field element.

        Raises:
            ValueError: If data has incorrect length or represents an invalid field value.
        """
        if len(data) != cls.byte_length():
            raise ValueError(f"Expected {cls.byte_length()} bytes, got {len(data)}")

        value = int.from_bytes(data, byteorder="little")

        if value >= cls.MODULUS:
            raise ValueError(f"Value {value} exceeds field modulus {cls.MODULUS}")

        return cls(value=value)

    @classmethod
    def from_literal(cls, literal: str) -> Self:
        """
        Parse a canonical field element from a hex (`0x...`) or decimal literal.

        Surrounding whitespace and quotes are ignored.

        Raises:
            ValueError: If the literal is not a number or is not below the modulus.
        """
        text = literal.strip().strip("'\"")
        if text[:2].lower() == "0x":
            value = int(text[2:], 16)
        else:
            value = int(text, 10)

        if not 0 <= value < cls.MODULUS:
            raise ValueError(f"Literal {literal!r} is not a canonical element of {cls.__name__}")

        return cls(value=value)


# =================================================================
# Concrete Fields
# =================================================================


class Bls12381Fr(PrimeFieldElement):
    """The scalar field of the BLS12-381 curve."""

    MODULUS: ClassVar[int] = (
        52435875175126190479447740508185965837690552500527637822603658699938581184513
    )


class Bn254Fr(PrimeFieldElement):
    """The scalar field of the BN254 (alt_bn128) curve."""

    MODULUS: ClassVar[int] = (
        21888242871839275222246405745257275088548364400416034343698204186575808495617
    )


class KoalaBearFp(PrimeFieldElement):
    """The KoalaBear prime field: p = 2^31 - 2^24 + 1."""

    MODULUS: ClassVar[int] = 2**31 - 2**24 + 1
