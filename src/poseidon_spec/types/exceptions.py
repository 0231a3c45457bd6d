"""Exception hierarchy for the Poseidon hash specification."""

from __future__ import annotations


class PoseidonError(Exception):
    """
    Base exception for all Poseidon-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class PoseidonValueError(PoseidonError, ValueError):
    """
    Base class for invalid arguments passed by the caller.

    Raised before any permutation round runs.
    """


class RateError(PoseidonValueError):
    """
    Raised when a sponge rate falls outside `[1, state_width]`.

    Attributes:
        rate: The rejected rate.
        state_width: The width of the permutation state.
    """

    def __init__(self, rate: int, state_width: int) -> None:
        self.rate = rate
        self.state_width = state_width
        super().__init__(f"Rate must be in [1, {state_width}], got {rate}")


class OutputLengthError(PoseidonValueError):
    """
    Raised when the requested number of output elements is not positive.

    Attributes:
        output_length: The rejected output length.
    """

    def __init__(self, output_length: int) -> None:
        self.output_length = output_length
        super().__init__(f"Output length must be at least 1, got {output_length}")


class StateLengthError(PoseidonValueError):
    """
    Raised when a permutation state does not match the configured width.

    Attributes:
        expected: The state width of the parameter set.
        actual: The length of the supplied state.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"State must have exactly {expected} elements, got {actual}")


class FieldMismatchError(PoseidonValueError):
    """
    Raised when elements from two different fields are combined.

    Attributes:
        expected: Name of the field that was expected.
        actual: Name of the field that was received.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected an element of {expected}, got {actual}")


class ParameterFormatError(PoseidonError, ValueError):
    """
    Raised when a textual parameter listing cannot be parsed.

    Attributes:
        detail: Description of what went wrong.
        line: The 1-based line number where the error occurred (if known).
    """

    def __init__(self, detail: str, *, line: int | None = None) -> None:
        self.detail = detail
        self.line = line

        msg = f"Malformed parameter listing: {detail}"
        if line is not None:
            msg = f"{msg} (at line {line})"

        super().__init__(msg)
