"""
Parser for Poseidon parameter listings.

The reference parameter generation script prints one instance as text:

    Params: n=255, t=5, alpha=5, M=128, R_F=8, R_P=56
    Modulus = 52435875175126190479447740508185965837690552500527637822603658699938581184513
    Number of S-boxes: 96
    Number of round constants: 320
    Round constants for GF(p):
    ['0x...', '0x...', ...]
    ...
    MDS matrix:
     [['0x...', ...], ...]

This module turns such a listing into a validated `ParameterSet`. It only
parses text; reading the listing from disk is left to the caller.
"""

import logging
import re
from typing import Dict, List, Tuple, Type

from pydantic import ValidationError

from poseidon_spec.types import ParameterFormatError

from ..field import PrimeFieldElement
from .params import ParameterSet

logger = logging.getLogger(__name__)

REQUIRED_HEADER_KEYS: Tuple[str, ...] = ("t", "alpha", "R_F", "R_P")
"""Keys of the `Params:` line needed to build a parameter set."""

_HEADER_ITEM = re.compile(r"(\w+)\s*=\s*(\d+)")
_MATRIX_ROW = re.compile(r"\[([^\[\]]*)\]")


def parse_header(line: str) -> Dict[str, int]:
    """
    Parses the `Params:` line into its integer settings.

    Example:
        >>> parse_header("Params: n=255, t=5, alpha=5, M=128, R_F=8, R_P=56")["R_P"]
        56

    Raises:
        ParameterFormatError: If the line is not a `Params:` line or lacks a required key.
    """
    head, sep, body = line.partition(":")
    if not sep or head.strip() != "Params":
        raise ParameterFormatError(f"expected a 'Params:' line, got {line.strip()!r}")

    settings = {key: int(value) for key, value in _HEADER_ITEM.findall(body)}

    missing = [key for key in REQUIRED_HEADER_KEYS if key not in settings]
    if missing:
        raise ParameterFormatError(f"'Params:' line is missing {', '.join(missing)}")

    return settings


def _parse_literals(body: str, field: Type[PrimeFieldElement]) -> List[PrimeFieldElement]:
    if not body.strip():
        return []
    try:
        return [field.from_literal(token) for token in body.split(",")]
    except ValueError as e:
        raise ParameterFormatError(str(e)) from e


def parse_constant_list(line: str, field: Type[PrimeFieldElement]) -> List[PrimeFieldElement]:
    """
    Parses a bracketed list of hex or decimal literals, e.g. `['0x1f', '42']`.

    Raises:
        ParameterFormatError: If the line is not a list or holds an invalid literal.
    """
    text = line.strip()
    if not (text.startswith("[") and text.endswith("]")) or text.startswith("[["):
        raise ParameterFormatError(f"expected a list of constants, got {text[:40]!r}")
    return _parse_literals(text[1:-1], field)


def parse_matrix(line: str, field: Type[PrimeFieldElement]) -> List[List[PrimeFieldElement]]:
    """
    Parses a bracketed list of rows, each a bracketed list of literals.

    Raises:
        ParameterFormatError: If the line is not a nested list or holds an invalid literal.
    """
    text = line.strip()
    if not (text.startswith("[[") and text.endswith("]]")):
        raise ParameterFormatError(f"expected a matrix, got {text[:40]!r}")
    return [_parse_literals(row, field) for row in _MATRIX_ROW.findall(text[1:-1])]


def _line_after(lines: List[str], index: int, section: str) -> Tuple[int, str]:
    # The payload of a section is its first non-blank line.
    for i in range(index + 1, len(lines)):
        if lines[i].strip():
            return i, lines[i]
    raise ParameterFormatError(f"section {section!r} has no content", line=index + 1)


def parse_parameter_listing(text: str, field: Type[PrimeFieldElement]) -> ParameterSet:
    """
    Builds a parameter set from a full parameter listing.

    Args:
        text: The listing, as printed by the parameter generation script.
        field: The field the constants belong to.

    Returns:
        A validated, immutable parameter set.

    Raises:
        ParameterFormatError: If a section is missing or malformed, if the
            declared modulus is not `field.MODULUS`, if the declared number of
            round constants disagrees with the list, or if the parsed values
            do not form a valid parameter set.
    """
    lines = text.splitlines()

    settings: Dict[str, int] | None = None
    constants: List[PrimeFieldElement] | None = None
    matrix: List[List[PrimeFieldElement]] | None = None
    declared_count: int | None = None

    for index, line in enumerate(lines):
        stripped = line.strip()
        lineno = index + 1

        try:
            if stripped.startswith("Params:"):
                settings = parse_header(stripped)

            elif stripped.startswith("Modulus"):
                _, _, value = stripped.partition("=")
                modulus = int(value.strip(), 0)
                if modulus != field.MODULUS:
                    raise ParameterFormatError(
                        f"listing is for modulus {modulus}, not {field.__name__}"
                    )

            elif stripped.startswith("Number of round constants"):
                _, _, value = stripped.partition(":")
                declared_count = int(value.strip())

            elif stripped.startswith("Round constants"):
                payload_index, payload = _line_after(lines, index, "Round constants")
                lineno = payload_index + 1
                constants = parse_constant_list(payload, field)

            elif stripped.startswith("MDS matrix"):
                payload_index, payload = _line_after(lines, index, "MDS matrix")
                lineno = payload_index + 1
                matrix = parse_matrix(payload, field)

        except ParameterFormatError as e:
            if e.line is not None:
                raise
            raise ParameterFormatError(e.detail, line=lineno) from e
        except ValueError as e:
            raise ParameterFormatError(str(e), line=lineno) from e

    if settings is None:
        raise ParameterFormatError("missing 'Params:' line")
    if constants is None:
        raise ParameterFormatError("missing 'Round constants' section")
    if matrix is None:
        raise ParameterFormatError("missing 'MDS matrix' section")
    if declared_count is not None and declared_count != len(constants):
        raise ParameterFormatError(
            f"listing declares {declared_count} round constants but contains {len(constants)}"
        )

    logger.debug(
        "Parsed %d round constants and a %dx%d MDS matrix over %s",
        len(constants),
        len(matrix),
        len(matrix[0]) if matrix else 0,
        field.__name__,
    )

    try:
        return ParameterSet(
            state_width=settings["t"],
            full_rounds=settings["R_F"],
            partial_rounds=settings["R_P"],
            alpha=settings["alpha"],
            round_constants=tuple(constants),
            mds_matrix=tuple(tuple(row) for row in matrix),
        )
    except ValidationError as e:
        raise ParameterFormatError(f"inconsistent parameters: {e}") from e
