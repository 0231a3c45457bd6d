"""Specification for the Poseidon permutation and sponge hash."""

from .loader import parse_parameter_listing
from .params import ParameterSet
from .permutation import permute
from .sponge import PoseidonSponge, absorb, hash, squeeze

__all__ = [
    "ParameterSet",
    "PoseidonSponge",
    "absorb",
    "hash",
    "parse_parameter_listing",
    "permute",
    "squeeze",
]
