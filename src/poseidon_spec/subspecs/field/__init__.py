"""Prime field arithmetic consumed by the Poseidon core."""

from .interface import F, FieldElement
from .prime_field import Bls12381Fr, Bn254Fr, KoalaBearFp, PrimeFieldElement

__all__ = [
    "F",
    "FieldElement",
    "PrimeFieldElement",
    "Bls12381Fr",
    "Bn254Fr",
    "KoalaBearFp",
]
