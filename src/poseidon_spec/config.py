"""
Global configuration for the Poseidon hash specification.

This module contains environment-specific settings that apply across all subspecs.
"""

import os

_SUPPORTED_POSEIDON_ENVS: list[str] = ["prod", "test"]

POSEIDON_ENV = os.environ.get("POSEIDON_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod' for the specs."""

if POSEIDON_ENV not in _SUPPORTED_POSEIDON_ENVS:
    raise ValueError(
        f"Invalid POSEIDON_ENV environment variable: '{POSEIDON_ENV}'. "
        f"Supported values: {_SUPPORTED_POSEIDON_ENVS}"
    )

_TRACE_FLAG = os.environ.get("POSEIDON_TRACE_ROUNDS", "0").strip()

if _TRACE_FLAG not in ("0", "1"):
    raise ValueError(
        f"Invalid POSEIDON_TRACE_ROUNDS environment variable: '{_TRACE_FLAG}'. "
        "Supported values: ['0', '1']"
    )

TRACE_ROUNDS: bool = _TRACE_FLAG == "1"
"""
Emit a DEBUG record for every permutation round.

Off by default: the permutation is the hot loop of every hash call.
"""
