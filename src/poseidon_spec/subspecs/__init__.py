"""Subspecifications for the Poseidon hash specification."""
