"""Hash functions: Keccak-256, Keccak-512."""

from .keccak import Keccak, keccak256, keccak512

__all__: tuple[str, ...] = ("Keccak", "keccak256", "keccak512")
