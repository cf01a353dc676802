"""A toy ElGamal cipher over the integers modulo a prime. Not secure."""

from __future__ import annotations

from dataclasses import dataclass, field

from .numtheory import mod_inverse, mod_pow


@dataclass(frozen=True)
class ElGamal:
    """ElGamal with prime ``p``, generator ``g`` and private key ``x``.

    The public value ``h`` is ``g ** x mod p``.
    """

    p: int
    g: int
    x: int = field(repr=False)
    h: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", mod_pow(self.g, self.x, self.p))

    def encrypt(self, m: int, k: int) -> tuple[int, int]:
        """Encrypt ``m`` with the ephemeral exponent ``k``; return ``(c1, c2)``."""
        c1 = mod_pow(self.g, k, self.p)
        c2 = m * mod_pow(self.h, k, self.p) % self.p
        return c1, c2

    def decrypt(self, c1: int, c2: int) -> int:
        """Recover the message from the pair ``(c1, c2)``."""
        z = mod_pow(c1, self.x, self.p)
        return c2 * mod_inverse(z, self.p) % self.p