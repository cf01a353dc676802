"""A toy RSA cipher working on small integers. Not secure."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import gcd

from .numtheory import mod_inverse, mod_pow, random_prime

PUBLIC_EXPONENT = 65537
_PRIME_LOW = 1 << 16
_PRIME_HIGH = 1 << 20


@dataclass(frozen=True)
class RSA:
    """RSA key pair: modulus ``n``, public exponent ``e``, private exponent ``d``."""

    n: int
    e: int
    d: int = field(repr=False)

    @classmethod
    def generate(cls) -> RSA:
        """Create a new key pair from two random primes in [2**16, 2**20]."""
        p = random_prime(_PRIME_LOW, _PRIME_HIGH)
        q = random_prime(_PRIME_LOW, _PRIME_HIGH)
        n = p * q
        phi_n = (p - 1) * (q - 1)
        e = PUBLIC_EXPONENT
        if gcd(e, phi_n) != 1:
            raise ValueError("e is not coprime with phi_n")
        return cls(n, e, mod_inverse(e, phi_n))

    def encrypt(self, m: int) -> int:
        """Return the ciphertext of message ``m``."""
        return mod_pow(m, self.e, self.n)

    def decrypt(self, c: int) -> int:
        """Return the message hidden in ciphertext ``c``."""
        return mod_pow(c, self.d, self.n)