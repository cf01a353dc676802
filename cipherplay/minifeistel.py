"""A small 64-bit Feistel block cipher with a 64-bit key and eight rounds.

Round function on the 32-bit half:
  1. XOR each byte with the matching byte of the round key,
  2. rotate each byte left by one bit,
  3. rotate the four bytes right by two places.
"""

from __future__ import annotations

from .blocks import BlockCipher

FEISTEL_ROUNDS = 8

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _check_u64(value: int, what: str) -> int:
    if value < 0 or value > _MASK64:
        raise ValueError(f"{what} must fit in 64 bits")
    return value


def _rotl64(value: int, n: int) -> int:
    n %= 64
    return ((value << n) | (value >> (64 - n))) & _MASK64


def _rotl8(value: int, n: int) -> int:
    return ((value << n) | (value >> (8 - n))) & 0xFF


def _round_function(half: int, round_key: int) -> int:
    state = [
        _rotl8(s ^ k, 1)
        for s, k in zip(half.to_bytes(4, "big"), round_key.to_bytes(4, "big"))
    ]
    state = state[2:] + state[:2]
    return int.from_bytes(bytes(state), "big")


def _split(block: int) -> tuple[int, int]:
    return block >> 32, block & _MASK32


def _combine(high: int, low: int) -> int:
    return (high << 32) | low


class MiniFeistel64(BlockCipher):
    """Toy Feistel cipher on 64-bit blocks."""

    block_size = 8

    def __init__(self, key: int) -> None:
        self.key = key

    @property
    def key(self) -> int:
        return self._key

    @key.setter
    def key(self, value: int) -> None:
        self._key = _check_u64(value, "key")

    def round_keys(self) -> list[int]:
        """Return the 32-bit key for each round: the top half of the key rotated by 8*i bits."""
        return [_rotl64(self._key, 8 * i) >> 32 for i in range(FEISTEL_ROUNDS)]

    def encrypt_block(self, block: int) -> int:
        left, right = _split(_check_u64(block, "block"))
        for round_key in self.round_keys():
            left, right = right, left ^ _round_function(right, round_key)
        return _combine(right, left)

    def decrypt_block(self, block: int) -> int:
        right, left = _split(_check_u64(block, "block"))
        for round_key in reversed(self.round_keys()):
            left, right = right ^ _round_function(left, round_key), left
        return _combine(left, right)