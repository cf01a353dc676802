"""The Data Encryption Standard block cipher."""

from __future__ import annotations

from .blocks import BlockCipher
from .des_ops import (
    FEISTEL_ROUNDS,
    ITER_SHIFT,
    apply_initial_permutation,
    apply_p,
    apply_pc1,
    apply_pc2,
    combine_block,
    combine_round_key,
    expand_r,
    extract_sbox_input,
    pad_sbox_output,
    query_s_box,
    rotate_left_28,
    split_block,
    split_key,
)

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _check_u64(value: int, what: str) -> int:
    if value < 0 or value > _MASK64:
        raise ValueError(f"{what} must fit in 64 bits")
    return value


def _round_function(expanded_r: int, round_key: int) -> int:
    mixed = expanded_r ^ round_key
    out = 0
    for index in range(8):
        out |= pad_sbox_output(index, query_s_box(index, extract_sbox_input(index, mixed)))
    return apply_p(out)


def _feistel_network(block: int, round_keys: list[int]) -> int:
    left, right = split_block(apply_initial_permutation(block, False))
    for round_key in round_keys:
        left, right = right, left ^ _round_function(expand_r(right), round_key)
    return apply_initial_permutation(combine_block(right, left), True)


class DES(BlockCipher):
    """DES on 64-bit blocks with a 64-bit key (parity bits ignored)."""

    block_size = 8

    def __init__(self, key: int) -> None:
        self.key = key

    @property
    def key(self) -> int:
        return self._key

    @key.setter
    def key(self, value: int) -> None:
        self._key = _check_u64(value, "key")

    def schedule_subkeys(self) -> list[int]:
        """Return the sixteen 48-bit round keys in encryption order."""
        c, d = split_key(apply_pc1(self._key))
        keys = []
        for shift in ITER_SHIFT[:FEISTEL_ROUNDS]:
            c = rotate_left_28(c, shift)
            d = rotate_left_28(d, shift)
            keys.append(apply_pc2(combine_round_key(c, d)))
        return keys

    def encrypt_block(self, block: int) -> int:
        return _feistel_network(_check_u64(block, "block"), self.schedule_subkeys())

    def decrypt_block(self, block: int) -> int:
        return _feistel_network(
            _check_u64(block, "block"), list(reversed(self.schedule_subkeys()))
        )