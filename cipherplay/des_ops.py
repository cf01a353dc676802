"""Tables and bit operations of the Data Encryption Standard.

Permutation tables follow FIPS 46-3: positions are 1-indexed and position 1
is the most significant bit.
"""

from __future__ import annotations

FEISTEL_ROUNDS = 16

_MASK28 = 0x0FFFFFFF
_MASK32 = 0xFFFFFFFF


def _columns(starts: tuple[int, ...], length: int = 8) -> list[int]:
    """Concatenate descending runs ``start, start - 8, ...`` of ``length`` items."""
    return [start - 8 * k for start in starts for k in range(length)]


def _parse_positions(text: str) -> tuple[int, ...]:
    return tuple(int(token) for token in text.split())


IP = tuple(_columns((58, 60, 62, 64, 57, 59, 61, 63)))


def _invert(table: tuple[int, ...]) -> tuple[int, ...]:
    inverse = [0] * len(table)
    for out_pos, src_pos in enumerate(table, start=1):
        inverse[src_pos - 1] = out_pos
    return tuple(inverse)


IP_INVERSE = _invert(IP)

# Each group of six overlaps its neighbours by one bit on either side.
E = tuple((4 * group - 1 + k) % 32 + 1 for group in range(8) for k in range(6))

P = _parse_positions(
    "16 7 20 21 29 12 28 17 1 15 23 26 5 18 31 10 "
    "2 8 24 14 32 27 3 9 19 13 30 6 22 11 4 25"
)

PC1 = tuple(
    _columns((57, 58, 59, 60))[:28]
    + _columns((63, 62, 61))
    + [28, 20, 12, 4]
)

PC2 = _parse_positions(
    "14 17 11 24 1 5 3 28 15 6 21 10 23 19 12 4 26 8 16 7 27 20 13 2 "
    "41 52 31 37 47 55 30 40 51 45 33 48 44 49 39 56 34 53 46 42 50 36 29 32"
)

ITER_SHIFT = tuple(1 if rnd in (0, 1, 8, 15) else 2 for rnd in range(FEISTEL_ROUNDS))

# Each S-box is four rows of sixteen 4-bit entries, one hex digit per entry.
_SBOX_HEX = (
    ("e4d12fb83a6c5907", "0f74e2d1a6cb9538", "41e8d62bfc973a50", "fc8249175b3ea06d"),
    ("f18e6b34972dc05a", "3d47f28ec01a69b5", "0e7ba4d158c6932f", "d8a13f42b67c05e9"),
    ("a09e63f51dc7b428", "d709346a285ecbf1", "d6498f30b12c5ae7", "1ad069874fe3b52c"),
    ("7de3069a1285bc4f", "d8b56f03472c1ae9", "a690cb7df13e5284", "3f06a1d8945bc72e"),
    ("2c417ab6853fd0e9", "eb2c47d150fa3986", "421bad78f9c5630e", "b8c71e2d6f09a453"),
    ("c1af92680d34e75b", "af427c9561de0b38", "9ef528c3704a1db6", "432c95fabe17608d"),
    ("4b2ef08d3c975a61", "d0b7491ae35c2f86", "14bdc37eaf680592", "6bd814a7950fe23c"),
    ("d2846fb1a93e50c7", "1fd8a374c56b0e92", "7b419ce206adf358", "21e74a8dfc90356b"),
)

SBOXES = tuple(
    tuple(tuple(int(digit, 16) for digit in row) for row in box) for box in _SBOX_HEX
)


def _permute(value: int, table: tuple[int, ...], in_width: int) -> int:
    """Build a number whose i-th bit from the top is bit ``table[i]`` of ``value``."""
    out = 0
    for src_pos in table:
        out = (out << 1) | ((value >> (in_width - src_pos)) & 1)
    return out


def _check_sbox_index(index: int) -> None:
    if not 0 <= index < 8:
        raise ValueError("invalid S-box index")


def apply_initial_permutation(value: int, inverse: bool = False) -> int:
    """Permute a 64-bit block with IP, or with its inverse when ``inverse`` is true."""
    return _permute(value, IP_INVERSE if inverse else IP, 64)


def apply_pc1(key: int) -> int:
    """Compress a 64-bit key to 56 bits, dropping the parity bits."""
    return _permute(key, PC1, 64)


def apply_pc2(key: int) -> int:
    """Compress a 56-bit key to a 48-bit round key."""
    return _permute(key, PC2, 56)


def apply_p(value: int) -> int:
    """Permute the 32-bit S-box output with the P table."""
    return _permute(value, P, 32)


def expand_r(r: int) -> int:
    """Expand a 32-bit half block to 48 bits with the E table."""
    return _permute(r, E, 32)


def query_s_box(index: int, value: int) -> int:
    """Look up a 6-bit input in S-box ``index`` and return its 4-bit output."""
    _check_sbox_index(index)
    row = ((value & 0x20) >> 4) | (value & 0x1)
    col = (value >> 1) & 0x0F
    return SBOXES[index][row][col]


def split_block(block: int) -> tuple[int, int]:
    """Split a 64-bit block into its high and low 32-bit halves."""
    return block >> 32, block & _MASK32


def split_key(key: int) -> tuple[int, int]:
    """Split a 56-bit key into its high and low 28-bit halves."""
    return key >> 28, key & _MASK28


def combine_block(high: int, low: int) -> int:
    """Join two 32-bit halves into a 64-bit block."""
    return (high << 32) | low


def combine_round_key(high: int, low: int) -> int:
    """Join two 28-bit halves into a 56-bit key."""
    return (high << 28) | low


def extract_sbox_input(index: int, value: int) -> int:
    """Take the six bits of a 48-bit value that feed S-box ``index``; S1 gets the top six."""
    _check_sbox_index(index)
    return (value >> (42 - 6 * index)) & 0b111111


def pad_sbox_output(index: int, value: int) -> int:
    """Place the 4-bit output of S-box ``index`` in the combined 32-bit output."""
    _check_sbox_index(index)
    return value << (28 - 4 * index)


def rotate_left_28(value: int, n: int) -> int:
    """Rotate a 28-bit value left by ``n`` bits."""
    n %= 28
    value &= _MASK28
    return ((value << n) | (value >> (28 - n))) & _MASK28