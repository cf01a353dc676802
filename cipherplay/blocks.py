"""Block cipher interface and helpers for converting blocks to and from bytes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class BlockCipher(ABC):
    """A cipher that transforms fixed-size integer blocks.

    Subclasses set ``block_size`` to the size of one block in bytes.
    """

    block_size: ClassVar[int]

    @abstractmethod
    def encrypt_block(self, block: int) -> int:
        """Encrypt one plaintext block and return the ciphertext block."""

    @abstractmethod
    def decrypt_block(self, block: int) -> int:
        """Decrypt one ciphertext block and return the plaintext block."""


def block_from_bytes(data: bytes, size: int) -> int:
    """Read exactly ``size`` big-endian bytes as an unsigned block."""
    if len(data) != size:
        raise ValueError(f"expected {size} bytes for a block, got {len(data)}")
    return int.from_bytes(data, "big")


def block_to_bytes(block: int, size: int) -> bytes:
    """Write an unsigned block as ``size`` big-endian bytes."""
    if block < 0 or block >= 1 << (8 * size):
        raise ValueError(f"block {block} does not fit in {size} bytes")
    return block.to_bytes(size, "big")