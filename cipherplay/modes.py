"""Block cipher modes of operation: ECB and CBC."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .blocks import BlockCipher, block_from_bytes, block_to_bytes


def _blocks(data: bytes, size: int, label: str) -> Iterator[int]:
    if len(data) % size:
        raise ValueError(f"{label} must be a multiple of block size")
    for start in range(0, len(data), size):
        yield block_from_bytes(bytes(data[start:start + size]), size)


class CipherMode(ABC):
    """A way of applying a block cipher to a whole message."""

    @abstractmethod
    def encrypt(self, cipher: BlockCipher, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` with ``cipher``."""

    @abstractmethod
    def decrypt(self, cipher: BlockCipher, ciphertext: bytes) -> bytes:
        """Decrypt ``ciphertext`` with ``cipher``."""


class ECB(CipherMode):
    """Electronic codebook: every block is enciphered on its own."""

    def encrypt(self, cipher: BlockCipher, plaintext: bytes) -> bytes:
        size = cipher.block_size
        return b"".join(
            block_to_bytes(cipher.encrypt_block(block), size)
            for block in _blocks(plaintext, size, "Plaintext")
        )

    def decrypt(self, cipher: BlockCipher, ciphertext: bytes) -> bytes:
        size = cipher.block_size
        return b"".join(
            block_to_bytes(cipher.decrypt_block(block), size)
            for block in _blocks(ciphertext, size, "Ciphertext")
        )


class CBC(CipherMode):
    """Cipher block chaining, starting from an initialisation vector."""

    def __init__(self, iv: int) -> None:
        self.iv = iv

    def encrypt(self, cipher: BlockCipher, plaintext: bytes) -> bytes:
        size = cipher.block_size
        previous = self.iv
        out = bytearray()
        for block in _blocks(plaintext, size, "Plaintext"):
            previous = cipher.encrypt_block(block ^ previous)
            out += block_to_bytes(previous, size)
        return bytes(out)

    def decrypt(self, cipher: BlockCipher, ciphertext: bytes) -> bytes:
        size = cipher.block_size
        previous = self.iv
        out = bytearray()
        for block in _blocks(ciphertext, size, "Ciphertext"):
            out += block_to_bytes(cipher.decrypt_block(block) ^ previous, size)
            previous = block
        return bytes(out)