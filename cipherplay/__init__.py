"""Toy block and public-key ciphers for learning: DES, a mini Feistel cipher, ECB/CBC modes, RSA and ElGamal."""

__version__ = "0.1.0"