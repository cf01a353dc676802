# cipherplay

A small collection of classic ciphers for study and experimentation. It is
meant for learning how the algorithms work, not for protecting real data: the
key sizes are tiny and nothing is hardened.

## What is inside

- `cipherplay.blocks`: the `BlockCipher` base class (with `encrypt_block`,
  `decrypt_block` and a `block_size` in bytes) and the helpers
  `block_from_bytes` and `block_to_bytes`, which read and write blocks as
  big-endian bytes.
- `cipherplay.des.DES`: the Data Encryption Standard on 64-bit blocks.
  `DES.schedule_subkeys()` returns the sixteen 48-bit round keys. The
  building blocks (the FIPS 46-3 tables, permutations, S-box lookup and key
  schedule helpers such as `apply_pc1`, `expand_r`, `query_s_box` and
  `rotate_left_28`) are in `cipherplay.des_ops`.
- `cipherplay.minifeistel.MiniFeistel64`: an 8-round Feistel cipher with a
  64-bit block and key and a deliberately simple round function;
  `round_keys()` shows the per-round keys.
- `cipherplay.modes`: the `ECB` and `CBC` modes of operation (both
  `CipherMode` subclasses), which work with any `BlockCipher`.
- `cipherplay.rsa.RSA`: textbook RSA with small integers, including key pair
  generation with `RSA.generate()` (two random primes in [2**16, 2**20],
  public exponent 65537).
- `cipherplay.elgamal.ElGamal`: textbook ElGamal encryption; the public value
  is available as `h`.
- `cipherplay.numtheory`: `mod_inverse`, `mod_pow`, `is_prime` and
  `random_prime`.
- `cipherplay.bits`: `format_bits` and `dump_bits` for showing an integer as
  grouped bits, and `format_memory_bits_u64` for showing the bytes of a 64-bit
  value in this machine's memory order.

Blocks and keys are plain Python integers. Values that do not fit in 64 bits,
message lengths that are not a multiple of the block size, and numbers with no
modular inverse raise `ValueError`.

## Installing

```
pip install .
```

## Examples

Encrypting one DES block:

```python
from cipherplay.des import DES

cipher = DES(0x133457799BBCDFF1)
ct = cipher.encrypt_block(0x0123456789ABCDEF)
assert ct == 0x85E813540F0AB405
assert cipher.decrypt_block(ct) == 0x0123456789ABCDEF
```

Encrypting bytes in CBC mode (the length must be a multiple of 8 bytes):

```python
from cipherplay.des import DES
from cipherplay.modes import CBC

cipher = DES(0x133457799BBCDFF1)
mode = CBC(iv=0x0011223344556677)
ct = mode.encrypt(cipher, b"16 bytes of text")
assert mode.decrypt(cipher, ct) == b"16 bytes of text"
```

RSA and ElGamal with small numbers:

```python
from cipherplay.rsa import RSA
from cipherplay.elgamal import ElGamal

rsa = RSA(55, 3, 27)
assert rsa.decrypt(rsa.encrypt(2)) == 2

elgamal = ElGamal(19, 3, 5)
c1, c2 = elgamal.encrypt(5, 3)
assert elgamal.decrypt(c1, c2) == 5
```

Showing bits:

```python
from cipherplay.bits import format_bits

assert format_bits(0xA5, 8) == " 10100101"
```

## Command line

```
cipherplay
```

runs a short RSA demonstration with a fixed small key, printing a ciphertext
and its decryption. It exits with status 0 when the message survives the
round trip and 1 otherwise. It takes no options besides `--help`.

## What it does not do

- The modes do no padding: input to `ECB` and `CBC` must already be a whole
  number of blocks.
- RSA and ElGamal work on single integers; there is no encoding of text or
  bytes into messages, no padding scheme and no key storage.
- The command line only runs the fixed demonstration; encrypting files or
  chosen messages is done from Python.

## Running the tests

```
pip install .[test]
pytest
```