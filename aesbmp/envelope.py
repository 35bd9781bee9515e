"""AES-CBC with a random IV stored in front of the ciphertext."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from aesbmp.modes import BLOCK_SIZE, KEY_SIZES, CipherError


def _aes(key: bytes) -> algorithms.AES:
    if len(key) not in KEY_SIZES:
        raise CipherError(f"invalid AES key size {len(key)}")
    return algorithms.AES(bytes(key))


def pad(data: bytes, block_size: int) -> bytes:
    """Append PKCS#7 padding up to a multiple of ``block_size``."""
    padding = block_size - len(data) % block_size
    return bytes(data) + bytes([padding]) * padding


def unpad(data: bytes, block_size: int) -> bytes:
    """Strip PKCS#7 padding, checking only the final length byte."""
    if not data:
        raise CipherError("data is empty")
    padding = data[-1]
    if padding == 0 or padding > block_size or padding > len(data):
        raise CipherError("invalid padding")
    return bytes(data[:-padding])


def encrypt_aes(data: bytes, key: bytes) -> bytes:
    """Encrypt ``data`` with AES-CBC and return IV followed by ciphertext."""
    algorithm = _aes(key)
    iv = os.urandom(BLOCK_SIZE)
    encryptor = Cipher(algorithm, modes.CBC(iv)).encryptor()
    body = encryptor.update(pad(data, BLOCK_SIZE)) + encryptor.finalize()
    return iv + body


def decrypt_aes(ciphertext: bytes, key: bytes) -> bytes:
    """Decrypt IV-prefixed AES-CBC ciphertext and strip its padding."""
    algorithm = _aes(key)
    if len(ciphertext) < BLOCK_SIZE:
        raise CipherError("ciphertext is too short")
    iv, body = bytes(ciphertext[:BLOCK_SIZE]), bytes(ciphertext[BLOCK_SIZE:])
    if len(body) % BLOCK_SIZE:
        raise CipherError("ciphertext length is not a multiple of the block size")
    decryptor = Cipher(algorithm, modes.CBC(iv)).decryptor()
    plain = decryptor.update(body) + decryptor.finalize()
    return unpad(plain, BLOCK_SIZE)