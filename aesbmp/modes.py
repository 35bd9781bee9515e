"""AES in ECB, CBC, CFB, OFB and CTR modes, with PKCS#7 padding."""

from __future__ import annotations

from collections.abc import Iterator

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from cryptography.hazmat.primitives.ciphers import modes as _cipher_modes

from aesbmp.blockutils import increment_counter, xor_blocks

BLOCK_SIZE = 16
KEY_SIZES = (16, 24, 32)


class CipherError(ValueError):
    """Raised when input to a cipher operation is invalid."""


class _BlockCipher:
    """Raw single-block AES encryption and decryption."""

    def __init__(self, key: bytes) -> None:
        if len(key) not in KEY_SIZES:
            raise CipherError(f"invalid AES key size {len(key)}")
        cipher = Cipher(algorithms.AES(bytes(key)), _cipher_modes.ECB())
        self._encryptor = cipher.encryptor()
        self._decryptor = cipher.decryptor()

    def encrypt(self, block: bytes) -> bytes:
        return self._encryptor.update(bytes(block))

    def decrypt(self, block: bytes) -> bytes:
        return self._decryptor.update(bytes(block))


def _chunks(data: bytes) -> Iterator[bytes]:
    for start in range(0, len(data), BLOCK_SIZE):
        yield bytes(data[start : start + BLOCK_SIZE])


def _check_iv(iv: bytes, name: str = "initialisation vector") -> None:
    if len(iv) != BLOCK_SIZE:
        raise CipherError(f"the {name} must be {BLOCK_SIZE} bytes long")


def _check_block_multiple(data: bytes) -> None:
    if len(data) % BLOCK_SIZE:
        raise CipherError("ciphertext length is not a multiple of the block size")


def pad_pkcs7(data: bytes, block_size: int) -> bytes:
    """Append PKCS#7 padding; a full block is added when already aligned."""
    padding = block_size - len(data) % block_size
    return bytes(data) + bytes([padding]) * padding


def unpad_pkcs7(data: bytes) -> bytes:
    """Strip and verify PKCS#7 padding for the AES block size."""
    if not data:
        raise CipherError("empty data")
    padding = data[-1]
    if padding == 0 or padding > BLOCK_SIZE:
        raise CipherError("invalid padding")
    if padding > len(data) or any(b != padding for b in data[-padding:]):
        raise CipherError("invalid padding content")
    return bytes(data[:-padding])


def encrypt_ecb(key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    return b"".join(cipher.encrypt(c) for c in _chunks(pad_pkcs7(data, BLOCK_SIZE)))


def decrypt_ecb(key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_block_multiple(data)
    return unpad_pkcs7(b"".join(cipher.decrypt(c) for c in _chunks(data)))


def encrypt_cbc(iv: bytes, key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_iv(iv)
    out = []
    prev = bytes(iv)
    for chunk in _chunks(pad_pkcs7(data, BLOCK_SIZE)):
        prev = cipher.encrypt(xor_blocks(chunk, prev))
        out.append(prev)
    return b"".join(out)


def decrypt_cbc(iv: bytes, key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_iv(iv)
    _check_block_multiple(data)
    out = []
    prev = bytes(iv)
    for chunk in _chunks(data):
        out.append(xor_blocks(cipher.decrypt(chunk), prev))
        prev = chunk
    return unpad_pkcs7(b"".join(out))


def encrypt_cfb(iv: bytes, key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_iv(iv)
    out = []
    feedback = bytes(iv)
    for chunk in _chunks(pad_pkcs7(data, BLOCK_SIZE)):
        feedback = xor_blocks(chunk, cipher.encrypt(feedback))
        out.append(feedback)
    return b"".join(out)


def decrypt_cfb(iv: bytes, key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_iv(iv)
    _check_block_multiple(data)
    out = []
    feedback = bytes(iv)
    for chunk in _chunks(data):
        out.append(xor_blocks(chunk, cipher.encrypt(feedback)))
        feedback = chunk
    return unpad_pkcs7(b"".join(out))


def _ofb_stream(cipher: _BlockCipher, iv: bytes, data: bytes) -> bytes:
    out = []
    stream = bytes(iv)
    for chunk in _chunks(data):
        stream = cipher.encrypt(stream)
        out.append(xor_blocks(chunk, stream))
    return b"".join(out)


def encrypt_ofb(iv: bytes, key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_iv(iv)
    return _ofb_stream(cipher, iv, pad_pkcs7(data, BLOCK_SIZE))


def decrypt_ofb(iv: bytes, key: bytes, data: bytes) -> bytes:
    cipher = _BlockCipher(key)
    _check_iv(iv)
    return unpad_pkcs7(_ofb_stream(cipher, iv, data))


def _ctr(counter: bytes, key: bytes, data: bytes) -> bytes:
    _check_iv(counter, "counter")
    cipher = _BlockCipher(key)
    out = []
    ctr = bytes(counter)
    for chunk in _chunks(data):
        out.append(xor_blocks(chunk, cipher.encrypt(ctr)))
        ctr = increment_counter(ctr)
    return b"".join(out)


def encrypt_ctr(counter: bytes, key: bytes, data: bytes) -> bytes:
    """Encrypt in CTR mode; no padding is applied."""
    return _ctr(counter, key, data)


def decrypt_ctr(counter: bytes, key: bytes, data: bytes) -> bytes:
    """Decrypt in CTR mode; identical to encryption."""
    return _ctr(counter, key, data)