"""Small byte-level helpers shared by the block cipher modes."""

from __future__ import annotations


def xor_blocks(a: bytes, b: bytes) -> bytes:
    """Return ``a`` XOR ``b`` over the length of ``a``.

    ``b`` may be longer than ``a``; its extra bytes are ignored.
    """
    if len(b) < len(a):
        raise ValueError(
            f"second block is shorter than the first ({len(b)} < {len(a)})"
        )
    return bytes(x ^ y for x, y in zip(a, b))


def increment_counter(counter: bytes) -> bytes:
    """Return ``counter`` read as a big-endian integer plus one.

    The result has the same width as the input and wraps to all zero bytes
    on overflow.
    """
    width = len(counter)
    if width == 0:
        return b""
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")