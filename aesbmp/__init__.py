"""AES encryption of BMP pixel data in ECB, CBC, CFB, OFB and CTR modes."""

__version__ = "0.1.0"
__all__ = ["blockutils", "modes", "envelope", "bmp", "ui", "cli"]