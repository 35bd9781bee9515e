"""Interactive command that encrypts or decrypts the pixels of a BMP file."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from pathlib import Path

from aesbmp import ui
from aesbmp.bmp import new_bmp_filename, read_bmp, write_bmp_with_header
from aesbmp.modes import (
    CipherError,
    decrypt_cbc,
    decrypt_cfb,
    decrypt_ctr,
    decrypt_ecb,
    decrypt_ofb,
    encrypt_cbc,
    encrypt_cfb,
    encrypt_ctr,
    encrypt_ecb,
    encrypt_ofb,
)

DEFAULT_DIRECTORY = "files"
KEY_LENGTH = 16


class Operation(Enum):
    """Whether pixels are encrypted or decrypted."""

    ENCRYPT = "e"
    DECRYPT = "d"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def noun(self) -> str:
        return "cifrado" if self is Operation.ENCRYPT else "decifrado"

    @property
    def past(self) -> str:
        return "cifrada" if self is Operation.ENCRYPT else "decifrada"


class Mode(Enum):
    """AES mode of operation."""

    ECB = "ECB"
    CBC = "CBC"
    CFB = "CFB"
    OFB = "OFB"
    CTR = "CTR"


_CHAINED = {
    Mode.CBC: (encrypt_cbc, decrypt_cbc),
    Mode.CFB: (encrypt_cfb, decrypt_cfb),
    Mode.OFB: (encrypt_ofb, decrypt_ofb),
    Mode.CTR: (encrypt_ctr, decrypt_ctr),
}


def transform(
    operation: Operation, mode: Mode, key: bytes, iv: bytes | None, pixels: bytes
) -> bytes:
    """Apply ``operation`` in ``mode`` to ``pixels``; ``iv`` is unused for ECB."""
    encrypting = operation is Operation.ENCRYPT
    if mode is Mode.ECB:
        return (encrypt_ecb if encrypting else decrypt_ecb)(key, pixels)
    if iv is None:
        raise CipherError(f"{mode.value} mode needs an initialisation vector")
    encrypt, decrypt = _CHAINED[mode]
    return (encrypt if encrypting else decrypt)(iv, key, pixels)


def process_file(
    operation: Operation,
    mode: Mode,
    path: str | Path,
    key: bytes,
    iv: bytes | None,
) -> str:
    """Transform the pixels of the BMP at ``path`` and write them to a new file.

    The new file sits beside the original, named with ``_<e|d><MODE>`` before
    the suffix. Returns its path.
    """
    header, _, pixels = read_bmp(path)
    result = transform(operation, mode, key, iv, pixels)
    new_name = new_bmp_filename(str(path), operation.suffix + mode.value)
    write_bmp_with_header(new_name, header, result)
    return new_name


def main(argv: list[str] | None = None) -> int:
    """Run the interactive encryption dialog; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="aesbmp", description="Encrypt or decrypt BMP pixel data with AES."
    )
    parser.add_argument(
        "--directory",
        default=DEFAULT_DIRECTORY,
        help="directory holding the BMP files (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    selected, operation_index = ui.get_option(
        "Operación a realizar:", ["Cifrado", "Decifrado"]
    )
    if not selected:
        return 0
    operation = list(Operation)[operation_index]

    selected, mode_index = ui.get_option(
        "Modo de operación:", [mode.value for mode in Mode]
    )
    if not selected:
        return 0
    mode = list(Mode)[mode_index]

    selected, path = ui.get_file(args.directory)
    if not selected:
        return 0

    selected, key_text = ui.get_key(
        KEY_LENGTH, "AES key (16 bytes)", f"Ingresa la llave de {operation.noun}"
    )
    if not selected:
        return 0

    iv = None
    if mode is not Mode.ECB:
        selected, iv_text = ui.get_key(
            KEY_LENGTH, "C0 (16 bytes)", "Ingresa el vector de inicialización:"
        )
        if not selected:
            return 0
        iv = iv_text.encode("utf-8")

    try:
        new_name = process_file(operation, mode, path, key_text.encode("utf-8"), iv)
    except ValueError as err:
        ui.show_message("La imagen tuvo errores al ser cifrada", True)
        print(err, file=sys.stderr)
        return 1
    except OSError as err:
        ui.show_message(f"La imagen no pudo ser {operation.past}!\n{err}", True)
        return 1

    ui.show_message(f"La imagen {new_name} ha sido {operation.past} con exito!", False)
    return 0