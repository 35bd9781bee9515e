import io

import pytest

from aesbmp.bmp import BmpHeader, read_bmp, write_bmp_with_header
from aesbmp.cli import Mode, Operation, main, process_file, transform
from aesbmp.modes import CipherError

BLOCK_KEY = bytes(range(16))
IV = bytes(range(16, 32))
PIXELS = bytes(range(40))


def _make_bmp(path):
    write_bmp_with_header(path, BmpHeader(width=4, height=2), PIXELS[:24])


def test_operation_suffixes_in_output_names(tmp_path):
    original = tmp_path / "pic.bmp"
    _make_bmp(original)
    encrypted_path = process_file(Operation.ENCRYPT, Mode.ECB, original, BLOCK_KEY, None)
    assert encrypted_path == str(tmp_path / "pic_eECB.bmp")
    decrypted_path = process_file(
        Operation.DECRYPT, Mode.ECB, encrypted_path, BLOCK_KEY, None
    )
    assert decrypted_path == str(tmp_path / "pic_eECB_dECB.bmp")
    assert read_bmp(decrypted_path)[2] == PIXELS[:24]


@pytest.mark.parametrize(
    "choice, expected_name",
    [
        ("1", "img_eECB.bmp"),
        ("2", "img_eCBC.bmp"),
        ("3", "img_eCFB.bmp"),
        ("4", "img_eOFB.bmp"),
        ("5", "img_eCTR.bmp"),
    ],
)
def test_mode_order_matches_menu(monkeypatch, tmp_path, choice, expected_name):
    _make_bmp(tmp_path / "img.bmp")
    typed_key = "0123456789abcdef"
    typed_iv = "fedcba9876543210"
    answers = f"1\n{choice}\n1\n{typed_key}\n"
    if choice != "1":
        answers += f"{typed_iv}\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(answers))
    assert main(["--directory", str(tmp_path)]) == 0
    assert (tmp_path / expected_name).exists()


def test_ecb_known_answer():
    plaintext = bytes.fromhex("00112233445566778899aabbccddeeff")
    result = transform(Operation.ENCRYPT, Mode.ECB, BLOCK_KEY, None, plaintext)
    assert result[:16] == bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")
    assert len(result) == 32


@pytest.mark.parametrize("mode", list(Mode))
def test_transform_round_trip(mode):
    encrypted = transform(Operation.ENCRYPT, mode, BLOCK_KEY, IV, PIXELS)
    assert encrypted[:16] != PIXELS[:16]
    assert transform(Operation.DECRYPT, mode, BLOCK_KEY, IV, encrypted) == PIXELS


def test_ctr_keeps_length():
    encrypted = transform(Operation.ENCRYPT, Mode.CTR, BLOCK_KEY, IV, PIXELS)
    assert len(encrypted) == len(PIXELS)


@pytest.mark.parametrize("mode", [Mode.CBC, Mode.CFB, Mode.OFB, Mode.CTR])
def test_transform_without_iv_raises(mode):
    with pytest.raises(CipherError):
        transform(Operation.ENCRYPT, mode, BLOCK_KEY, None, PIXELS)


def test_transform_bad_key_raises():
    with pytest.raises(CipherError):
        transform(Operation.ENCRYPT, Mode.ECB, b"short", None, PIXELS)


def test_process_file_round_trip(tmp_path):
    original = tmp_path / "img.bmp"
    _make_bmp(original)
    encrypted_path = process_file(Operation.ENCRYPT, Mode.CBC, original, BLOCK_KEY, IV)
    assert encrypted_path == str(tmp_path / "img_eCBC.bmp")
    header, _, encrypted = read_bmp(encrypted_path)
    assert header.image_size == len(encrypted)
    assert encrypted != PIXELS[:24]
    decrypted_path = process_file(
        Operation.DECRYPT, Mode.CBC, encrypted_path, BLOCK_KEY, IV
    )
    assert decrypted_path == str(tmp_path / "img_eCBC_dCBC.bmp")
    assert read_bmp(decrypted_path)[2] == PIXELS[:24]


def test_process_file_rejects_non_bmp_name(tmp_path):
    other = tmp_path / "img.png"
    _make_bmp(other)
    with pytest.raises(ValueError):
        process_file(Operation.ENCRYPT, Mode.ECB, other, BLOCK_KEY, None)


def test_main_encrypts_then_decrypts(monkeypatch, tmp_path):
    original = tmp_path / "img.bmp"
    _make_bmp(original)
    typed_key = "0123456789abcdef"
    typed_iv = "fedcba9876543210"

    monkeypatch.setattr(
        "sys.stdin", io.StringIO(f"1\n2\n1\n{typed_key}\n{typed_iv}\n")
    )
    assert main(["--directory", str(tmp_path)]) == 0
    encrypted_path = tmp_path / "img_eCBC.bmp"
    assert encrypted_path.exists()

    monkeypatch.setattr(
        "sys.stdin", io.StringIO(f"2\n2\nimg_eCBC.bmp\n{typed_key}\n{typed_iv}\n")
    )
    assert main(["--directory", str(tmp_path)]) == 0
    assert read_bmp(tmp_path / "img_eCBC_dCBC.bmp")[2] == PIXELS[:24]


def test_main_quit_creates_nothing(monkeypatch, tmp_path):
    _make_bmp(tmp_path / "img.bmp")
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["img.bmp"]


def test_main_reports_decryption_failure(monkeypatch, tmp_path, capsys):
    _make_bmp(tmp_path / "img.bmp")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n1\n0123456789abcdef\n"))
    assert main(["--directory", str(tmp_path)]) == 1
    assert "La imagen tuvo errores al ser cifrada" in capsys.readouterr().out
    assert not (tmp_path / "img_dECB.bmp").exists()