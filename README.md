# aesbmp

Encrypt and decrypt the pixel data of BMP images with AES, using one of
five block cipher modes of operation: ECB, CBC, CFB, OFB or CTR.

The BMP header is kept, so an encrypted image is still a BMP file that an
image viewer can open. This makes the differences between the modes easy to
see: ECB leaves the outline of the picture visible, while the other modes
turn it into noise.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Interactive use

```
aesbmp
aesbmp --directory some/folder
```

`--directory` names the folder that holds the BMP files; it defaults to
`files` and is created if it is missing. The command then asks, one line at
a time:

1. whether to encrypt or decrypt (`Cifrado` / `Decifrado`);
2. the mode of operation (`ECB`, `CBC`, `CFB`, `OFB`, `CTR`);
3. one of the `.bmp` files in the directory (hidden files are not listed);
4. the AES key, exactly 16 characters;
5. for every mode except ECB, the initialisation vector, exactly 16
   characters (the initial counter in CTR mode).

A choice can be given by its number or by its exact text. In the two option
menus an empty answer picks the first entry; in the file list an empty
answer cancels. `q` or `esc` cancels a menu, and end of input (Ctrl-D)
cancels any prompt. A key or vector longer than 16 characters is cut to 16;
a shorter one is asked for again. Keys and vectors are encoded as UTF-8, so
use ASCII characters to get exactly 16 bytes.

The result is written next to the input file. Its name is the original name
with a suffix: `e` for encryption or `d` for decryption, followed by the
mode. Encrypting `files/photo.bmp` in CBC mode gives `files/photo_eCBC.bmp`,
and decrypting that file in CBC mode gives `files/photo_eCBC_dCBC.bmp`.

The command exits with status 0 on success or when cancelled, and with
status 1 when the image could not be processed (a bad key or padding, or a
file that could not be read or written).

## Library use

### Cipher modes

`aesbmp.modes` works on plain bytes. Keys may be 16, 24 or 32 bytes long;
IVs and counters must be 16 bytes.

```python
from aesbmp.modes import encrypt_cbc, decrypt_cbc

key = bytes(16)
iv = bytes(range(16))

ciphertext = encrypt_cbc(iv, key, b"pixel data")
assert decrypt_cbc(iv, key, ciphertext) == b"pixel data"
```

The functions are `encrypt_ecb(key, data)` / `decrypt_ecb(key, data)` and,
for the other modes, `encrypt_<mode>(iv, key, data)` /
`decrypt_<mode>(iv, key, data)` with `<mode>` one of `cbc`, `cfb`, `ofb`,
`ctr`. ECB, CBC, CFB and OFB pad with PKCS#7 before encrypting and check and
remove the padding after decrypting (`pad_pkcs7`, `unpad_pkcs7`). CTR adds no
padding, and encryption and decryption are the same operation. A bad key
size, IV length, ciphertext length or padding raises
`aesbmp.modes.CipherError`, a subclass of `ValueError`.

`aesbmp.blockutils` holds the two helpers the modes share: `xor_blocks(a, b)`
and `increment_counter(counter)`, which treats the counter as a big-endian
number and wraps to zero on overflow.

### IV-prefixed CBC

`aesbmp.envelope.encrypt_aes(data, key)` encrypts with AES-CBC under a random
IV and returns the IV followed by the ciphertext;
`decrypt_aes(ciphertext, key)` reverses it. Its `unpad` checks only the last
padding byte.

### BMP files

```python
from aesbmp.bmp import read_bmp, write_bmp_with_header

header, raw_header, pixels = read_bmp("files/photo.bmp")
write_bmp_with_header("files/copy.bmp", header, pixels)
```

`read_bmp` returns the decoded 54-byte header (`BmpHeader`, with `unpack` and
`pack`), the raw bytes before the pixel offset, and every byte from the pixel
offset to the end of the file. `write_bmp_with_header` sets the image and
file sizes in the header to fit the new pixel data and fills any gap up to
the pixel offset with zero bytes; `write_bmp` writes raw header bytes and
pixel bytes as they are. Also there: `new_bmp_filename(name, method)`,
`invert_image(header, pixels)` and `format_rgb_values` /
`print_rgb_values`, which show 24-bit pixels as (R,G,B) triples.

### Whole files

```python
from aesbmp.cli import Mode, Operation, process_file

key = bytes(16)
iv = bytes(range(16))
output = process_file(Operation.ENCRYPT, Mode.OFB, "files/photo.bmp", key, iv)
```

`transform(operation, mode, key, iv, pixels)` does the same on bytes;
`iv` is ignored for ECB and may be `None` there.

## What it does not do

The pixel data is encrypted as raw bytes, row padding included; images are
not decoded, so palettes and compressed BMPs are not treated specially, and
only the 24-bit layout is assumed by `invert_image` and the RGB listing. The
prompts are plain line input, not a full-screen menu or file browser: files
can only be picked from the one directory given. There is no way to pass the
key, IV or file on the command line.