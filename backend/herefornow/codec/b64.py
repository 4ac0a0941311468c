"""Standard base64 (RFC 4648 §4) encoder/decoder.

The encoder writes into a buffer sized to the exact output length before the
first byte is produced, so encoding never reallocates. Padding:

    n % 3 == 0  ->  no padding
    n % 3 == 1  ->  "=="
    n % 3 == 2  ->  "="
"""

from __future__ import annotations

from herefornow.codec.errors import DataURIError

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = ord("=")

_DECODE_TABLE: dict[int, int] = {c: i for i, c in enumerate(ALPHABET)}


def encoded_length(n: int) -> int:
    """Output length for ``n`` input bytes: 4 * ceil(n / 3)."""
    return 4 * ((n + 2) // 3)


def b64encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes to a padded base64 string. Empty input gives ``""``."""
    src = bytes(data)
    n = len(src)
    out = bytearray(encoded_length(n))
    if n == 0:
        return ""

    full = n - n % 3
    o = 0
    for i in range(0, full, 3):
        chunk = (src[i] << 16) | (src[i + 1] << 8) | src[i + 2]
        out[o] = ALPHABET[(chunk >> 18) & 0x3F]
        out[o + 1] = ALPHABET[(chunk >> 12) & 0x3F]
        out[o + 2] = ALPHABET[(chunk >> 6) & 0x3F]
        out[o + 3] = ALPHABET[chunk & 0x3F]
        o += 4

    rest = n - full
    if rest == 1:
        chunk = src[full] << 16
        out[o] = ALPHABET[(chunk >> 18) & 0x3F]
        out[o + 1] = ALPHABET[(chunk >> 12) & 0x3F]
        out[o + 2] = PAD
        out[o + 3] = PAD
    elif rest == 2:
        chunk = (src[full] << 16) | (src[full + 1] << 8)
        out[o] = ALPHABET[(chunk >> 18) & 0x3F]
        out[o + 1] = ALPHABET[(chunk >> 12) & 0x3F]
        out[o + 2] = ALPHABET[(chunk >> 6) & 0x3F]
        out[o + 3] = PAD

    return out.decode("ascii")


def b64decode(text: str | bytes) -> bytes:
    """Decode a padded standard base64 string.

    Raises:
        DataURIError: length not a multiple of 4, characters outside the
            alphabet, or padding anywhere but the last two positions.
    """
    if isinstance(text, str):
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise DataURIError("base64 text must be ASCII") from e
    else:
        raw = bytes(text)
    if len(raw) % 4:
        raise DataURIError(f"base64 length {len(raw)} is not a multiple of 4")
    if not raw:
        return b""

    pad = 0
    if raw.endswith(b"=="):
        pad = 2
    elif raw.endswith(b"="):
        pad = 1
    body = raw[: len(raw) - pad]
    if PAD in body:
        raise DataURIError("misplaced base64 padding")

    out = bytearray(len(raw) // 4 * 3 - pad)
    o = 0
    acc = 0
    bits = 0
    for c in body:
        value = _DECODE_TABLE.get(c)
        if value is None:
            raise DataURIError(f"invalid base64 character {chr(c)!r}")
        acc = (acc << 6) | value
        bits += 6
        if bits >= 8:
            bits -= 8
            out[o] = (acc >> bits) & 0xFF
            o += 1
            acc &= (1 << bits) - 1

    return bytes(out)
