"""Message digests: a common base and MD5."""

from __future__ import annotations

import struct
from collections.abc import Iterator

__all__ = ["Hash", "MD5"]

_MASK = 0xFFFFFFFF

_MD5_SHIFTS = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

_MD5_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    return memoryview(data).tobytes()


def _rol(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _ror(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & _MASK


def _pad(data: bytes, byteorder: str) -> bytes:
    """Append the 0x80 marker, zeros and the 64-bit bit length in ``byteorder``."""
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    zeros = b"\x00" * ((55 - len(data)) % 64)
    return data + b"\x80" + zeros + bit_length.to_bytes(8, byteorder)


def _blocks(padded: bytes) -> Iterator[bytes]:
    for offset in range(0, len(padded), 64):
        yield padded[offset:offset + 64]


class Hash:
    """A computed message digest."""

    def __init__(self, digest: bytes) -> None:
        self._digest = bytes(digest)

    def digest(self) -> bytes:
        """Return the digest bytes."""
        return self._digest

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self._digest.hex()

    def __len__(self) -> int:
        return len(self._digest)


class MD5(Hash):
    """MD5 digest of a byte string."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        state = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]
        for block in _blocks(_pad(_as_bytes(data), "little")):
            words = struct.unpack("<16I", block)
            a, b, c, d = state
            for i in range(64):
                if i < 16:
                    f = (b & c) | (~b & d)
                    g = i
                elif i < 32:
                    f = (d & b) | (~d & c)
                    g = (5 * i + 1) & 0x0F
                elif i < 48:
                    f = b ^ c ^ d
                    g = (3 * i + 5) & 0x0F
                else:
                    f = c ^ (b | (~d & _MASK))
                    g = (7 * i) & 0x0F
                f &= _MASK
                rotated = _rol((a + f + _MD5_K[i] + words[g]) & _MASK, _MD5_SHIFTS[i])
                a, b, c, d = d, (b + rotated) & _MASK, b, c
            state = [(x + y) & _MASK for x, y in zip(state, (a, b, c, d))]
        super().__init__(struct.pack("<4I", *state))