"""SHA-1 and SHA-256 message digests."""

from __future__ import annotations

import struct

from .hashing import Hash, _as_bytes, _blocks, _MASK, _pad, _rol, _ror

__all__ = ["SHA1", "SHA256"]

_SHA1_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_SHA256_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_SHA256_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


class SHA1(Hash):
    """SHA-1 digest of a byte string."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        state = list(_SHA1_INITIAL)
        for block in _blocks(_pad(_as_bytes(data), "big")):
            w = list(struct.unpack(">16I", block))
            for i in range(16, 80):
                w.append(_rol(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

            a, b, c, d, e = state
            for i, word in enumerate(w):
                if i < 20:
                    f = (b & c) | ((~b & _MASK) & d)
                    k = 0x5A827999
                elif i < 40:
                    f = b ^ c ^ d
                    k = 0x6ED9EBA1
                elif i < 60:
                    f = (b & c) | (b & d) | (c & d)
                    k = 0x8F1BBCDC
                else:
                    f = b ^ c ^ d
                    k = 0xCA62C1D6
                temp = (_rol(a, 5) + f + e + k + word) & _MASK
                a, b, c, d, e = temp, a, _rol(b, 30), c, d
            state = [(x + y) & _MASK for x, y in zip(state, (a, b, c, d, e))]
        super().__init__(struct.pack(">5I", *state))


class SHA256(Hash):
    """SHA-256 digest of a byte string."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        state = list(_SHA256_INITIAL)
        for block in _blocks(_pad(_as_bytes(data), "big")):
            w = list(struct.unpack(">16I", block))
            for i in range(16, 64):
                s0 = _ror(w[i - 15], 7) ^ _ror(w[i - 15], 18) ^ (w[i - 15] >> 3)
                s1 = _ror(w[i - 2], 17) ^ _ror(w[i - 2], 19) ^ (w[i - 2] >> 10)
                w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK)

            a, b, c, d, e, f, g, h = state
            for k, word in zip(_SHA256_K, w):
                s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
                ch = (e & f) ^ ((~e & _MASK) & g)
                t1 = (h + s1 + ch + k + word) & _MASK
                s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
                maj = (a & b) ^ (a & c) ^ (b & c)
                t2 = (s0 + maj) & _MASK
                h, g, f, e = g, f, e, (d + t1) & _MASK
                d, c, b, a = c, b, a, (t1 + t2) & _MASK
            state = [(x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h))]
        super().__init__(struct.pack(">8I", *state))