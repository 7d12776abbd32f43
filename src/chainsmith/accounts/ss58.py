"""
SS58 address encoding.

SS58 is the Substrate address format:

    base58(prefix || public_key || blake2b_512(b"SS58PRE" || prefix || public_key)[:n])

where `n` is 2 for 32 and 33 byte keys. Used to turn a raw ECDSA public key
into the address the beefy session key expects.
"""

from __future__ import annotations

import hashlib
from typing import Final

ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
"""Base58 alphabet (Bitcoin style, excludes 0, O, I, l)."""

CHECKSUM_PREFIX: Final[bytes] = b"SS58PRE"

DEFAULT_SS58_FORMAT: Final[int] = 42
"""Generic Substrate network prefix."""

# Payload length -> checksum length
_CHECKSUM_LENGTHS: Final[dict[int, int]] = {
    1: 1,
    2: 1,
    4: 1,
    8: 1,
    32: 2,
    33: 2,
}


def base58_encode(data: bytes) -> str:
    """Encode bytes as Base58; leading zero bytes become leading '1's."""
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))

    num = int.from_bytes(data, "big")
    result: list[str] = []
    while num > 0:
        num, remainder = divmod(num, 58)
        result.append(ALPHABET[remainder])

    result.extend([ALPHABET[0]] * leading_zeros)
    return "".join(reversed(result))


def encode_prefix(ss58_format: int) -> bytes:
    """Encode a network prefix as one byte (< 64) or two bytes (< 16384)."""
    if not 0 <= ss58_format < 16384 or ss58_format in (46, 47):
        raise ValueError(f"Invalid SS58 format: {ss58_format}")
    if ss58_format < 64:
        return bytes([ss58_format])
    return bytes([
        ((ss58_format & 0b1111_1100) >> 2) | 0b0100_0000,
        (ss58_format >> 8) | ((ss58_format & 0b0000_0011) << 6),
    ])


def encode_address(public_key: bytes, ss58_format: int = DEFAULT_SS58_FORMAT) -> str:
    """
    Encode a raw public key as an SS58 address.

    Args:
        public_key: Raw key bytes (32 for sr25519/ed25519, 33 for ECDSA)
        ss58_format: Network prefix

    Raises:
        ValueError: If the key length or the prefix is not encodable
    """
    public_key = bytes(public_key)
    checksum_length = _CHECKSUM_LENGTHS.get(len(public_key))
    if checksum_length is None:
        raise ValueError(f"Cannot SS58-encode a {len(public_key)} byte key")

    payload = encode_prefix(ss58_format) + public_key
    checksum = hashlib.blake2b(CHECKSUM_PREFIX + payload, digest_size=64).digest()
    return base58_encode(payload + checksum[:checksum_length])
