"""Account data and base58 public-key encoding shared across the package."""

from __future__ import annotations

from dataclasses import dataclass

PUBKEY_LEN = 32

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def b58encode(data) -> str:
    """Encode bytes as a base58 string using the Bitcoin alphabet."""
    raw = memoryview(data).tobytes()
    stripped = raw.lstrip(b"\0")
    leading_zeros = len(raw) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a base58 string; raises ValueError on characters outside the alphabet."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * leading_ones + body


@dataclass(frozen=True)
class Account:
    """A fetched on-chain account: its raw data and the program that owns it."""

    data: bytes
    owner: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", memoryview(self.data).tobytes())
        owner = memoryview(self.owner).tobytes()
        if len(owner) != PUBKEY_LEN:
            raise ValueError(f"owner must be {PUBKEY_LEN} bytes, got {len(owner)}")
        object.__setattr__(self, "owner", owner)