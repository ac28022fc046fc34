"""Instructions and account metas as handed to transaction builders."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from .interface import PUBKEY_LEN, b58encode


class Role(enum.IntEnum):
    """The role of an account in a transaction."""

    READONLY = 0
    WRITABLE = 1
    READONLY_SIGNER = 2
    WRITABLE_SIGNER = 3


def role_from_signer_writable(signer: bool, writable: bool) -> Role:
    """The role of an account with the given signer and writable flags."""
    if signer:
        return Role.WRITABLE_SIGNER if writable else Role.READONLY_SIGNER
    return Role.WRITABLE if writable else Role.READONLY


def _pubkey(value) -> bytes:
    raw = memoryview(value).tobytes()
    if len(raw) != PUBKEY_LEN:
        raise ValueError(f"address must be {PUBKEY_LEN} bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class AccountMeta:
    """An account address and its role."""

    address: bytes
    role: Role

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", _pubkey(self.address))
        object.__setattr__(self, "role", Role(self.role))

    def to_dict(self) -> dict:
        """JSON-ready form with a base58 address and a numeric role."""
        return {"address": b58encode(self.address), "role": int(self.role)}


@dataclass(frozen=True)
class Instruction:
    """A program instruction: data, accounts and the program to invoke."""

    data: bytes
    accounts: tuple[AccountMeta, ...]
    program_address: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", memoryview(self.data).tobytes())
        object.__setattr__(self, "accounts", tuple(self.accounts))
        object.__setattr__(self, "program_address", _pubkey(self.program_address))

    def to_dict(self) -> dict:
        """JSON-ready form with camelCase keys and base58 addresses."""
        return {
            "data": self.data,
            "accounts": [meta.to_dict() for meta in self.accounts],
            "programAddress": b58encode(self.program_address),
        }


def keys_signer_writable_to_metas(
    keys: Iterable[bytes], signer: Iterable[bool], writable: Iterable[bool]
) -> tuple[AccountMeta, ...]:
    """Zip keys with their signer and writable flags into account metas."""
    return tuple(
        AccountMeta(key, role_from_signer_writable(is_signer, is_writable))
        for key, is_signer, is_writable in zip(keys, signer, writable)
    )