"""Readers for fields of fetched account data."""

from __future__ import annotations

import struct

_U64 = struct.Struct("<Q")

CLOCK_EPOCH_OFFSET = 16
MINT_SUPPLY_OFFSET = 36
TOKEN_ACCOUNT_AMOUNT_OFFSET = 64


def _u64_le_at(data, offset: int) -> int | None:
    raw = memoryview(data).tobytes()
    if len(raw) < offset + _U64.size:
        return None
    return _U64.unpack_from(raw, offset)[0]


def epoch_from_clock_data(data) -> int | None:
    """Current epoch from clock sysvar data, or None if the data is too short."""
    return _u64_le_at(data, CLOCK_EPOCH_OFFSET)


def token_supply_from_mint_data(data) -> int | None:
    """Total supply from token mint data, or None if the data is too short."""
    return _u64_le_at(data, MINT_SUPPLY_OFFSET)


def balance_from_token_acc_data(data) -> int | None:
    """Token amount from token account data, or None if the data is too short."""
    return _u64_le_at(data, TOKEN_ACCOUNT_AMOUNT_OFFSET)