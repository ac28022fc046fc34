"""Program-derived address computation."""

from __future__ import annotations

import hashlib
from typing import Iterable, NamedTuple

from .errors import NoValidPdaError

MAX_SEED_LEN = 32
MAX_SEEDS = 16
PDA_MARKER = b"ProgramDerivedAddress"
STATE_SEED = b"state"

_P = 2**255 - 19
_D = (-121665 * pow(121666, -1, _P)) % _P
_Y_MASK = (1 << 255) - 1


class FoundPda(NamedTuple):
    """A program-derived address together with the bump seed that produced it."""

    address: bytes
    bump: int


def _pubkey(value) -> bytes:
    raw = memoryview(value).tobytes()
    if len(raw) != 32:
        raise ValueError(f"program id must be 32 bytes, got {len(raw)}")
    return raw


def is_on_curve(point) -> bool:
    """Whether 32 bytes decompress to a point on the ed25519 curve."""
    raw = _pubkey(point)
    y = int.from_bytes(raw, "little") & _Y_MASK
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x = u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P) % _P
    vxx = v * x * x % _P
    return vxx == u or vxx == (-u) % _P


def create_raw_pda(seeds: Iterable, program_id) -> bytes:
    """Hash seeds and program id into an address without checking the curve.

    Raises ValueError if there are more than 16 seeds or a seed exceeds 32 bytes.
    """
    program_id = _pubkey(program_id)
    hasher = hashlib.sha256()
    for count, seed in enumerate(seeds, start=1):
        raw = memoryview(seed).tobytes()
        if count > MAX_SEEDS:
            raise ValueError(f"more than {MAX_SEEDS} seeds")
        if len(raw) > MAX_SEED_LEN:
            raise ValueError(f"seed longer than {MAX_SEED_LEN} bytes")
        hasher.update(raw)
    hasher.update(program_id)
    hasher.update(PDA_MARKER)
    return hasher.digest()


def create_pda(seeds: Iterable, program_id) -> bytes | None:
    """The derived address, or None when it lies on the curve."""
    address = create_raw_pda(seeds, program_id)
    return None if is_on_curve(address) else address


def find_pda(seeds: Iterable, program_id) -> FoundPda:
    """Search bumps from 255 down to 1 for the first off-curve address."""
    seed_list = [memoryview(seed).tobytes() for seed in seeds]
    for bump in range(255, 0, -1):
        address = create_pda([*seed_list, bytes([bump])], program_id)
        if address is not None:
            return FoundPda(address, bump)
    raise NoValidPdaError()


def find_state(program_id) -> FoundPda:
    """The state account PDA of a sol value calculator program."""
    return find_pda([STATE_SEED], program_id)