"""Suffix accounts of the supported sol value calculator programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .core import SolValCalcAccs
from .generic import IX_SUF_IS_SIGNER, IX_SUF_IS_WRITER, IxSufAccs
from .interface import PUBKEY_LEN
from .keys import LIDO, MARINADE, SANCTUM_SPL, SANCTUM_SPL_MULTI, SPL, ProgramKeys


def _pubkey(value, name: str) -> bytes:
    raw = memoryview(value).tobytes()
    if len(raw) != PUBKEY_LEN:
        raise ValueError(f"{name} must be {PUBKEY_LEN} bytes, got {len(raw)}")
    return raw


def _suffix(program: ProgramKeys, pool_state: bytes) -> IxSufAccs[bytes]:
    return IxSufAccs(
        state=program.state_id,
        pool_state=pool_state,
        pool_prog=program.pool_prog_id,
        pool_progdata=program.pool_progdata_id,
    )


@dataclass(frozen=True, order=True)
class LidoCalcAccs(SolValCalcAccs):
    """Suffix accounts of the Lido calculator; ``pool_state_addr`` is the Lido state."""

    pool_state_addr: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "pool_state_addr", _pubkey(self.pool_state_addr, "pool_state_addr"))

    def suf_keys_owned(self) -> IxSufAccs[bytes]:
        return _suffix(LIDO, self.pool_state_addr)

    def suf_is_writer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_WRITER

    def suf_is_signer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_SIGNER


@dataclass(frozen=True, order=True)
class MarinadeCalcAccs(SolValCalcAccs):
    """Suffix accounts of the Marinade calculator; ``pool_state_addr`` is the Marinade state."""

    pool_state_addr: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "pool_state_addr", _pubkey(self.pool_state_addr, "pool_state_addr"))

    def suf_keys_owned(self) -> IxSufAccs[bytes]:
        return _suffix(MARINADE, self.pool_state_addr)

    def suf_is_writer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_WRITER

    def suf_is_signer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_SIGNER


@dataclass(frozen=True, order=True)
class _StakePoolCalcAccs(SolValCalcAccs):
    stake_pool_addr: bytes

    program: ClassVar[ProgramKeys]

    def __post_init__(self) -> None:
        object.__setattr__(self, "stake_pool_addr", _pubkey(self.stake_pool_addr, "stake_pool_addr"))

    def suf_keys_owned(self) -> IxSufAccs[bytes]:
        return _suffix(self.program, self.stake_pool_addr)

    def suf_is_writer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_WRITER

    def suf_is_signer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_SIGNER


@dataclass(frozen=True, order=True)
class SplCalcAccs(_StakePoolCalcAccs):
    """Suffix accounts of the SPL stake pool calculator."""

    program: ClassVar[ProgramKeys] = SPL

    def suf_keys_owned(self) -> IxSufAccs[bytes]:
        return _suffix(SPL, self.stake_pool_addr)

    def suf_is_writer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_WRITER

    def suf_is_signer(self) -> IxSufAccs[bool]:
        return IX_SUF_IS_SIGNER


@dataclass(frozen=True, order=True)
class SanctumSplCalcAccs(_StakePoolCalcAccs):
    """Suffix accounts of the Sanctum SPL stake pool calculator."""

    program: ClassVar[ProgramKeys] = SANCTUM_SPL


@dataclass(frozen=True, order=True)
class SanctumSplMultiCalcAccs(_StakePoolCalcAccs):
    """Suffix accounts of the Sanctum multi-validator SPL stake pool calculator."""

    program: ClassVar[ProgramKeys] = SANCTUM_SPL_MULTI


@dataclass(frozen=True, order=True)
class WsolCalcAccs(SolValCalcAccs):
    """The wSOL calculator takes no suffix accounts."""

    def suf_keys_owned(self) -> tuple[bytes, ...]:
        return ()

    def suf_is_writer(self) -> tuple[bool, ...]:
        return ()

    def suf_is_signer(self) -> tuple[bool, ...]:
        return ()