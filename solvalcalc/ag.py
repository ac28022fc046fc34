"""Dispatch over every supported sol value calculator program."""

from __future__ import annotations

import enum
from typing import Union

from .accs import (
    LidoCalcAccs,
    MarinadeCalcAccs,
    SanctumSplCalcAccs,
    SanctumSplMultiCalcAccs,
    SplCalcAccs,
    WsolCalcAccs,
)
from .calc import LidoCalc, MarinadeCalc, SplCalc, WsolCalc
from .interface import PUBKEY_LEN, b58decode
from .keys import LIDO, MARINADE, SANCTUM_SPL, SANCTUM_SPL_MULTI, SPL, WSOL_ID

SYSVAR_CLOCK_STR = "SysvarC1ock11111111111111111111111111111111"
SYSVAR_CLOCK = b58decode(SYSVAR_CLOCK_STR)

CalcAg = Union[LidoCalc, MarinadeCalc, SplCalc, WsolCalc]
"""Any supported sol value calculator."""

CalcAccsAg = Union[
    LidoCalcAccs,
    MarinadeCalcAccs,
    SanctumSplCalcAccs,
    SanctumSplMultiCalcAccs,
    SplCalcAccs,
    WsolCalcAccs,
]
"""Suffix accounts of any supported sol value calculator."""


class CalcAccsType(enum.Enum):
    """The kind of sol value calculator program."""

    LIDO = 0
    MARINADE = 1
    SANCTUM_SPL = 2
    SANCTUM_SPL_MULTI = 3
    SPL = 4
    WSOL = 5

    def program_id(self) -> bytes:
        """Program id of this kind of calculator."""
        return _PROGRAM_IDS[self]()


_PROGRAM_IDS = {
    CalcAccsType.LIDO: lambda: LIDO.id,
    CalcAccsType.MARINADE: lambda: MARINADE.id,
    CalcAccsType.SANCTUM_SPL: lambda: SANCTUM_SPL.id,
    CalcAccsType.SANCTUM_SPL_MULTI: lambda: SANCTUM_SPL_MULTI.id,
    CalcAccsType.SPL: lambda: SPL.id,
    CalcAccsType.WSOL: lambda: WSOL_ID,
}

_TYPES_BY_CLASS = {
    LidoCalcAccs: CalcAccsType.LIDO,
    MarinadeCalcAccs: CalcAccsType.MARINADE,
    SanctumSplCalcAccs: CalcAccsType.SANCTUM_SPL,
    SanctumSplMultiCalcAccs: CalcAccsType.SANCTUM_SPL_MULTI,
    SplCalcAccs: CalcAccsType.SPL,
    WsolCalcAccs: CalcAccsType.WSOL,
}


def calc_accs_type_from_program_id(program_id) -> CalcAccsType | None:
    """The calculator kind whose program id this is, or None if it is unknown."""
    raw = memoryview(program_id).tobytes()
    if len(raw) != PUBKEY_LEN:
        return None
    return next((ty for ty in CalcAccsType if ty.program_id() == raw), None)


def calc_accs_type(accs: CalcAccsAg) -> CalcAccsType:
    """The calculator kind of a set of suffix accounts."""
    try:
        return _TYPES_BY_CLASS[type(accs)]
    except KeyError:
        raise TypeError(
            f"unsupported calculator accounts {type(accs).__name__}"
        ) from None


def calc_keys(accs: CalcAccsAg) -> tuple[bytes, ...]:
    """Accounts to fetch and decode in order to build the matching calculator."""
    ty = calc_accs_type(accs)
    if ty is CalcAccsType.LIDO:
        return accs.pool_state_addr, SYSVAR_CLOCK
    if ty is CalcAccsType.MARINADE:
        return (accs.pool_state_addr,)
    if ty is CalcAccsType.WSOL:
        return ()
    return accs.stake_pool_addr, SYSVAR_CLOCK