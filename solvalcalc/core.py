"""Sol value calculator interface: calculators, account suffixes and instruction data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")

U64_MAX = 2**64 - 1
MAX_SUFFIX_LEN = 255


class SolValCalc(ABC):
    """Converts between LST amounts and SOL value.

    Both conversions return an inclusive ``(min, max)`` pair.
    """

    @abstractmethod
    def lst_to_sol(self, lst_amount: int) -> tuple[int, int]:
        """SOL value, in lamports, of ``lst_amount`` LST."""

    @abstractmethod
    def sol_to_lst(self, lamports_amount: int) -> tuple[int, int]:
        """LST amount whose SOL value is ``lamports_amount`` lamports."""


class SolValCalcAccs(ABC):
    """Suffix accounts appended to the prefix accounts of an interface instruction.

    The three sequences must all have the same length, at most 255.
    """

    @abstractmethod
    def suf_keys_owned(self) -> Sequence[bytes]:
        """Public keys of the suffix accounts."""

    @abstractmethod
    def suf_is_writer(self) -> Sequence[bool]:
        """Writable flag of each suffix account."""

    @abstractmethod
    def suf_is_signer(self) -> Sequence[bool]:
        """Signer flag of each suffix account."""

    def suf_len(self) -> int:
        """Number of suffix accounts."""
        length = len(self.suf_is_signer())
        if length > MAX_SUFFIX_LEN:
            raise ValueError(f"suffix of {length} accounts exceeds {MAX_SUFFIX_LEN}")
        return length


IX_PRE_ACCS_LEN = 1


@dataclass(frozen=True)
class IxPreAccs(Generic[T]):
    """Prefix accounts shared by every sol value calculator instruction."""

    lst_mint: T

    @classmethod
    def memset(cls, value: T) -> IxPreAccs[T]:
        """Prefix with every slot set to ``value``."""
        return cls(lst_mint=value)

    def __iter__(self) -> Iterator[T]:
        yield self.lst_mint

    def __len__(self) -> int:
        return IX_PRE_ACCS_LEN


IX_PRE_IS_WRITER: IxPreAccs[bool] = IxPreAccs.memset(False)
IX_PRE_IS_SIGNER: IxPreAccs[bool] = IxPreAccs.memset(False)

LST_TO_SOL_IX_PRE_IS_WRITER = IX_PRE_IS_WRITER
LST_TO_SOL_IX_PRE_IS_SIGNER = IX_PRE_IS_SIGNER
SOL_TO_LST_IX_PRE_IS_WRITER = IX_PRE_IS_WRITER
SOL_TO_LST_IX_PRE_IS_SIGNER = IX_PRE_IS_SIGNER

LST_TO_SOL_IX_DISCM = 0
LST_TO_SOL_IX_DATA_LEN = 9
SOL_TO_LST_IX_DISCM = 1
SOL_TO_LST_IX_DATA_LEN = 9


def _ix_data(discm: int, amount: int) -> bytes:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an int, got {type(amount).__name__}")
    if not 0 <= amount <= U64_MAX:
        raise ValueError(f"amount {amount} out of u64 range")
    return bytes([discm]) + amount.to_bytes(8, "little")


def lst_to_sol_ix_data(lst_amount: int) -> bytes:
    """Instruction data for LstToSol: discriminant then little-endian u64."""
    return _ix_data(LST_TO_SOL_IX_DISCM, lst_amount)


def sol_to_lst_ix_data(lamports_amount: int) -> bytes:
    """Instruction data for SolToLst: discriminant then little-endian u64."""
    return _ix_data(SOL_TO_LST_IX_DISCM, lamports_amount)