"""Suffix accounts shared by the generic pool-backed sol value calculators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

IX_SUF_ACCS_LEN = 4


@dataclass(frozen=True)
class IxSufAccs(Generic[T]):
    """Suffix accounts: calculator state, pool state, pool program and its program data."""

    state: T
    pool_state: T
    pool_prog: T
    pool_progdata: T

    @classmethod
    def memset(cls, value: T) -> IxSufAccs[T]:
        """Suffix with every slot set to ``value``."""
        return cls(value, value, value, value)

    def __iter__(self) -> Iterator[T]:
        yield self.state
        yield self.pool_state
        yield self.pool_prog
        yield self.pool_progdata

    def __len__(self) -> int:
        return IX_SUF_ACCS_LEN

    def __getitem__(self, index: int) -> T:
        return tuple(self)[index]


IX_SUF_IS_WRITER: IxSufAccs[bool] = IxSufAccs.memset(False)
IX_SUF_IS_SIGNER: IxSufAccs[bool] = IxSufAccs.memset(False)

LST_TO_SOL_IX_SUF_IS_WRITER = IX_SUF_IS_WRITER
LST_TO_SOL_IX_SUF_IS_SIGNER = IX_SUF_IS_SIGNER
SOL_TO_LST_IX_SUF_IS_WRITER = IX_SUF_IS_WRITER
SOL_TO_LST_IX_SUF_IS_SIGNER = IX_SUF_IS_SIGNER