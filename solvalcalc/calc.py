"""Sol value calculators for Lido, Marinade, SPL stake pools and wrapped SOL."""

from __future__ import annotations

from dataclasses import dataclass

from .core import U64_MAX, SolValCalc

MARINADE_FEE_CENTS_DENOM = 1_000_000


class CalcError(Exception):
    """Base class for sol value calculation failures."""

    default_message = "sol value calculation error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class RatioError(CalcError):
    """Ratio arithmetic overflowed or was given an invalid ratio."""

    default_message = "ratio math error"


class NotUpdatedError(CalcError):
    """The pool has not been updated for the current epoch."""

    default_message = "not yet updated this epoch"


class PausedError(CalcError):
    """The Marinade program is paused."""

    default_message = "marinade program paused"


class StakeWithdrawDisabledError(CalcError):
    """Marinade stake account withdrawals are disabled."""

    default_message = "stake withdrawals disabled for marinade"


def _check_u64(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} {value} out of u64 range")
    return value


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _is_zero(n: int, d: int) -> bool:
    return n == 0 or d == 0


def _floor_apply(n: int, d: int, amount: int) -> int | None:
    if _is_zero(n, d):
        return 0
    value = amount * n // d
    return value if value <= U64_MAX else None


def _ceil_apply(n: int, d: int, amount: int) -> int | None:
    if _is_zero(n, d):
        return 0
    value = _ceil_div(amount * n, d)
    return value if value <= U64_MAX else None


def _clamp_range(lo: int, hi: int) -> tuple[int, int] | None:
    if lo > hi or lo > U64_MAX:
        return None
    return lo, min(hi, U64_MAX)


def _floor_reverse(n: int, d: int, amount: int) -> tuple[int, int] | None:
    """All inputs x with floor(x * n / d) == amount."""
    if _is_zero(n, d):
        return (0, U64_MAX) if amount == 0 else None
    lo = _ceil_div(amount * d, n)
    hi = _ceil_div((amount + 1) * d, n) - 1
    return _clamp_range(lo, hi)


def _ceil_reverse(n: int, d: int, amount: int) -> tuple[int, int] | None:
    """All inputs x with ceil(x * n / d) == amount."""
    if _is_zero(n, d):
        return (0, U64_MAX) if amount == 0 else None
    if amount == 0:
        return 0, 0
    lo = (amount - 1) * d // n + 1
    hi = amount * d // n
    return _clamp_range(lo, hi)


def _fee_valid(n: int, d: int) -> bool:
    return _is_zero(n, d) or n <= d


def _fee_ceil_reverse_from_rem(n: int, d: int, rem: int) -> tuple[int, int] | None:
    """All amounts x with x - ceil(x * n / d) == rem."""
    if _is_zero(n, d):
        return rem, rem
    return _floor_reverse(d - n, d, rem)


def _fee_floor_reverse_from_rem(n: int, d: int, rem: int) -> tuple[int, int] | None:
    """All amounts x with x - floor(x * n / d) == rem."""
    if _is_zero(n, d):
        return rem, rem
    return _ceil_reverse(d - n, d, rem)


@dataclass(frozen=True)
class LidoCalc(SolValCalc):
    """Lido exchange rate as of ``computed_in_epoch``, evaluated at ``current_epoch``."""

    computed_in_epoch: int
    st_sol_supply: int
    sol_balance: int
    current_epoch: int

    def is_updated(self) -> bool:
        """Whether the exchange rate was computed in the current epoch or later."""
        return self.computed_in_epoch >= self.current_epoch

    def lst_to_sol(self, lst_amount: int) -> tuple[int, int]:
        _check_u64(lst_amount, "lst_amount")
        if not self.is_updated():
            raise NotUpdatedError()
        value = _floor_apply(self.sol_balance, self.st_sol_supply, lst_amount)
        if value is None:
            raise RatioError()
        return value, value

    def sol_to_lst(self, lamports_amount: int) -> tuple[int, int]:
        _check_u64(lamports_amount, "lamports_amount")
        if not self.is_updated():
            raise NotUpdatedError()
        result = _floor_reverse(self.sol_balance, self.st_sol_supply, lamports_amount)
        if result is None:
            raise RatioError()
        return result


@dataclass(frozen=True)
class MarinadeCalc(SolValCalc):
    """Parameters of the Marinade state needed to value mSOL."""

    available_reserve_balance: int
    circulating_ticket_balance: int
    delayed_unstake_cooling_down: int
    emergency_cooling_down: int
    msol_supply: int
    total_active_balance: int
    withdraw_stake_account_fee_cents: int
    withdraw_stake_account_enabled: bool
    paused: bool

    def total_cooling_down(self) -> int:
        """Lamports cooling down from delayed and emergency unstakes."""
        return self.delayed_unstake_cooling_down + self.emergency_cooling_down

    def total_lamports_under_control(self) -> int:
        """Active, cooling-down and reserve lamports together."""
        return (
            self.total_active_balance
            + self.total_cooling_down()
            + self.available_reserve_balance
        )

    def total_virtual_staked_lamports(self) -> int:
        """Lamports under control less circulating tickets, never below zero."""
        return max(0, self.total_lamports_under_control() - self.circulating_ticket_balance)

    def can_withdraw_stake(self) -> None:
        """Raise if stake withdrawals are currently impossible."""
        if self.paused:
            raise PausedError()
        if not self.withdraw_stake_account_enabled:
            raise StakeWithdrawDisabledError()

    def _fee(self) -> tuple[int, int]:
        n, d = self.withdraw_stake_account_fee_cents, MARINADE_FEE_CENTS_DENOM
        if not _fee_valid(n, d):
            raise RatioError()
        return n, d

    def lst_to_sol(self, lst_amount: int) -> tuple[int, int]:
        _check_u64(lst_amount, "lst_amount")
        self.can_withdraw_stake()
        sol_value = _floor_apply(
            self.total_virtual_staked_lamports(), self.msol_supply, lst_amount
        )
        if sol_value is None:
            raise RatioError()
        fee_n, fee_d = self._fee()
        fee = _floor_apply(fee_n, fee_d, sol_value)
        if fee is None:
            raise RatioError()
        rem = sol_value - fee
        return rem, rem

    def sol_to_lst(self, lamports_amount: int) -> tuple[int, int]:
        _check_u64(lamports_amount, "lamports_amount")
        self.can_withdraw_stake()
        fee_n, fee_d = self._fee()
        before_fee = _fee_floor_reverse_from_rem(fee_n, fee_d, lamports_amount)
        if before_fee is None:
            raise RatioError()
        n, d = self.total_virtual_staked_lamports(), self.msol_supply
        low = _floor_reverse(n, d, before_fee[0])
        high = _floor_reverse(n, d, before_fee[1])
        if low is None or high is None:
            raise RatioError()
        return low[0], high[1]


@dataclass(frozen=True)
class SplCalc(SolValCalc):
    """SPL stake pool parameters needed to value pool tokens.

    Assumes the stake withdrawal fee is always charged, rounded up.
    """

    last_update_epoch: int
    total_lamports: int
    pool_token_supply: int
    stake_withdrawal_fee_numerator: int
    stake_withdrawal_fee_denominator: int
    current_epoch: int

    def is_updated(self) -> bool:
        """Whether the pool was updated in the current epoch or later."""
        return self.last_update_epoch >= self.current_epoch

    def _fee(self) -> tuple[int, int]:
        n, d = self.stake_withdrawal_fee_numerator, self.stake_withdrawal_fee_denominator
        if not _fee_valid(n, d):
            raise RatioError()
        return n, d

    def lst_to_sol(self, lst_amount: int) -> tuple[int, int]:
        _check_u64(lst_amount, "lst_amount")
        if not self.is_updated():
            raise NotUpdatedError()
        fee_n, fee_d = self._fee()
        fee = _ceil_apply(fee_n, fee_d, lst_amount)
        if fee is None:
            raise RatioError()
        pool_tokens_burnt = lst_amount - fee
        lamports = _floor_apply(self.total_lamports, self.pool_token_supply, pool_tokens_burnt)
        if lamports is None:
            raise RatioError()
        return lamports, lamports

    def sol_to_lst(self, lamports_amount: int) -> tuple[int, int]:
        _check_u64(lamports_amount, "lamports_amount")
        burnt = _floor_reverse(self.total_lamports, self.pool_token_supply, lamports_amount)
        if burnt is None:
            raise RatioError()
        fee_n, fee_d = self._fee()
        low = _fee_ceil_reverse_from_rem(fee_n, fee_d, burnt[0])
        high = _fee_ceil_reverse_from_rem(fee_n, fee_d, burnt[1])
        if low is None or high is None:
            raise RatioError()
        return low[0], high[1]


@dataclass(frozen=True, order=True)
class WsolCalc(SolValCalc):
    """Wrapped SOL is worth exactly its amount in lamports."""

    def lst_to_sol(self, lst_amount: int) -> tuple[int, int]:
        _check_u64(lst_amount, "lst_amount")
        return lst_amount, lst_amount

    def sol_to_lst(self, lamports_amount: int) -> tuple[int, int]:
        _check_u64(lamports_amount, "lamports_amount")
        return lamports_amount, lamports_amount