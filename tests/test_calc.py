import pytest
from hypothesis import given
from hypothesis import strategies as st

from solvalcalc.calc import (
    CalcError,
    LidoCalc,
    MarinadeCalc,
    NotUpdatedError,
    PausedError,
    RatioError,
    SplCalc,
    StakeWithdrawDisabledError,
    WsolCalc,
)
from solvalcalc.core import U64_MAX

amounts = st.integers(min_value=0, max_value=10**9)
balances = st.integers(min_value=1, max_value=10**12)


def _marinade(**overrides):
    params = dict(
        available_reserve_balance=1_000,
        circulating_ticket_balance=0,
        delayed_unstake_cooling_down=0,
        emergency_cooling_down=0,
        msol_supply=1_000,
        total_active_balance=1_000,
        withdraw_stake_account_fee_cents=0,
        withdraw_stake_account_enabled=True,
        paused=False,
    )
    params.update(overrides)
    return MarinadeCalc(**params)


def _spl(**overrides):
    params = dict(
        last_update_epoch=10,
        total_lamports=2_000,
        pool_token_supply=1_000,
        stake_withdrawal_fee_numerator=0,
        stake_withdrawal_fee_denominator=0,
        current_epoch=10,
    )
    params.update(overrides)
    return SplCalc(**params)


def test_error_messages():
    assert str(NotUpdatedError()) == "not yet updated this epoch"
    assert str(RatioError()) == "ratio math error"
    assert str(PausedError()) == "marinade program paused"
    assert str(StakeWithdrawDisabledError()) == "stake withdrawals disabled for marinade"
    assert issubclass(PausedError, CalcError)


@given(amounts)
def test_wsol_is_identity(amount):
    calc = WsolCalc()
    assert calc.lst_to_sol(amount) == (amount, amount)
    assert calc.sol_to_lst(amount) == (amount, amount)


def test_wsol_rejects_out_of_range():
    with pytest.raises(ValueError):
        WsolCalc().lst_to_sol(U64_MAX + 1)


def test_lido_double_rate():
    calc = LidoCalc(computed_in_epoch=5, st_sol_supply=1_000, sol_balance=2_000, current_epoch=5)
    assert calc.lst_to_sol(5) == (10, 10)


def test_lido_not_updated():
    calc = LidoCalc(computed_in_epoch=4, st_sol_supply=1, sol_balance=1, current_epoch=5)
    assert not calc.is_updated()
    with pytest.raises(NotUpdatedError):
        calc.lst_to_sol(1)
    with pytest.raises(NotUpdatedError):
        calc.sol_to_lst(1)


def test_lido_overflow():
    calc = LidoCalc(computed_in_epoch=1, st_sol_supply=1, sol_balance=2, current_epoch=1)
    with pytest.raises(RatioError):
        calc.lst_to_sol(U64_MAX)


@given(balances, balances, amounts)
def test_lido_round_trip(supply, balance, amount):
    calc = LidoCalc(computed_in_epoch=3, st_sol_supply=supply, sol_balance=balance, current_epoch=3)
    sol, sol_max = calc.lst_to_sol(amount)
    assert sol == sol_max
    lo, hi = calc.sol_to_lst(sol)
    assert lo <= amount <= hi
    assert calc.lst_to_sol(lo)[0] == sol
    assert calc.lst_to_sol(hi)[0] == sol


def test_marinade_totals():
    calc = _marinade(
        available_reserve_balance=5,
        delayed_unstake_cooling_down=3,
        emergency_cooling_down=2,
        total_active_balance=10,
        circulating_ticket_balance=4,
    )
    assert calc.total_cooling_down() == 5
    assert calc.total_lamports_under_control() == 20
    assert calc.total_virtual_staked_lamports() == 16


def test_marinade_virtual_staked_saturates():
    calc = _marinade(circulating_ticket_balance=10**6)
    assert calc.total_virtual_staked_lamports() == 0


def test_marinade_paused_and_disabled():
    with pytest.raises(PausedError):
        _marinade(paused=True).lst_to_sol(1)
    with pytest.raises(PausedError):
        _marinade(paused=True, withdraw_stake_account_enabled=False).sol_to_lst(1)
    with pytest.raises(StakeWithdrawDisabledError):
        _marinade(withdraw_stake_account_enabled=False).lst_to_sol(1)
    with pytest.raises(StakeWithdrawDisabledError):
        _marinade(withdraw_stake_account_enabled=False).can_withdraw_stake()


def test_marinade_fee_above_hundred_percent():
    calc = _marinade(withdraw_stake_account_fee_cents=1_000_001)
    with pytest.raises(RatioError):
        calc.lst_to_sol(100)
    with pytest.raises(RatioError):
        calc.sol_to_lst(100)


def test_marinade_fee_reduces_value():
    no_fee = _marinade()
    with_fee = _marinade(withdraw_stake_account_fee_cents=100_000)
    assert with_fee.lst_to_sol(1_000)[0] < no_fee.lst_to_sol(1_000)[0]


def test_spl_not_updated_only_for_lst_to_sol():
    calc = _spl(last_update_epoch=9)
    assert not calc.is_updated()
    with pytest.raises(NotUpdatedError):
        calc.lst_to_sol(1)
    lo, hi = calc.sol_to_lst(10)
    assert lo <= hi


def test_spl_invalid_fee():
    calc = _spl(stake_withdrawal_fee_numerator=2, stake_withdrawal_fee_denominator=1)
    with pytest.raises(RatioError):
        calc.lst_to_sol(10)
    with pytest.raises(RatioError):
        calc.sol_to_lst(10)


def test_spl_fee_reduces_value():
    no_fee = _spl()
    with_fee = _spl(stake_withdrawal_fee_numerator=1, stake_withdrawal_fee_denominator=10)
    assert with_fee.lst_to_sol(1_000)[0] < no_fee.lst_to_sol(1_000)[0]


@given(
    balances,
    balances,
    st.integers(min_value=1, max_value=10_000).flatmap(
        lambda d: st.tuples(st.integers(min_value=0, max_value=d - 1), st.just(d))
    ),
    amounts,
)
def test_spl_round_trip(total, supply, fee, amount):
    numerator, denominator = fee
    calc = _spl(
        total_lamports=total,
        pool_token_supply=supply,
        stake_withdrawal_fee_numerator=numerator,
        stake_withdrawal_fee_denominator=denominator,
    )
    sol, sol_max = calc.lst_to_sol(amount)
    assert sol == sol_max
    lo, hi = calc.sol_to_lst(sol)
    assert lo <= amount <= hi
    assert calc.lst_to_sol(lo)[0] == sol


def test_spl_rejects_negative_amount():
    with pytest.raises(ValueError):
        _spl().lst_to_sol(-1)