import pytest

from solvalcalc.accs import (
    LidoCalcAccs,
    MarinadeCalcAccs,
    SanctumSplCalcAccs,
    SanctumSplMultiCalcAccs,
    SplCalcAccs,
    WsolCalcAccs,
)
from solvalcalc.keys import LIDO, MARINADE, SANCTUM_SPL, SANCTUM_SPL_MULTI, SPL

POOL = bytes(range(32))


@pytest.mark.parametrize(
    "accs, program",
    [
        (LidoCalcAccs(POOL), LIDO),
        (MarinadeCalcAccs(POOL), MARINADE),
        (SplCalcAccs(POOL), SPL),
        (SanctumSplCalcAccs(POOL), SANCTUM_SPL),
        (SanctumSplMultiCalcAccs(POOL), SANCTUM_SPL_MULTI),
    ],
)
def test_suffix_keys_order(accs, program):
    keys = accs.suf_keys_owned()
    assert list(keys) == [
        program.state_id,
        POOL,
        program.pool_prog_id,
        program.pool_progdata_id,
    ]
    assert keys.pool_state == POOL
    assert list(accs.suf_is_writer()) == [False] * 4
    assert list(accs.suf_is_signer()) == [False] * 4
    assert accs.suf_len() == len(keys)


def test_wsol_has_no_suffix():
    accs = WsolCalcAccs()
    assert tuple(accs.suf_keys_owned()) == ()
    assert tuple(accs.suf_is_writer()) == ()
    assert tuple(accs.suf_is_signer()) == ()
    assert accs.suf_len() == 0


def test_spl_variants_differ():
    spl = SplCalcAccs(POOL).suf_keys_owned()
    sanctum = SanctumSplCalcAccs(POOL).suf_keys_owned()
    multi = SanctumSplMultiCalcAccs(POOL).suf_keys_owned()
    assert spl.pool_prog != sanctum.pool_prog != multi.pool_prog
    assert spl.state != multi.state


def test_equality_and_ordering():
    low = SplCalcAccs(bytes(32))
    high = SplCalcAccs(b"\xff" * 32)
    assert low < high
    assert SplCalcAccs(bytearray(POOL)) == SplCalcAccs(POOL)
    assert SplCalcAccs(POOL) != SanctumSplCalcAccs(POOL)


@pytest.mark.parametrize("cls", [LidoCalcAccs, MarinadeCalcAccs, SplCalcAccs, SanctumSplCalcAccs])
def test_bad_address_length(cls):
    with pytest.raises(ValueError):
        cls(b"\x01" * 31)