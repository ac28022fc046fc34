# solvalcalc

Pure-Python SOL value calculators for liquid staking tokens (LSTs), with no
third-party dependencies.

A calculator converts an amount of an LST into the lamports it is worth, and a
lamport amount back into the LST amounts that are worth it. Every conversion
returns an inclusive `(min, max)` tuple of integers. The package also describes
the suffix accounts each on-chain calculator program expects, encodes the
calculator instruction data, and derives program addresses.

Supported calculators:

- Lido (stSOL)
- Marinade (mSOL)
- SPL stake pools: the SPL deploy, Sanctum SPL and Sanctum SPL multi
- wrapped SOL

## Installing

```
pip install .
```

## Modules

- `solvalcalc.calc`: `LidoCalc`, `MarinadeCalc`, `SplCalc` and `WsolCalc`, each
  with `lst_to_sol(amount)` and `sol_to_lst(amount)`. Amounts must be integers
  in the u64 range (otherwise `TypeError` or `ValueError`). Failed conversions
  raise a subclass of `CalcError`: `RatioError`, `NotUpdatedError` (Lido and
  SPL when the current epoch is newer than the pool's last update),
  `PausedError` or `StakeWithdrawDisabledError` (Marinade).
  - `LidoCalc(computed_in_epoch, st_sol_supply, sol_balance, current_epoch)`
  - `MarinadeCalc(available_reserve_balance, circulating_ticket_balance,
    delayed_unstake_cooling_down, emergency_cooling_down, msol_supply,
    total_active_balance, withdraw_stake_account_fee_cents,
    withdraw_stake_account_enabled, paused)`; the fee is in cents of a basis
    point (denominator 1,000,000).
  - `SplCalc(last_update_epoch, total_lamports, pool_token_supply,
    stake_withdrawal_fee_numerator, stake_withdrawal_fee_denominator,
    current_epoch)`; the withdrawal fee is always charged and rounded up.
  - `WsolCalc()`: one to one.
- `solvalcalc.core`: the abstract `SolValCalc` and `SolValCalcAccs` interfaces,
  the one-account prefix `IxPreAccs`, and the instruction data encoders
  `lst_to_sol_ix_data` and `sol_to_lst_ix_data` (a discriminant byte, 0 or 1,
  followed by a little-endian u64).
- `solvalcalc.generic`: `IxSufAccs`, the four suffix accounts (`state`,
  `pool_state`, `pool_prog`, `pool_progdata`) of pool-backed calculators.
- `solvalcalc.accs`: suffix accounts per program. `LidoCalcAccs` and
  `MarinadeCalcAccs` take a `pool_state_addr`; `SplCalcAccs`,
  `SanctumSplCalcAccs` and `SanctumSplMultiCalcAccs` take a `stake_pool_addr`;
  `WsolCalcAccs` has no suffix accounts. Each offers `suf_keys_owned()`,
  `suf_is_writer()`, `suf_is_signer()` and `suf_len()`.
- `solvalcalc.ag`: `CalcAccsType` names each calculator kind and gives its
  `program_id()`. `calc_accs_type_from_program_id` maps a program id back to a
  kind (or `None`), `calc_accs_type` gives the kind of a suffix-accounts object,
  and `calc_keys` lists the accounts (stake pool or state account, plus the
  clock sysvar where an epoch is needed) that hold a calculator's inputs.
- `solvalcalc.keys`: `ProgramKeys` for `LIDO`, `MARINADE`, `SPL`, `SANCTUM_SPL`
  and `SANCTUM_SPL_MULTI` (program id, pool program, pool program data, and the
  derived state account), plus `WSOL_ID`.
- `solvalcalc.pda`: `create_raw_pda`, `create_pda`, `find_pda`, `find_state`,
  `is_on_curve` and the `FoundPda(address, bump)` tuple. `find_pda` tries bumps
  255 down to 1 and raises `NoValidPdaError` if none gives an off-curve address.
- `solvalcalc.instruction`: `Role`, `AccountMeta`, `Instruction`,
  `role_from_signer_writable` and `keys_signer_writable_to_metas`; `to_dict()`
  gives a JSON-ready form with base58 addresses.
- `solvalcalc.utils`: reads the epoch from clock sysvar data, the supply from
  token mint data and the amount from token account data, returning `None` when
  the data is too short.
- `solvalcalc.interface`: `Account(data, owner)`, `b58encode` and `b58decode`.
- `solvalcalc.errors`: `InfError` and its subclasses for missing or malformed
  accounts, unknown calculator programs and unsupported mints; messages show
  the public key in base58.

## Example

```python
from solvalcalc.calc import SplCalc, WsolCalc

WsolCalc().lst_to_sol(1_000)        # (1000, 1000)

calc = SplCalc(
    last_update_epoch=500,
    total_lamports=1_100,
    pool_token_supply=1_000,
    stake_withdrawal_fee_numerator=0,
    stake_withdrawal_fee_denominator=1,
    current_epoch=500,
)
calc.lst_to_sol(1_000)              # (1100, 1100)
```

```python
from solvalcalc.ag import CalcAccsType, calc_accs_type_from_program_id
from solvalcalc.interface import b58decode

kind = calc_accs_type_from_program_id(
    b58decode("wsoGmxQLSvwWpuaidCApxN5kEowLe2HLQLJhCQnj4bE")
)
assert kind is CalcAccsType.WSOL
```

## What this package does not do

Calculators are built from field values you supply. The package does not parse
Lido, Marinade or stake pool state accounts into calculators, does not fetch
accounts from a network, and does not quote trades or build swap or liquidity
instructions for a pool.

## Running the tests

```
pip install -e ".[test]"
pytest
```