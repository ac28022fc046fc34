"""Program ids and state accounts of the supported sol value calculator programs."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from .interface import PUBKEY_LEN, b58decode, b58encode
from .pda import FoundPda
from .pda import find_state as _find_state


def _decode_pubkey(text: str) -> bytes:
    raw = b58decode(text)
    if len(raw) != PUBKEY_LEN:
        raise ValueError(f"{text!r} does not decode to a {PUBKEY_LEN}-byte public key")
    return raw


@dataclass(frozen=True)
class ProgramKeys:
    """Keys of one calculator program and of the stake pool program it reads."""

    id_str: str
    pool_prog_id_str: str
    pool_progdata_id_str: str

    @cached_property
    def id(self) -> bytes:
        """The calculator program id."""
        return _decode_pubkey(self.id_str)

    @cached_property
    def pool_prog_id(self) -> bytes:
        """The stake pool program id."""
        return _decode_pubkey(self.pool_prog_id_str)

    @cached_property
    def pool_progdata_id(self) -> bytes:
        """The stake pool program's program data account."""
        return _decode_pubkey(self.pool_progdata_id_str)

    def find_state(self) -> FoundPda:
        """The calculator's state PDA and its bump."""
        return _find_state(self.id)

    @cached_property
    def _state(self) -> FoundPda:
        return self.find_state()

    @property
    def state_id(self) -> bytes:
        """Address of the calculator's state account."""
        return self._state.address

    @property
    def state_bump(self) -> int:
        """Bump seed of the calculator's state account."""
        return self._state.bump

    @property
    def state_id_str(self) -> str:
        """Base58 address of the calculator's state account."""
        return b58encode(self.state_id)


LIDO = ProgramKeys(
    id_str="1idUSy4MGGKyKhvjSnGZ6Zc7Q4eKQcibym4BkEEw9KR",
    pool_prog_id_str="CrX7kMhLC3cSsXJdT7JDgqrRVWGnUpX3gfEfxxU2NVLi",
    pool_progdata_id_str="CHZNLhDXKrsXBmmv947RFciquwBsn2NdABmhpxoX3wgZ",
)

MARINADE = ProgramKeys(
    id_str="mare3SCyfZkAndpBRBeonETmkCCB3TJTTrz8ZN2dnhP",
    pool_prog_id_str="MarBmsSgKXdrN1egZf5sqe1TMai9K1rChYNDJgjq7aD",
    pool_progdata_id_str="4PQH9YmfuKrVyZaibkLYpJZPv2FPaybhq2GAuBcWMSBf",
)

SPL = ProgramKeys(
    id_str="sp1V4h2gWorkGhVcazBc22Hfo2f5sd7jcjT4EDPrWFF",
    pool_prog_id_str="SPoo1Ku8WFXoNDMHPsrGSTSG1Y47rzgn41SLUNakuHy",
    pool_progdata_id_str="EmiU8AQkB2sswTxVB6aCmsAJftoowZGGDXuytm6X65R3",
)

SANCTUM_SPL = ProgramKeys(
    id_str="sspUE1vrh7xRoXxGsg7vR1zde2WdGtJRbyK9uRumBDy",
    pool_prog_id_str="SP12tWFxD9oJsVWNavTTBZvMbA6gkAmxtVgxdqvyvhY",
    pool_progdata_id_str="Cn5fegqLh8Fmvffisr4Wk3LmuaUgMMzTFfEuidpZFsvV",
)

SANCTUM_SPL_MULTI = ProgramKeys(
    id_str="ssmbu3KZxgonUtjEMCKspZzxvUQCxAFnyh1rcHUeEDo",
    pool_prog_id_str="SPMBzsVUuoHA4Jm6KunbsotaahvVikZs1JyTW6iJvbn",
    pool_progdata_id_str="HxBTMuB7cFBPVWVJjTi9iBF8MPd7mfY1QnrrWfLAySFd",
)

WSOL_ID_STR = "wsoGmxQLSvwWpuaidCApxN5kEowLe2HLQLJhCQnj4bE"
WSOL_ID = _decode_pubkey(WSOL_ID_STR)