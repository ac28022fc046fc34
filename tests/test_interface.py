import pytest
from hypothesis import given, strategies as st

from solvalcalc.interface import Account, b58decode, b58encode

WSOL_ID = "wsoGmxQLSvwWpuaidCApxN5kEowLe2HLQLJhCQnj4bE"
LIDO_ID = "1idUSy4MGGKyKhvjSnGZ6Zc7Q4eKQcibym4BkEEw9KR"


def test_empty_encodes_to_empty():
    assert b58encode(b"") == ""
    assert b58decode("") == b""


def test_zero_pubkey_is_all_ones():
    assert b58encode(bytes(32)) == "1" * 32
    assert b58decode("1" * 32) == bytes(32)


def test_known_vector():
    assert b58encode(b"Hello World") == "JxF12TrwUP45BMd"


@pytest.mark.parametrize("program_id", [WSOL_ID, LIDO_ID])
def test_program_ids_decode_to_pubkeys(program_id):
    decoded = b58decode(program_id)
    assert len(decoded) == 32
    assert b58encode(decoded) == program_id


@pytest.mark.parametrize("bad", ["0", "O", "I", "l", "abc!"])
def test_invalid_characters_rejected(bad):
    with pytest.raises(ValueError):
        b58decode(bad)


@given(st.binary(max_size=64))
def test_round_trip(data):
    assert b58decode(b58encode(data)) == data


@given(st.binary(min_size=32, max_size=32))
def test_pubkey_encoding_length_bounded(data):
    assert 32 <= len(b58encode(data)) <= 44 or data.count(0) == 32


def test_account_normalises_data():
    account = Account(data=bytearray(b"ab"), owner=bytes(32))
    assert account.data == b"ab"
    assert account.owner == bytes(32)


def test_account_rejects_bad_owner_length():
    with pytest.raises(ValueError):
        Account(data=b"", owner=bytes(31))