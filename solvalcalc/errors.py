"""Errors raised while loading accounts and preparing calculators."""

from __future__ import annotations

from .interface import b58encode


class InfError(Exception):
    """Base class for every error the package raises about pool data."""


class NoValidPdaError(InfError):
    """No bump seed yields an off-curve program-derived address."""

    def __init__(self) -> None:
        super().__init__("no valid PDA found")


class _KeyedError(InfError):
    _template = "{}"

    def __init__(self, pubkey) -> None:
        self.pubkey = memoryview(pubkey).tobytes()
        super().__init__(self._template.format(b58encode(self.pubkey)))


class MissingAccountError(_KeyedError):
    """A required account was not among the fetched accounts."""

    _template = "missing account {}"


class AccountFormatError(_KeyedError):
    """An account's data could not be decoded."""

    _template = "account data for {} not of expected format"


class UnknownCalculatorError(_KeyedError):
    """The sol value calculator program is not one that is supported."""

    _template = "unknown sol value calculator program {}"


class MissingSplDataError(_KeyedError):
    """No stake pool account is known for an SPL mint."""

    _template = "missing spl pool account data for mint {}"


class MissingCalculatorDataError(_KeyedError):
    """No sol value calculator data has been loaded for a mint."""

    _template = "missing sol value calculator data for mint {}"


class UnsupportedMintError(_KeyedError):
    """The mint is not in the pool's LST list."""

    _template = "unsupported mint {}"