"""SOL value calculators for liquid staking tokens, their instruction accounts and PDAs."""

__version__ = "0.1.0"

__all__ = [
    "accs",
    "ag",
    "calc",
    "core",
    "errors",
    "generic",
    "instruction",
    "interface",
    "keys",
    "pda",
    "utils",
]