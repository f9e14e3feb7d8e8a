"""Shared sample addresses for the test suite."""

from __future__ import annotations

import pytest

EVM_ADDRESS = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
SOLANA_ADDRESS = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"
TRON_ADDRESS = "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"
SUI_ADDRESS = "0x" + "5d4b3025" * 8


@pytest.fixture
def evm_address() -> str:
    return EVM_ADDRESS


@pytest.fixture
def solana_address() -> str:
    return SOLANA_ADDRESS


@pytest.fixture
def tron_address() -> str:
    return TRON_ADDRESS


@pytest.fixture
def sui_address() -> str:
    return SUI_ADDRESS
