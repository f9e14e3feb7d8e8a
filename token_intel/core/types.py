"""Shared type aliases and enumerations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from token_intel.detectors.base_detector import BaseDetector


class AddressFamily(str, Enum):
    """Lexical address shapes recognised in chat text."""

    EVM = "evm"
    SOLANA = "solana"
    TRON = "tron"
    SUI = "sui"

    def __str__(self) -> str:
        return self.value


# Ordered list of detectors the scanner runs; order decides which match survives.
DetectorRegistry = list["BaseDetector"]
