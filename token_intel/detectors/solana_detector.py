"""Solana address detector."""

from __future__ import annotations

import re
from typing import ClassVar

from token_intel.core.types import AddressFamily
from token_intel.detectors.base_detector import BaseDetector

# Base58 alphabet (no 0, O, I, l), 32-44 chars
_BASE58_PATTERN = re.compile(r"\b([1-9A-HJ-NP-Za-km-z]{32,44})\b")


class SolanaDetector(BaseDetector):
    """Detect Solana addresses (Base58, 32-44 chars)."""

    _family: ClassVar[AddressFamily] = AddressFamily.SOLANA

    @property
    def family(self) -> AddressFamily:
        return self._family

    @property
    def implied_chain(self) -> str:
        return "solana"

    @property
    def pattern(self) -> re.Pattern[str]:
        return _BASE58_PATTERN
