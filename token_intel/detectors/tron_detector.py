"""Tron address detector."""

from __future__ import annotations

import re
from typing import ClassVar

from token_intel.core.types import AddressFamily
from token_intel.detectors.base_detector import BaseDetector

# Leading T plus 33 Base58 characters
_TRON_PATTERN = re.compile(r"\b(T[1-9A-HJ-NP-Za-km-z]{33})\b")


class TronDetector(BaseDetector):
    """Detect Tron addresses (T + 33 Base58 chars)."""

    _family: ClassVar[AddressFamily] = AddressFamily.TRON

    @property
    def family(self) -> AddressFamily:
        return self._family

    @property
    def implied_chain(self) -> str:
        return "tron"

    @property
    def pattern(self) -> re.Pattern[str]:
        return _TRON_PATTERN
