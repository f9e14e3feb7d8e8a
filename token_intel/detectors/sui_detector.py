"""Sui object address detector."""

from __future__ import annotations

import re
from typing import ClassVar

from token_intel.core.types import AddressFamily
from token_intel.detectors.base_detector import BaseDetector

# 0x followed by exactly 64 hex characters
_SUI_PATTERN = re.compile(r"\b(0x[0-9a-fA-F]{64})\b")


class SuiDetector(BaseDetector):
    """Detect Sui addresses (0x + 64 hex)."""

    _family: ClassVar[AddressFamily] = AddressFamily.SUI

    @property
    def family(self) -> AddressFamily:
        return self._family

    @property
    def implied_chain(self) -> str:
        return "sui"

    @property
    def pattern(self) -> re.Pattern[str]:
        return _SUI_PATTERN
