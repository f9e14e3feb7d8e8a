"""EVM address detector (Ethereum, BSC, Polygon, Base, Arbitrum, etc.)."""

from __future__ import annotations

import re
from typing import ClassVar

from token_intel.core.types import AddressFamily
from token_intel.detectors.base_detector import BaseDetector

# Standard EVM address: 0x followed by exactly 40 hex characters
_EVM_PATTERN = re.compile(r"\b(0x[0-9a-fA-F]{40})\b")


class EvmDetector(BaseDetector):
    """Detect EVM-compatible addresses (0x + 40 hex).

    The shape is shared by every EVM chain, so the implied chain is a
    convention rather than a deduction.
    """

    _family: ClassVar[AddressFamily] = AddressFamily.EVM

    def __init__(self, default_chain: str = "eth") -> None:
        self._default_chain = default_chain

    @property
    def family(self) -> AddressFamily:
        return self._family

    @property
    def implied_chain(self) -> str:
        return self._default_chain

    @property
    def pattern(self) -> re.Pattern[str]:
        return _EVM_PATTERN
