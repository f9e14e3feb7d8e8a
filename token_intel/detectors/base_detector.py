"""Abstract base class for address-family detectors."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from token_intel.core.models import AddressMatch
from token_intel.core.types import AddressFamily


class BaseDetector(ABC):
    """Every address-family detector supplies a pattern and an implied chain.

    To add a new family:
        1. Create ``myfamily_detector.py`` in this package.
        2. Subclass ``BaseDetector``.
        3. Implement ``family``, ``implied_chain`` and ``pattern``.
        4. Register the detector in ``default_registry()``.

    The pattern must capture the address in group 1.
    """

    @property
    @abstractmethod
    def family(self) -> AddressFamily:
        """Return the address family this detector recognises."""
        ...

    @property
    @abstractmethod
    def implied_chain(self) -> str:
        """Return the canonical chain id an address of this shape implies."""
        ...

    @property
    @abstractmethod
    def pattern(self) -> re.Pattern[str]:
        ...

    def detect(self, message: str) -> AddressMatch | None:
        """Return the first address of this family in *message*, if any.

        Parameters
        ----------
        message:
            Raw message text, original case.

        Returns
        -------
        AddressMatch | None
            The first match, or ``None`` when the shape does not occur.
        """
        m = self.pattern.search(message)
        if m is None:
            return None
        return AddressMatch(
            address=m.group(1),
            family=self.family,
            implied_chain=self.implied_chain,
        )

    def matches(self, address: str) -> bool:
        """Return whether *address* as a whole has this family's shape."""
        m = self.pattern.fullmatch(address)
        return m is not None
