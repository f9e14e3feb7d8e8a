"""Runs every address detector over a message and keeps one match."""

from __future__ import annotations

import logging

from token_intel.core.models import AddressMatch
from token_intel.core.types import AddressFamily, DetectorRegistry
from token_intel.detectors.evm_detector import EvmDetector
from token_intel.detectors.solana_detector import SolanaDetector
from token_intel.detectors.sui_detector import SuiDetector
from token_intel.detectors.tron_detector import TronDetector

logger = logging.getLogger(__name__)


def default_registry(evm_default_chain: str = "eth") -> DetectorRegistry:
    """Detectors in scan order: evm, solana, tron, sui."""
    return [
        EvmDetector(default_chain=evm_default_chain),
        SolanaDetector(),
        TronDetector(),
        SuiDetector(),
    ]


class AddressScanner:
    """Find a token address and the chain its shape implies.

    Every detector is tried against the whole message. When several
    families match, the one registered last wins. A Tron address is also
    a valid Base58 string, so it overrides the Solana match, and a Sui
    address never matches the EVM pattern because of the word boundary.
    """

    def __init__(self, detectors: DetectorRegistry | None = None) -> None:
        self._detectors: DetectorRegistry = (
            list(detectors) if detectors is not None else default_registry()
        )

    @property
    def families(self) -> list[AddressFamily]:
        return [d.family for d in self._detectors]

    def scan(self, message: str) -> AddressMatch | None:
        retained: AddressMatch | None = None
        for detector in self._detectors:
            match = detector.detect(message)
            if match is not None:
                if retained is not None:
                    logger.debug(
                        "%s address overrides %s address",
                        match.family,
                        retained.family,
                    )
                retained = match
        return retained

    def classify(self, address: str) -> AddressFamily | None:
        """Return the family whose shape the whole *address* has."""
        candidate = address.strip()
        family: AddressFamily | None = None
        for detector in self._detectors:
            if detector.matches(candidate):
                family = detector.family
        return family


_DEFAULT_SCANNER = AddressScanner()


def classify_address(address: str) -> AddressFamily | None:
    """Classify a standalone address string by its lexical shape."""
    if not isinstance(address, str):
        return None
    return _DEFAULT_SCANNER.classify(address)
