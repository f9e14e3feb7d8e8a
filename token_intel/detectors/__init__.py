"""Pluggable address-family detectors."""

from token_intel.detectors.base_detector import BaseDetector
from token_intel.detectors.evm_detector import EvmDetector
from token_intel.detectors.solana_detector import SolanaDetector
from token_intel.detectors.tron_detector import TronDetector
from token_intel.detectors.sui_detector import SuiDetector
from token_intel.detectors.address_scanner import (
    AddressScanner,
    classify_address,
    default_registry,
)

__all__ = [
    "BaseDetector",
    "EvmDetector",
    "SolanaDetector",
    "TronDetector",
    "SuiDetector",
    "AddressScanner",
    "classify_address",
    "default_registry",
]
