"""Heuristic chain and token address extraction from chat messages."""

from token_intel.core.models import AddressMatch, ExtractionResult
from token_intel.core.types import AddressFamily
from token_intel.detectors import AddressScanner, classify_address
from token_intel.extractor import TokenInfoExtractor, configure, extract_token_info
from token_intel.resolver import (
    ChainResolver,
    is_known_chain,
    normalize_chain_name,
    supported_chains,
)

__all__ = [
    "AddressFamily",
    "AddressMatch",
    "AddressScanner",
    "ChainResolver",
    "ExtractionResult",
    "TokenInfoExtractor",
    "classify_address",
    "configure",
    "extract_token_info",
    "is_known_chain",
    "normalize_chain_name",
    "supported_chains",
]

__version__ = "0.1.0"
