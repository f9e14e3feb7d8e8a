"""Core models, types, and utilities."""

from token_intel.core.models import AddressMatch, ExtractionResult
from token_intel.core.types import AddressFamily, DetectorRegistry

__all__ = [
    "AddressMatch",
    "ExtractionResult",
    "AddressFamily",
    "DetectorRegistry",
]
