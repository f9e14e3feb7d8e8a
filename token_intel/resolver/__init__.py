"""Chain name resolution."""

from token_intel.resolver.chain_aliases import CHAIN_ALIASES, supported_chains
from token_intel.resolver.chain_resolver import (
    ChainResolver,
    is_known_chain,
    normalize_chain_name,
)

__all__ = [
    "CHAIN_ALIASES",
    "ChainResolver",
    "is_known_chain",
    "normalize_chain_name",
    "supported_chains",
]
