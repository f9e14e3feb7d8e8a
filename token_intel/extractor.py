"""Extract a chain id and token address from free-form chat text.

Usage:
    from token_intel import extract_token_info

    info = extract_token_info("ape 0x... on base")
    info.chain, info.token_address
"""

from __future__ import annotations

import logging

from token_intel.config import AppConfig, ExtractorConfig
from token_intel.core.models import ExtractionResult
from token_intel.core.utils import setup_logging, truncate
from token_intel.detectors.address_scanner import AddressScanner, default_registry
from token_intel.resolver.chain_resolver import ChainResolver

logger = logging.getLogger(__name__)


class TokenInfoExtractor:
    """Combines the chain resolver and the address scanner.

    A chain named in the text always beats the chain implied by the
    address shape. Missing chain or address is a normal outcome, never an
    error.
    """

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self._config = config or ExtractorConfig()
        self._resolver = ChainResolver()
        self._scanner = AddressScanner(
            default_registry(evm_default_chain=self._config.evm_default_chain)
        )

    def extract(self, message: object) -> ExtractionResult:
        if not isinstance(message, str):
            logger.debug(
                "Ignoring non-text message of type %s", type(message).__name__
            )
            return ExtractionResult()

        stated_chain = self._resolver.resolve(message)
        match = self._scanner.scan(message)

        chain = stated_chain
        if chain is None and match is not None:
            chain = match.implied_chain

        result = ExtractionResult(
            chain=chain,
            token_address=match.address if match is not None else None,
        )
        logger.debug(
            "Extracted chain=%s address=%s from %r",
            result.chain,
            result.token_address,
            truncate(message, self._config.log_preview_chars),
        )
        return result


def configure(config: AppConfig | None = None) -> TokenInfoExtractor:
    """Validate *config*, set up logging and build an extractor from it.

    Intended for services that embed the extractor and own the process.
    """
    config = config or AppConfig()
    setup_logging(level=config.log_level, json_format=config.log_json)
    config.validate()
    return TokenInfoExtractor(config.extractor)


# Fixed settings; environment overrides go through configure().
_DEFAULT_EXTRACTOR = TokenInfoExtractor(
    ExtractorConfig(evm_default_chain="eth", log_preview_chars=80)
)


def extract_token_info(message: str) -> ExtractionResult:
    """Extract chain and token address from *message* with default settings."""
    return _DEFAULT_EXTRACTOR.extract(message)
